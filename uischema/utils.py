"""
Common utilities shared across components in the library
"""

# Standard
from typing import Any, Optional

# Sentinel for missing dict values
__MISSING__ = "__MISSING__"

# Delimiter used for nested dict keys in the library config
NESTED_DICT_DELIM = "."

## Dicts #######################################################################


def nested_get(dct: dict, key: str, dflt=None) -> Any:
    """Helper to get values from a dict using 'foo.bar' key notation

    Args:
        dct:  dict
            The dict into which the key will be set
        key:  str
            Key that may contain '.' notation indicating dict nesting

    Returns:
        val:  Any
            Whatever is found at the given key or None if the key is not found.
            This includes missing intermediate dicts.
    """
    parts = key.split(NESTED_DICT_DELIM)
    for i, part in enumerate(parts[:-1]):
        dct = dct.get(part, __MISSING__)
        if dct is __MISSING__:
            return dflt
        if not isinstance(dct, dict):
            raise TypeError(
                f"Intermediate key {NESTED_DICT_DELIM.join(parts[:i])} is not a dict"
            )
    return dct.get(parts[-1], dflt)


## Json Keys ###################################################################


def join_json_key(parent_key: Optional[str], name: str, delim: str) -> str:
    """Build the json key for a child property

    Args:
        parent_key:  Optional[str]
            The key of the parent parameter. Root children have no parent key.
        name:  str
            The property name of the child
        delim:  str
            The delimiter placed between path segments

    Returns:
        json_key:  str
            The delimited path from the root to the child
    """
    if not parent_key:
        return name
    return delim.join([parent_key, name])
