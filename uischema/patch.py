"""
This module overlays an operator-authored override document onto a derived
parameter tree.

The merge aligns sibling lists by jsonKey, the way a strategic merge patch
aligns list elements by their merge key, with two differences: the base list
fixes the shape (override entries that match nothing are dropped rather than
appended) and the base order is kept as-is.
"""

# Standard
from collections import OrderedDict
from dataclasses import fields
from typing import List, Optional
import copy

# First Party
import alog

# Local
from .parameter import UIParameter, Validate

log = alog.use_channel("PATCH")

# Fields that an override replaces wholesale when it sets them
_REPLACED_FIELDS = [
    "label",
    "description",
    "ui_type",
    "conditions",
    "sort",
    "style",
    "disable",
    "sub_parameter_group_option",
    "additional",
]

## Public ######################################################################


def patch_parameters(
    base: List[UIParameter],
    overrides: Optional[List[UIParameter]],
) -> List[UIParameter]:
    """Apply the overrides to a copy of the base tree

    Args:
        base:  List[UIParameter]
            The derived (and usually sorted) sibling list
        overrides:  Optional[List[UIParameter]]
            The partial parameters to overlay. Unset (None) fields are left
            alone.

    Returns:
        patched:  List[UIParameter]
            A new list with the same length, order and jsonKeys as base
    """
    return _merge_siblings(copy.deepcopy(base), overrides or [], position="")


## Implementation ##############################################################


def _merge_siblings(
    current: List[UIParameter],
    overrides: List[UIParameter],
    position: str,
) -> List[UIParameter]:
    """Merge overrides into current (owned by the caller) one level deep,
    recursing for matched entries
    """
    if not overrides:
        return current

    # Later duplicates of a key win
    override_map = OrderedDict(
        (override.json_key, override)
        for override in overrides
        if override.json_key is not None
    )
    log.debug3("Merging %d overrides at [%s]", len(override_map), position)

    for param in current:
        override = override_map.pop(param.json_key, None)
        if override is not None:
            log.debug4("Applying override for [%s]", param.json_key)
            _merge_parameter(param, override)

    for json_key in override_map:
        log.debug(
            "Discarding override for unknown key [%s] at [%s]", json_key, position
        )
    return current


def _merge_parameter(current: UIParameter, override: UIParameter):
    """Field level overwrite of a single matched parameter"""
    for name in _REPLACED_FIELDS:
        val = getattr(override, name)
        if val is not None:
            setattr(current, name, copy.deepcopy(val))

    if override.validate is not None:
        if current.validate is None:
            current.validate = Validate()
        _merge_validate(current.validate, override.validate)

    if override.sub_parameters is not None:
        if current.sub_parameters:
            _merge_siblings(
                current.sub_parameters,
                override.sub_parameters,
                position=current.json_key,
            )
        else:
            log.debug2(
                "Ignoring subParameters override for [%s] with no sub-parameters",
                current.json_key,
            )

    if override.additional_parameter is not None:
        if current.additional_parameter is not None:
            _merge_parameter(
                current.additional_parameter, override.additional_parameter
            )
        else:
            log.debug2(
                "Ignoring additionalParameter override for [%s]", current.json_key
            )


def _merge_validate(current: Validate, override: Validate):
    """Sub-field overwrite of validate. An override can only force required
    on, never clear it.
    """
    for fld in fields(Validate):
        val = getattr(override, fld.name)
        if val is None:
            continue
        if fld.name == "required" and val is not True:
            log.debug4("Ignoring required=%s override", val)
            continue
        setattr(current, fld.name, copy.deepcopy(val))
