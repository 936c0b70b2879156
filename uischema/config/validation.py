"""
Module to validate the values in the loaded library config against the rules
in config_validation.yaml
"""

# Standard
from typing import Any, Callable, Dict, List, Optional, Type, Union
import abc
import builtins

# First Party
import aconfig
import alog

# Local
from ..utils import NESTED_DICT_DELIM, nested_get

log = alog.use_channel("CONFG")


## Public ######################################################################


def get_invalid_params(
    config: aconfig.Config,
    validation_config: aconfig.Config,
) -> List[str]:
    """Get a list of any params that are invalid

    Args:
        config:  aconfig.Config
            The parsed config with any override values
        validation_config:  aconfig.Config
            The parallel config holding the validation rules

    Returns:
        invalid_params:  List[str]
            The nested keys of all parameters that fail validation
    """
    invalid_params = []
    for key, rule in _collect_rules(validation_config).items():
        if not rule.validate(nested_get(config, key)):
            log.warning("Found invalid config key [%s]", key)
            invalid_params.append(key)
    return invalid_params


## Rules #######################################################################

# pylint: disable=too-few-public-methods

# Registry from the "type" names used in the validation file to rule classes
_RULE_TYPES: Dict[str, Type["_Rule"]] = {}


def _rule_type(type_key: str) -> Callable[[type], type]:
    """Decorator that registers a rule class under the given type name"""

    def decorator(rule_class: type) -> type:
        _RULE_TYPES[type_key] = rule_class
        return rule_class

    return decorator


class _Rule(abc.ABC):
    """A rule checks the python type of a config value and then any
    type-specific constraints
    """

    TYPES: List[type] = []

    def __init__(self, optional: bool = False):
        """
        Kwargs:
            optional:  bool
                If True, a missing (None) value passes
        """
        self.optional = optional

    def validate(self, value: Any) -> bool:
        """Run the rule against a loaded value

        Args:
            value:  Any
                The value found in the config

        Returns:
            valid:  bool
                True if the value passes the rule
        """
        if value is None and self.optional:
            return True

        # bool is an int subclass, so it only passes rules that list it
        if isinstance(value, bool) and bool not in self.TYPES:
            log.warning("Invalid type <%s>", type(value))
            return False
        if not isinstance(value, tuple(self.TYPES)):
            log.warning("Invalid type <%s>", type(value))
            return False

        valid = self._check(value)
        if not valid:
            log.warning("Invalid value [%s]", value)
        return valid

    @abc.abstractmethod
    def _check(self, value: Any) -> bool:
        """Type-specific constraint check for a value of a valid type"""


def _in_bounds(value, lower, upper) -> bool:
    return (lower is None or value >= lower) and (upper is None or value <= upper)


@_rule_type("number")
class _NumberRule(_Rule):
    """A number with optional inclusive bounds"""

    TYPES = [int, float]

    def __init__(
        self,
        *,
        min: Optional[Union[int, float]] = None,  # pylint: disable=redefined-builtin
        max: Optional[Union[int, float]] = None,  # pylint: disable=redefined-builtin
        **kwargs,
    ):
        super().__init__(**kwargs)
        self._min = min
        self._max = max

    def _check(self, value: Union[int, float]) -> bool:
        return _in_bounds(value, self._min, self._max)


@_rule_type("int")
class _IntRule(_NumberRule):
    """An int with optional inclusive bounds"""

    TYPES = [int]


@_rule_type("str")
class _StrRule(_Rule):
    """A str with optional length bounds"""

    TYPES = [str]

    def __init__(
        self,
        *,
        min_len: Optional[int] = None,
        max_len: Optional[int] = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self._min_len = min_len
        self._max_len = max_len

    def _check(self, value: str) -> bool:
        return _in_bounds(len(value), self._min_len, self._max_len)


@_rule_type("bool")
class _BoolRule(_Rule):
    """Any bool"""

    TYPES = [bool]

    def _check(self, value: bool) -> bool:
        return True


@_rule_type("enum")
class _EnumRule(_Rule):
    """One of a fixed set of str or int values"""

    TYPES = [str, int, type(None)]

    def __init__(self, *, values: List[Union[str, int, None]], **kwargs):
        super().__init__(**kwargs)
        assert isinstance(values, list) and values, "Enum rules need values"
        self.values = values

    def _check(self, value: Union[str, int, None]) -> bool:
        return value in self.values


@_rule_type("list")
class _ListRule(_Rule):
    """A list with optional length bounds and element type"""

    TYPES = [list]

    def __init__(
        self,
        *,
        min_len: Optional[int] = None,
        max_len: Optional[int] = None,
        item_type: Optional[str] = None,
        **kwargs,
    ):
        """
        Kwargs:
            item_type:  Optional[str]
                Name of the builtin type every element must have (e.g. "str")
        """
        super().__init__(**kwargs)
        self._min_len = min_len
        self._max_len = max_len
        self._item_type = None
        if item_type is not None:
            assert hasattr(builtins, item_type), f"Unsupported item_type: {item_type}"
            self._item_type = getattr(builtins, item_type)

    def _check(self, value: list) -> bool:
        return _in_bounds(len(value), self._min_len, self._max_len) and (
            self._item_type is None
            or all(isinstance(item, self._item_type) for item in value)
        )


# pylint: enable=too-few-public-methods

## Parsing #####################################################################


def _make_rule(rule_args: Dict[str, Any]) -> Optional[_Rule]:
    """Construct a rule from a leaf of the validation file. If the "type" is
    not a known rule type, None is returned so the caller can treat the dict
    as a nested section instead.
    """
    rule_args = dict(rule_args)
    rule_class = _RULE_TYPES.get(rule_args.pop("type", None))
    if rule_class is None:
        return None
    return rule_class(**rule_args)


def _collect_rules(
    validation_config: dict,
    prefix: Optional[List[str]] = None,
) -> Dict[str, _Rule]:
    """Recursively flatten the validation file into nested keys mapped to
    rules
    """
    rules = {}
    prefix = prefix or []
    for key, val in validation_config.items():
        if not isinstance(val, dict):
            continue
        key_parts = prefix + [key]
        nested_key = NESTED_DICT_DELIM.join(key_parts)
        rule = None
        if isinstance(val.get("type"), str):
            log.debug3("Attempting to construct rule at [%s]: %s", nested_key, val)
            rule = _make_rule(val)
        if rule:
            rules[nested_key] = rule
        else:
            log.debug3("Recursing into %s", nested_key)
            rules.update(_collect_rules(val, key_parts))
    return rules
