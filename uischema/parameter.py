"""
The UI parameter tree types and their JSON wire representation.

Every field defaults to None so that the same types can hold both a fully
derived tree and a partial override document, where None means "not set".
"""

# Standard
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional

# Local
from .exceptions import assert_schema

## Wire Helpers ################################################################


def _wire(name: str, **kwargs):
    """Declare a dataclass field along with its camelCase wire name"""
    return field(default=None, metadata={"wire": name}, **kwargs)


class _WireMixin:
    """Shared (de)serialization for dataclasses whose fields are declared with
    _wire. Nested values are handled by the per-class _NESTED map from field
    name to (type, is_list).
    """

    _NESTED: Dict[str, Any] = {}

    def to_dict(self) -> dict:
        """Serialize to the wire shape, dropping unset fields"""
        out = {}
        for fld in fields(self):
            val = getattr(self, fld.name)
            if val is None:
                continue
            if fld.name in self._NESTED:
                _, is_list = self._NESTED[fld.name]
                val = [itm.to_dict() for itm in val] if is_list else val.to_dict()
            out[fld.metadata["wire"]] = val
        return out

    @classmethod
    def from_dict(cls, data: dict, aliases: Optional[Dict[str, str]] = None):
        """Parse from the wire shape. Unknown keys are ignored.

        Args:
            data:  dict
                The decoded JSON/YAML object
            aliases:  Optional[Dict[str, str]]
                Alternate wire names accepted for a field's wire name

        Returns:
            obj:  cls
                The parsed instance
        """
        assert_schema(
            isinstance(data, dict),
            f"Expected a mapping for {cls.__name__}, got {type(data).__name__}",
        )
        for alias, wire_name in (aliases or {}).items():
            if wire_name not in data and alias in data:
                data = dict(data)
                data[wire_name] = data.pop(alias)

        kwargs = {}
        for fld in fields(cls):
            wire_name = fld.metadata["wire"]
            if wire_name not in data or data[wire_name] is None:
                continue
            val = data[wire_name]
            if fld.name in cls._NESTED:
                nested_type, is_list = cls._NESTED[fld.name]
                if is_list:
                    assert_schema(
                        isinstance(val, list),
                        f"Expected a list for {wire_name}, got {type(val).__name__}",
                    )
                    val = [nested_type.from_dict(itm) for itm in val]
                else:
                    val = nested_type.from_dict(val)
            kwargs[fld.name] = val
        return cls(**kwargs)


## Leaf Types ##################################################################


@dataclass
class Option(_WireMixin):
    """One choice of a Select widget"""

    label: Optional[str] = _wire("label")
    value: Any = _wire("value")


@dataclass
class Style(_WireMixin):
    """Layout hints for the renderer"""

    col_span: Optional[int] = _wire("colSpan")


@dataclass
class GroupOption(_WireMixin):
    """A named group of sub-parameter keys rendered together"""

    label: Optional[str] = _wire("label")
    keys: Optional[List[str]] = _wire("keys")


@dataclass
class Condition(_WireMixin):
    """A visibility rule: the parameter is enabled (or disabled, depending on
    the action) when the value at json_key compares to value under op
    """

    json_key: Optional[str] = _wire("jsonKey")
    op: Optional[str] = _wire("op")
    value: Any = _wire("value")
    action: Optional[str] = _wire("action")

    @classmethod
    def from_dict(cls, data: dict, aliases: Optional[Dict[str, str]] = None):
        return super().from_dict(data, aliases=aliases or {"operator": "op"})


@dataclass
class Validate(_WireMixin):
    """Validation constraints for a parameter's value"""

    required: Optional[bool] = _wire("required")
    max: Optional[float] = _wire("max")
    min: Optional[float] = _wire("min")
    max_length: Optional[int] = _wire("maxLength")
    min_length: Optional[int] = _wire("minLength")
    pattern: Optional[str] = _wire("pattern")
    enum: Optional[List[Any]] = _wire("enum")
    options: Optional[List[Option]] = _wire("options")
    default_value: Any = _wire("defaultValue")
    immutable: Optional[bool] = _wire("immutable")

    _NESTED = {"options": (Option, True)}


## Parameter ###################################################################


@dataclass
class UIParameter(_WireMixin):
    """One renderable parameter and its nested sub-parameters"""

    json_key: Optional[str] = _wire("jsonKey")
    label: Optional[str] = _wire("label")
    description: Optional[str] = _wire("description")
    ui_type: Optional[str] = _wire("uiType")
    validate: Optional[Validate] = _wire("validate")
    conditions: Optional[List[Condition]] = _wire("conditions")
    sort: Optional[int] = _wire("sort")
    style: Optional[Style] = _wire("style")
    disable: Optional[bool] = _wire("disable")
    sub_parameter_group_option: Optional[List[GroupOption]] = _wire(
        "subParameterGroupOption"
    )
    sub_parameters: Optional[List["UIParameter"]] = _wire("subParameters")
    additional: Optional[bool] = _wire("additional")
    additional_parameter: Optional["UIParameter"] = _wire("additionalParameter")

    @property
    def required(self) -> bool:
        """Whether the parameter must be set"""
        return bool(self.validate and self.validate.required)

    @property
    def sub_parameter_count(self) -> int:
        return len(self.sub_parameters or [])


UIParameter._NESTED = {
    "validate": (Validate, False),
    "conditions": (Condition, True),
    "style": (Style, False),
    "sub_parameter_group_option": (GroupOption, True),
    "sub_parameters": (UIParameter, True),
    "additional_parameter": (UIParameter, False),
}


## Tree Helpers ################################################################


def to_dicts(params: List[UIParameter]) -> List[dict]:
    """Serialize a sibling list to its wire shape"""
    return [param.to_dict() for param in params]


def from_dicts(data: List[dict]) -> List[UIParameter]:
    """Parse a sibling list from its wire shape"""
    assert_schema(isinstance(data, list), "A parameter list must be a list")
    return [UIParameter.from_dict(itm) for itm in data]
