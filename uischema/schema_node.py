"""
The read-only representation of one JSON-Schema (OpenAPI v3) node as found in
a definition's parameter schema document
"""

# Standard
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# First Party
import alog

# Local
from . import constants

log = alog.use_channel("SCHMA")


@dataclass(frozen=True)
class SchemaNode:
    """One node of a parameter schema. Only the subset of JSON-Schema that the
    walker understands is kept; everything else in the source document is
    ignored.
    """

    type: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    format: Optional[str] = None
    enum: List[Any] = field(default_factory=list)
    properties: Dict[str, "SchemaNode"] = field(default_factory=dict)
    items: Optional["SchemaNode"] = None
    additional_properties: Optional["SchemaNode"] = None
    required: List[str] = field(default_factory=list)
    default: Any = None
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    pattern: Optional[str] = None

    @property
    def is_object(self) -> bool:
        """Whether this node describes an object. Schemas generated from CUE
        sometimes omit the type on nodes that carry properties.
        """
        if self.type == constants.SCHEMA_TYPE_OBJECT:
            return True
        return self.type is None and bool(self.properties)

    @classmethod
    def from_dict(cls, data: dict) -> "SchemaNode":
        """Build a node tree from a decoded schema document. Malformed parts
        (non-mapping properties, non-list required, ...) degrade to "absent"
        rather than failing so that one bad node never sinks the whole tree.

        Args:
            data:  dict
                The decoded JSON object for this node

        Returns:
            node:  SchemaNode
                The parsed node with all children parsed
        """
        properties = {}
        raw_properties = data.get("properties")
        if isinstance(raw_properties, dict):
            for name, raw_child in raw_properties.items():
                if isinstance(raw_child, dict):
                    properties[str(name)] = cls.from_dict(raw_child)
                else:
                    log.debug2("Property [%s] is not a schema object", name)
                    properties[str(name)] = cls()

        return cls(
            type=_str_or_none(data.get("type")),
            title=_str_or_none(data.get("title")),
            description=_str_or_none(data.get("description")),
            format=_str_or_none(data.get("format")),
            enum=_list_or_empty(data.get("enum")),
            properties=properties,
            items=_child_or_none(cls, data.get("items")),
            additional_properties=_child_or_none(
                cls, data.get("additionalProperties")
            ),
            required=[
                req
                for req in _list_or_empty(data.get("required"))
                if isinstance(req, str)
            ],
            default=data.get("default"),
            minimum=_number_or_none(data.get("minimum")),
            maximum=_number_or_none(data.get("maximum")),
            min_length=_number_or_none(data.get("minLength")),
            max_length=_number_or_none(data.get("maxLength")),
            pattern=_str_or_none(data.get("pattern")),
        )


## Implementation ##############################################################


def _str_or_none(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _list_or_empty(value: Any) -> list:
    return list(value) if isinstance(value, list) else []


def _number_or_none(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def _child_or_none(cls: type, value: Any) -> Optional[SchemaNode]:
    if isinstance(value, dict):
        return cls.from_dict(value)
    # additionalProperties: true allows values of any shape
    if value is True:
        return cls()
    return None
