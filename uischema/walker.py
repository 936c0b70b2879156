"""
The schema walker derives the default UI parameter tree from a parameter
schema. The output is unsorted; see sorter.py for ordering.
"""

# Standard
from typing import List, Optional

# First Party
import alog

# Local
from . import config
from .parameter import Option, UIParameter, Validate
from .schema_node import SchemaNode
from .ui_type import SchemaKind, classify, default_ui_type
from .utils import join_json_key

log = alog.use_channel("WALKR")

## Public ######################################################################


def derive(
    schema_root: Optional[SchemaNode],
    parent_key: Optional[str] = None,
) -> List[UIParameter]:
    """Derive one UIParameter per property of the given node, recursing into
    object and array-of-object properties.

    Args:
        schema_root:  Optional[SchemaNode]
            The node whose properties become the sibling list
        parent_key:  Optional[str]
            The json key of the parameter that owns this sibling list

    Returns:
        params:  List[UIParameter]
            The derived siblings in property order
    """
    if schema_root is None or not schema_root.properties:
        return []
    log.debug3(
        "Deriving %d properties under [%s]", len(schema_root.properties), parent_key
    )
    return [
        derive_parameter(
            name=name,
            node=child,
            json_key=join_json_key(parent_key, name, config.json_key_delim),
            required=name in schema_root.required,
        )
        for name, child in schema_root.properties.items()
    ]


def derive_parameter(
    name: str,
    node: SchemaNode,
    json_key: str,
    required: bool,
) -> UIParameter:
    """Derive the parameter for a single schema property

    Args:
        name:  str
            The property name, used as the label if the node has no title
        node:  SchemaNode
            The property's schema
        json_key:  str
            The full json key of the property
        required:  bool
            Whether the property is listed as required by its parent

    Returns:
        param:  UIParameter
            The derived parameter with its whole sub-tree
    """
    kind = classify(node)
    log.debug4("Property [%s] is %s", json_key, kind.value)

    param = UIParameter(
        json_key=json_key,
        label=node.title or name,
        description=node.description,
        ui_type=default_ui_type(node, kind).value,
        validate=_derive_validate(node, required),
        sort=config.default_sort,
    )

    if kind is SchemaKind.OBJECT:
        param.sub_parameters = derive(node, json_key)
    elif kind is SchemaKind.ARRAY_OF_OBJECT:
        param.sub_parameters = derive(node.items, json_key)
    elif kind is SchemaKind.MAP:
        value_node = node.additional_properties
        param.additional = True
        param.additional_parameter = derive_parameter(
            name=name,
            node=value_node,
            json_key=json_key,
            required=False,
        )
    return param


## Implementation ##############################################################


def _derive_validate(node: SchemaNode, required: bool) -> Validate:
    validate = Validate(
        required=required,
        max=node.maximum,
        min=node.minimum,
        max_length=node.max_length,
        min_length=node.min_length,
        pattern=node.pattern,
        default_value=node.default,
    )
    if node.enum:
        validate.enum = list(node.enum)
        validate.options = [
            Option(label=_option_label(val), value=val) for val in node.enum
        ]
    return validate


def _option_label(value) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)
