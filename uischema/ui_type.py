"""
The closed set of schema shapes the walker understands and the default widget
type tag emitted for each of them
"""

# Standard
from enum import Enum

# Local
from . import constants
from .schema_node import SchemaNode


class SchemaKind(Enum):
    """The shape of a schema node as far as UI derivation is concerned"""

    OBJECT = "object"
    MAP = "map"
    ARRAY_OF_OBJECT = "array-of-object"
    ARRAY_OF_SCALAR = "array-of-scalar"
    ENUM = "enum"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    FALLBACK = "fallback"


class UIType(str, Enum):
    """Widget type tags an external renderer dispatches on. Override documents
    may name widgets outside this set (e.g. ImageInput); those are carried
    through as plain strings.
    """

    INPUT = "Input"
    NUMBER = "Number"
    SWITCH = "Switch"
    SELECT = "Select"
    STRINGS = "Strings"
    NUMBERS = "Numbers"
    STRUCTS = "Structs"
    GROUP = "Group"
    KV = "KV"


_DEFAULT_UI_TYPES = {
    SchemaKind.OBJECT: UIType.GROUP,
    SchemaKind.MAP: UIType.KV,
    SchemaKind.ARRAY_OF_OBJECT: UIType.STRUCTS,
    SchemaKind.ENUM: UIType.SELECT,
    SchemaKind.STRING: UIType.INPUT,
    SchemaKind.NUMBER: UIType.NUMBER,
    SchemaKind.BOOLEAN: UIType.SWITCH,
    SchemaKind.FALLBACK: UIType.INPUT,
}


def classify(node: SchemaNode) -> SchemaKind:
    """Determine the kind of a schema node. Anything that does not fit one of
    the known shapes is FALLBACK.
    """
    if node.type == constants.SCHEMA_TYPE_ARRAY:
        if node.items is not None and node.items.is_object:
            # Items without properties have no fields to render as structs
            if node.items.properties:
                return SchemaKind.ARRAY_OF_OBJECT
            return SchemaKind.FALLBACK
        return SchemaKind.ARRAY_OF_SCALAR
    if node.is_object:
        if node.properties:
            return SchemaKind.OBJECT
        if node.additional_properties is not None:
            return SchemaKind.MAP
        return SchemaKind.FALLBACK
    if node.enum:
        return SchemaKind.ENUM
    if node.type == constants.SCHEMA_TYPE_STRING:
        return SchemaKind.STRING
    if node.type in constants.NUMERIC_SCHEMA_TYPES:
        return SchemaKind.NUMBER
    if node.type == constants.SCHEMA_TYPE_BOOLEAN:
        return SchemaKind.BOOLEAN
    return SchemaKind.FALLBACK


def default_ui_type(node: SchemaNode, kind: SchemaKind = None) -> UIType:
    """Get the default widget for a schema node

    Args:
        node:  SchemaNode
            The node to render
        kind:  SchemaKind
            The already computed kind of the node, if the caller has it

    Returns:
        ui_type:  UIType
            The widget tag for the node
    """
    kind = kind or classify(node)
    if kind is SchemaKind.ARRAY_OF_SCALAR:
        if node.items is not None and node.items.type in constants.NUMERIC_SCHEMA_TYPES:
            return UIType.NUMBERS
        return UIType.STRINGS
    return _DEFAULT_UI_TYPES[kind]
