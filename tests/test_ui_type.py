"""
Tests for schema kind classification and default widget selection
"""

# Third Party
import pytest

# Local
from uischema.schema_node import SchemaNode
from uischema.ui_type import SchemaKind, UIType, classify, default_ui_type

OBJECT_ITEMS = SchemaNode(type="object", properties={"a": SchemaNode(type="string")})


@pytest.mark.parametrize(
    ["node", "kind", "ui_type"],
    [
        (SchemaNode(type="string"), SchemaKind.STRING, UIType.INPUT),
        (SchemaNode(type="integer"), SchemaKind.NUMBER, UIType.NUMBER),
        (SchemaNode(type="number"), SchemaKind.NUMBER, UIType.NUMBER),
        (SchemaNode(type="boolean"), SchemaKind.BOOLEAN, UIType.SWITCH),
        (SchemaNode(type="string", enum=["a"]), SchemaKind.ENUM, UIType.SELECT),
        (SchemaNode(type="integer", enum=[1, 2]), SchemaKind.ENUM, UIType.SELECT),
        (OBJECT_ITEMS, SchemaKind.OBJECT, UIType.GROUP),
        (
            SchemaNode(type="array", items=OBJECT_ITEMS),
            SchemaKind.ARRAY_OF_OBJECT,
            UIType.STRUCTS,
        ),
        (
            SchemaNode(type="array", items=SchemaNode(type="string")),
            SchemaKind.ARRAY_OF_SCALAR,
            UIType.STRINGS,
        ),
        (
            SchemaNode(type="array", items=SchemaNode(type="integer")),
            SchemaKind.ARRAY_OF_SCALAR,
            UIType.NUMBERS,
        ),
        (SchemaNode(type="array"), SchemaKind.ARRAY_OF_SCALAR, UIType.STRINGS),
        (
            SchemaNode(type="array", items=SchemaNode(type="object")),
            SchemaKind.FALLBACK,
            UIType.INPUT,
        ),
        (
            SchemaNode(type="object", additional_properties=SchemaNode(type="string")),
            SchemaKind.MAP,
            UIType.KV,
        ),
        (SchemaNode(type="object"), SchemaKind.FALLBACK, UIType.INPUT),
        (SchemaNode(type="null"), SchemaKind.FALLBACK, UIType.INPUT),
        (SchemaNode(), SchemaKind.FALLBACK, UIType.INPUT),
    ],
)
def test_classify_and_default_ui_type(node, kind, ui_type):
    """Make sure every supported shape maps to its kind and widget"""
    assert classify(node) is kind
    assert default_ui_type(node) is ui_type
    assert default_ui_type(node, kind) is ui_type


def test_ui_type_is_a_plain_string():
    """Make sure the widget tags compare and serialize as strings"""
    assert UIType.GROUP == "Group"
    assert UIType.KV.value == "KV"
