"""
Tests for parsing schema documents into SchemaNode trees
"""

# Local
from uischema.schema_node import SchemaNode

## from_dict ###################################################################


def test_from_dict_full_node():
    """Make sure that all supported keys are parsed"""
    node = SchemaNode.from_dict(
        {
            "type": "string",
            "title": "image",
            "description": "The image",
            "format": "uri",
            "enum": ["a", "b"],
            "default": "a",
            "minLength": 1,
            "maxLength": 10,
            "pattern": "^[a-z]+$",
        }
    )
    assert node.type == "string"
    assert node.title == "image"
    assert node.description == "The image"
    assert node.format == "uri"
    assert node.enum == ["a", "b"]
    assert node.default == "a"
    assert node.min_length == 1
    assert node.max_length == 10
    assert node.pattern == "^[a-z]+$"
    assert node.properties == {}
    assert node.items is None


def test_from_dict_nested_properties_and_items():
    """Make sure that properties and items are parsed recursively"""
    node = SchemaNode.from_dict(
        {
            "type": "object",
            "required": ["ports"],
            "properties": {
                "ports": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {"port": {"type": "integer", "minimum": 1}},
                    },
                }
            },
        }
    )
    assert node.required == ["ports"]
    ports = node.properties["ports"]
    assert ports.type == "array"
    assert ports.items.is_object
    assert ports.items.properties["port"].minimum == 1


def test_from_dict_property_order_preserved():
    """Make sure the property order of the document is kept"""
    node = SchemaNode.from_dict(
        {"properties": {"zeta": {}, "alpha": {}, "mid": {}}},
    )
    assert list(node.properties) == ["zeta", "alpha", "mid"]


def test_from_dict_malformed_parts_degrade():
    """Make sure that malformed parts become absent rather than raising"""
    node = SchemaNode.from_dict(
        {
            "type": ["string", "null"],
            "required": "name",
            "enum": "a",
            "items": "string",
            "minimum": "zero",
            "properties": {"broken": "not a schema", "ok": {"type": "string"}},
        }
    )
    assert node.type is None
    assert node.required == []
    assert node.enum == []
    assert node.items is None
    assert node.minimum is None
    assert node.properties["broken"] == SchemaNode()
    assert node.properties["ok"].type == "string"


def test_from_dict_non_string_required_entries_dropped():
    """Make sure that only string names are kept in required"""
    node = SchemaNode.from_dict({"required": ["a", 1, None, "b"]})
    assert node.required == ["a", "b"]


def test_from_dict_additional_properties():
    """Make sure additionalProperties is parsed both as a schema and as true"""
    node = SchemaNode.from_dict(
        {"type": "object", "additionalProperties": {"type": "string"}}
    )
    assert node.additional_properties.type == "string"

    node = SchemaNode.from_dict({"type": "object", "additionalProperties": True})
    assert node.additional_properties == SchemaNode()

    node = SchemaNode.from_dict({"type": "object", "additionalProperties": False})
    assert node.additional_properties is None


## is_object ###################################################################


def test_is_object_typed_and_untyped():
    """Make sure untyped nodes with properties count as objects"""
    assert SchemaNode(type="object").is_object
    assert SchemaNode(properties={"a": SchemaNode()}).is_object
    assert not SchemaNode().is_object
    assert not SchemaNode(type="string", properties={"a": SchemaNode()}).is_object
