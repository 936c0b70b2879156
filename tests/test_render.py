"""
Tests for the render functions that compose derivation, sorting and patching
"""

# Standard
from unittest import mock
import json

# Third Party
import pytest

# Local
from uischema import exceptions
from uischema.parameter import UIParameter
from uischema.log_format import UISchemaJsonFormatter
from uischema.render import configure_logging, generate_id, render_default, render_final
from uischema.schema_node import SchemaNode
from uischema.test_helpers.helpers import keys, library_config, read_test_data

class AlogConfigureMock:
    def __init__(self):
        self.kwargs = None

    def __call__(self, **kwargs):
        self.kwargs = kwargs


EXPECTED_ORDER = [
    "exposeType",
    "image",
    "ports",
    "cmd",
    "cpu",
    "imagePullPolicy",
    "imagePullSecrets",
    "labels",
    "memory",
    "env",
    "livenessProbe",
    "readinessProbe",
]

## render_default ##############################################################


def test_render_default_order(api_schema):
    """Make sure the default tree of the sample component is fully ordered"""
    params = render_default(api_schema)
    assert len(params) == 12
    assert keys(params) == EXPECTED_ORDER
    assert [param.sort for param in params] == list(range(100, 112))
    assert [param.required for param in params[:3]] == [True] * 3
    assert not any(param.required for param in params[3:])


def test_render_default_nested_order(api_schema):
    """Make sure nested lists are ordered too"""
    params = {param.json_key: param for param in render_default(api_schema)}
    assert keys(params["livenessProbe"].sub_parameters) == [
        "livenessProbe.failureThreshold",
        "livenessProbe.initialDelaySeconds",
        "livenessProbe.periodSeconds",
        "livenessProbe.successThreshold",
        "livenessProbe.timeoutSeconds",
        "livenessProbe.exec",
        "livenessProbe.tcpSocket",
        "livenessProbe.httpGet",
    ]
    assert keys(params["ports"].sub_parameters) == [
        "ports.expose",
        "ports.port",
        "ports.name",
        "ports.protocol",
    ]


def test_render_default_accepts_all_document_forms(api_schema):
    """Make sure parsed, decoded and raw documents render the same tree"""
    expected = render_default(api_schema)
    assert render_default(SchemaNode.from_dict(api_schema)) == expected
    assert render_default(json.dumps(api_schema)) == expected
    assert render_default(read_test_data("api-schema.json")) == expected


def test_render_default_none():
    """Make sure a missing schema document renders nothing"""
    assert render_default(None) == []


def test_render_default_unparsable_document():
    """Make sure a document that is not an object raises a parse error"""
    with pytest.raises(exceptions.SchemaParseError):
        render_default("[1, 2, 3]")
    with pytest.raises(exceptions.SchemaParseError):
        render_default("{not: [valid")


## render_final ################################################################


def test_render_final_custom_schema(api_schema, custom_schema):
    """Make sure the override document customizes entries without changing the
    shape or order of the tree
    """
    default_params = render_default(api_schema)
    params = render_final(api_schema, custom_schema)
    assert len(params) == 12
    assert keys(params) == EXPECTED_ORDER
    assert params[10].json_key == "livenessProbe"
    assert len(params[10].sub_parameters) == 8
    assert keys(params[10].sub_parameters) == keys(default_params[10].sub_parameters)


def test_render_final_applies_fields(api_schema, custom_schema):
    """Make sure the matched overrides apply field by field"""
    params = {
        param.json_key: param for param in render_final(api_schema, custom_schema)
    }
    memory = params["memory"]
    assert len(memory.conditions) == 1
    assert memory.conditions[0].op == "!="
    assert memory.validate.required is True
    assert memory.sort == 77
    assert memory.validate.pattern is not None

    image = params["image"]
    assert image.ui_type == "ImageInput"
    assert image.description == "The image of the main container"
    assert image.label == "image"

    probe = params["livenessProbe"]
    assert probe.label == "Liveness Probe"
    assert probe.style.col_span == 12
    delay = {param.json_key: param for param in probe.sub_parameters}[
        "livenessProbe.initialDelaySeconds"
    ]
    assert delay.label == "Initial Delay Seconds"
    assert delay.validate.max == 300
    assert delay.validate.default_value == 0

    assert params["labels"].additional_parameter.label == "Label value"


def test_render_final_raw_override_text(api_schema, custom_schema):
    """Make sure the override document can be given as YAML text"""
    assert render_final(api_schema, read_test_data("ui-custom-schema.yaml")) == (
        render_final(api_schema, custom_schema)
    )


def test_render_final_without_overrides(api_schema):
    """Make sure a missing override document behaves like render_default"""
    expected = render_default(api_schema)
    assert render_final(api_schema) == expected
    assert render_final(api_schema, None) == expected
    assert render_final(api_schema, []) == expected
    assert render_final(api_schema, "") == expected


def test_render_final_parsed_overrides(api_schema):
    """Make sure already parsed overrides are used as-is"""
    params = render_final(api_schema, [UIParameter(json_key="cpu", label="CPU")])
    assert {param.json_key: param for param in params}["cpu"].label == "CPU"


def test_render_final_is_pure(api_schema, custom_schema):
    """Make sure repeated renders of the same documents are identical"""
    assert render_final(api_schema, custom_schema) == render_final(
        api_schema, custom_schema
    )


## configure_logging ###########################################################


def test_configure_logging_default():
    """Make sure the library logging configuration is applied"""
    alog_mock = AlogConfigureMock()
    with mock.patch("alog.configure", alog_mock):
        render_id = configure_logging("component", "webservice", "abc")
    assert render_id == "abc"
    assert alog_mock.kwargs.get("default_level") == "info"
    assert alog_mock.kwargs.get("filters") == ""
    assert alog_mock.kwargs.get("formatter") == "pretty"
    assert alog_mock.kwargs.get("thread_id") is False


def test_configure_logging_json_binds_definition():
    """Make sure that with json logging the formatter carries the definition
    identity and the render id
    """
    alog_mock = AlogConfigureMock()
    with library_config(log_json=True):
        with mock.patch("alog.configure", alog_mock):
            render_id = configure_logging("component", "webservice")
    formatter = alog_mock.kwargs.get("formatter")
    assert isinstance(formatter, UISchemaJsonFormatter)
    assert formatter.definition_type == "component"
    assert formatter.definition_name == "webservice"
    assert formatter.render_id == render_id
    assert len(render_id) == 22


def test_generate_id_uniq():
    """Make sure that two render ids don't match"""
    assert generate_id() != generate_id()
