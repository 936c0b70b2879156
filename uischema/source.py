"""
Helpers for the boundary with the store that holds a definition's documents.

The surrounding system keeps two ConfigMaps per definition: one with the
OpenAPI v3 schema rendered from the definition and one with the operator's
override document. Nothing here performs I/O; callers fetch the ConfigMaps
and hand their content over.
"""

# Standard
from typing import Any, List, Optional, Union
import json

# Third Party
import yaml

# First Party
import alog

# Local
from . import config
from .exceptions import DefinitionTypeError, SchemaParseError, assert_schema
from .parameter import UIParameter, from_dicts, to_dicts
from .schema_node import SchemaNode
from .validation import validate_overrides

log = alog.use_channel("SRC")

## Names #######################################################################


def schema_config_name(definition_type: str, name: str) -> str:
    """Name of the ConfigMap holding the schema of a definition"""
    _check_definition_type(definition_type)
    return config.schema_config.name_template.format(
        definition_type=definition_type, name=name
    )


def ui_schema_config_name(definition_type: str, name: str) -> str:
    """Name of the ConfigMap holding the override document of a definition"""
    _check_definition_type(definition_type)
    return config.ui_schema_config.name_template.format(
        definition_type=definition_type, name=name
    )


## Parsing #####################################################################


def parse_schema_document(raw: Union[str, bytes, dict]) -> SchemaNode:
    """Parse a raw schema document

    Args:
        raw:  Union[str, bytes, dict]
            JSON text, or the already decoded root object. Text that is not
            valid JSON is read as YAML.

    Returns:
        schema:  SchemaNode
            The root of the parsed schema
    """
    if isinstance(raw, SchemaNode):
        return raw
    data = _decode_json(raw) if isinstance(raw, (str, bytes)) else raw
    assert_schema(
        isinstance(data, dict),
        f"A schema document must be an object, got {type(data).__name__}",
    )
    return SchemaNode.from_dict(data)


def parse_override_document(
    raw: Union[None, str, bytes, List[Any]],
    validate: bool = False,
) -> List[UIParameter]:
    """Parse an override document

    Args:
        raw:  Union[None, str, bytes, List[Any]]
            YAML (or JSON) text, or the already decoded list. None and empty
            documents yield no overrides.
        validate:  bool
            If True, run the authoring checks from validation.py as well

    Returns:
        overrides:  List[UIParameter]
            The parsed partial parameters
    """
    if raw is None:
        return []
    data = _decode(raw) if isinstance(raw, (str, bytes)) else raw
    if data is None:
        return []
    assert_schema(
        isinstance(data, list),
        f"An override document must be a list, got {type(data).__name__}",
    )
    overrides = from_dicts(data)
    _check_json_keys(overrides)
    if validate:
        validate_overrides(overrides)
    return overrides


def dump_ui_schema(params: List[UIParameter]) -> str:
    """Serialize a parameter list to the YAML stored in the override ConfigMap"""
    return yaml.safe_dump(to_dicts(params), sort_keys=False)


## ConfigMaps ##################################################################


def schema_from_config_map(config_map: dict) -> Optional[SchemaNode]:
    """Read the schema document out of a ConfigMap. Returns None when the
    ConfigMap carries no schema.
    """
    raw = _config_map_data(config_map, config.schema_config.data_key)
    if raw is None:
        return None
    return parse_schema_document(raw)


def overrides_from_config_map(config_map: Optional[dict]) -> List[UIParameter]:
    """Read the override document out of a ConfigMap. A missing ConfigMap or
    data key means no overrides.
    """
    if config_map is None:
        return []
    return parse_override_document(
        _config_map_data(config_map, config.ui_schema_config.data_key)
    )


## Implementation ##############################################################


def _decode_json(raw: Union[str, bytes]) -> Any:
    """Schemas are rendered as JSON, which YAML 1.1 does not fully cover
    (exponent numbers, tab indentation), so JSON is tried first
    """
    try:
        return json.loads(raw)
    except ValueError as err:
        log.debug3("Schema is not JSON, decoding as YAML: %s", err)
    return _decode(raw)


def _decode(raw: Union[str, bytes]) -> Any:
    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError as err:
        log.debug("Failed to decode document: %s", err)
        raise SchemaParseError(f"Document could not be decoded: {err}") from err


def _config_map_data(config_map: dict, data_key: str) -> Optional[str]:
    data = config_map.get("data") or {}
    assert_schema(isinstance(data, dict), "ConfigMap data must be a mapping")
    return data.get(data_key)


def _check_json_keys(overrides: List[UIParameter]):
    for override in overrides:
        assert_schema(
            isinstance(override.json_key, str) and override.json_key,
            f"Override entry without a jsonKey: {override.to_dict()}",
        )
        if override.sub_parameters:
            _check_json_keys(override.sub_parameters)


def _check_definition_type(definition_type: str):
    if definition_type not in config.definition_types:
        raise DefinitionTypeError(
            f"Unsupported definition type [{definition_type}]. "
            f"Expected one of {list(config.definition_types)}"
        )
