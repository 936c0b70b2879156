"""
The render functions compose the walker, the sorter and the patch merger into
the two operations callers use. Both are pure functions of their arguments.
configure_logging binds the identity of the definition being rendered to the
json log records.
"""

# Standard
from typing import Any, List, Optional, Union
import base64
import uuid

# First Party
import alog

# Local
from . import config
from .log_format import UISchemaJsonFormatter
from .parameter import UIParameter
from .patch import patch_parameters
from .schema_node import SchemaNode
from .sorter import sort_parameters
from .source import parse_override_document, parse_schema_document
from .walker import derive

log = alog.use_channel("RENDR")

SchemaDocument = Union[SchemaNode, dict, str, bytes, None]
OverrideDocument = Union[List[UIParameter], List[dict], str, bytes, None]


def render_default(schema_document: SchemaDocument) -> List[UIParameter]:
    """Derive and order the default parameter tree for a schema

    Args:
        schema_document:  SchemaDocument
            The parsed schema, its decoded JSON object or its raw text. None
            renders an empty tree.

    Returns:
        params:  List[UIParameter]
            The sorted default tree, owned by the caller
    """
    if schema_document is None:
        return []
    schema = parse_schema_document(schema_document)
    params = sort_parameters(derive(schema))
    log.debug("Rendered %d default parameters", len(params))
    return params


def render_final(
    schema_document: SchemaDocument,
    override_document: Optional[OverrideDocument] = None,
) -> List[UIParameter]:
    """Render the default tree and overlay the operator's overrides

    Args:
        schema_document:  SchemaDocument
            See render_default
        override_document:  Optional[OverrideDocument]
            The parsed overrides, their decoded list or the raw YAML/JSON
            text. None behaves exactly like render_default.

    Returns:
        params:  List[UIParameter]
            The final tree with the same shape and order as the default one
    """
    default_params = render_default(schema_document)
    overrides = _as_overrides(override_document)
    if not overrides:
        return default_params
    log.debug("Applying %d top level overrides", len(overrides))
    return patch_parameters(default_params, overrides)


## Logging #####################################################################


def configure_logging(
    definition_type: Optional[str] = None,
    definition_name: Optional[str] = None,
    render_id: Optional[str] = None,
):
    """Configure the logging for the renders of a single definition. When json
    logging is enabled, every record carries the definition identity and the
    render id.

    Args:
        definition_type:  Optional[str]
            The type of the definition being rendered (e.g. component)
        definition_name:  Optional[str]
            The name of the definition being rendered
        render_id:  Optional[str]
            The id of the render request. One is generated if not given.

    Returns:
        render_id:  str
            The id bound to the log records
    """
    render_id = render_id or generate_id()
    alog.configure(
        default_level=config.log_level,
        filters=config.log_filters,
        formatter=UISchemaJsonFormatter(
            definition_name=definition_name,
            definition_type=definition_type,
            render_id=render_id,
        )
        if config.log_json
        else "pretty",
        thread_id=config.log_thread_id,
    )
    return render_id


def generate_id() -> str:
    """Generates a unique human readable id for a render

    Returns:
        id: str
            A unique base32 encoded id
    """
    base32_str = base64.b32encode(uuid.uuid4().bytes).decode("utf-8")
    render_id = base32_str[:22]
    log.debug("Generated render id: %s", render_id)
    return render_id


## Implementation ##############################################################


def _as_overrides(override_document: Any) -> List[UIParameter]:
    if isinstance(override_document, list) and all(
        isinstance(itm, UIParameter) for itm in override_document
    ):
        return override_document
    return parse_override_document(override_document)
