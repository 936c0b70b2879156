"""
Package exports
"""

# Local
from . import config, constants, exceptions
from .parameter import Condition, UIParameter, Validate
from .patch import patch_parameters
from .render import configure_logging, generate_id, render_default, render_final
from .schema_node import SchemaNode
from .sorter import sort_parameters
from .source import (
    dump_ui_schema,
    overrides_from_config_map,
    parse_override_document,
    parse_schema_document,
    schema_config_name,
    schema_from_config_map,
    ui_schema_config_name,
)
from .ui_type import SchemaKind, UIType
from .validation import validate_overrides
from .walker import derive
