"""
Loading of the library config. The defaults in config.yaml are read once at
import time, checked against config_validation.yaml and used for the initial
log configuration.
"""

# Standard
import os

# First Party
import aconfig
import alog

# Local
from ..exceptions import assert_config
from ..log_format import UISchemaJsonFormatter
from .validation import get_invalid_params

_CONFIG_DIR = os.path.dirname(__file__)


def _load_yaml(file_name: str, override_env_vars: bool) -> aconfig.Config:
    return aconfig.Config.from_yaml(
        os.path.join(_CONFIG_DIR, file_name),
        override_env_vars=override_env_vars,
    )


# Environment variables (e.g. DEFAULT_SORT) override the file defaults. The
# rules themselves are fixed.
library_config = _load_yaml("config.yaml", override_env_vars=True)
validation_config = _load_yaml("config_validation.yaml", override_env_vars=False)

invalid_params = get_invalid_params(library_config, validation_config)
assert_config(
    not invalid_params,
    f"Invalid uischema config values for keys: {invalid_params}",
)

alog.configure(
    default_level=library_config.log_level,
    filters=library_config.log_filters,
    formatter=UISchemaJsonFormatter() if library_config.log_json else "pretty",
    thread_id=library_config.log_thread_id,
)
