"""
The validated library config. Keys are read as attributes of this module,
e.g. `config.default_sort`.
"""

# Local
from . import validation
from .config import library_config


def __getattr__(name):
    if name in library_config or hasattr({}, name):
        return getattr(library_config, name)
    raise AttributeError(f"uischema config has no key {name}")


__all__ = list(library_config.keys())
