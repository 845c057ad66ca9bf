"""
Core Package.

Domain models, constants, configuration, errors and source transport.
"""

from tobit.core.config import default_config, load_config
from tobit.core.errors import ConfigError, SourceFetchError, TobitError
from tobit.core.utils import read_source, resolve_source

__all__ = [
    # Configuration
    "default_config",
    "load_config",
    # Errors
    "TobitError",
    "SourceFetchError",
    "ConfigError",
    # Transport
    "read_source",
    "resolve_source",
]
