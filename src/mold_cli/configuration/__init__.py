"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration, parse_configuration
from .runtime_settings import DEFAULT_INDENT, GeneratorSettings

__all__ = [
    "DEFAULT_CONFIG_FILENAME",
    "DEFAULT_INDENT",
    "ConfigurationError",
    "GeneratorSettings",
    "build_placeholder_configuration",
    "load_configuration",
    "parse_configuration",
    "write_placeholder_configuration",
]
