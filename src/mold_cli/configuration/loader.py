"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import DEFAULT_INDENT, GeneratorSettings

_TOP_LEVEL_KEYS = frozenset({"flat", "indent", "typescript", "zod", "prisma"})
_SECTION_KEYS: dict[str, frozenset[str]] = {
    "typescript": frozenset({"export_interfaces", "readonly_fields"}),
    "zod": frozenset({"strict_objects"}),
    "prisma": frozenset({"generate_relations"}),
}
_MAX_INDENT_WIDTH = 16


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> GeneratorSettings:
    """Load and validate a YAML generator configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Failed to read configuration file: {exc}") from exc

    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return parse_configuration(parsed)


def parse_configuration(parsed: Mapping[str, Any]) -> GeneratorSettings:
    """Build generator settings from an already decoded configuration mapping."""
    unknown = sorted(str(key) for key in parsed if key not in _TOP_LEVEL_KEYS)
    if unknown:
        raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")

    typescript = _optional_section(parsed, "typescript")
    zod = _optional_section(parsed, "zod")
    prisma = _optional_section(parsed, "prisma")

    return GeneratorSettings(
        flat_mode=_optional_bool(parsed.get("flat"), "flat", default=False),
        indent=_parse_indent(parsed.get("indent")),
        ts_export_interfaces=_optional_bool(
            typescript.get("export_interfaces"), "typescript.export_interfaces", default=False
        ),
        ts_readonly_fields=_optional_bool(
            typescript.get("readonly_fields"), "typescript.readonly_fields", default=False
        ),
        zod_strict_objects=_optional_bool(
            zod.get("strict_objects"), "zod.strict_objects", default=False
        ),
        prisma_generate_relations=_optional_bool(
            prisma.get("generate_relations"), "prisma.generate_relations", default=True
        ),
    )


def _optional_section(parsed: Mapping[str, Any], section_name: str) -> Mapping[str, Any]:
    value = parsed.get(section_name)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    unknown = sorted(str(key) for key in value if key not in _SECTION_KEYS[section_name])
    if unknown:
        raise ConfigurationError(
            f"Unknown keys in configuration section '{section_name}': {', '.join(unknown)}"
        )
    return value


def _parse_indent(value: Any) -> str:
    if value is None:
        return DEFAULT_INDENT
    if isinstance(value, bool):
        raise ConfigurationError("indent must be a number of spaces or a string.")
    if isinstance(value, int):
        if not 0 < value <= _MAX_INDENT_WIDTH:
            raise ConfigurationError(
                f"indent must be between 1 and {_MAX_INDENT_WIDTH} spaces."
            )
        return " " * value
    if isinstance(value, str):
        if not value or value.strip(" \t"):
            raise ConfigurationError("indent string must contain only spaces or tabs.")
        return value
    raise ConfigurationError("indent must be a number of spaces or a string.")


def _optional_bool(value: Any, field_name: str, *, default: bool) -> bool:
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value
