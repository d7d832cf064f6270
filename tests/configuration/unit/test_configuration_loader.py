"""Configuration loader tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from mold_cli.configuration.loader import (
    ConfigurationError,
    load_configuration,
    parse_configuration,
)
from mold_cli.configuration.runtime_settings import DEFAULT_INDENT, GeneratorSettings


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_loads_yaml_configuration(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "mold.yaml",
        """
flat: true
indent: 4
typescript:
  export_interfaces: true
  readonly_fields: true
zod:
  strict_objects: true
prisma:
  generate_relations: false
""",
    )

    settings = load_configuration(config_path)

    assert settings == GeneratorSettings(
        flat_mode=True,
        indent="    ",
        ts_export_interfaces=True,
        ts_readonly_fields=True,
        zod_strict_objects=True,
        prisma_generate_relations=False,
    )


def test_missing_keys_fall_back_to_defaults(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "mold.yaml", "typescript:\n  export_interfaces: true\n")

    settings = load_configuration(config_path)

    assert settings.ts_export_interfaces is True
    assert settings.indent == DEFAULT_INDENT
    assert settings.flat_mode is False
    assert settings.prisma_generate_relations is True


def test_empty_file_yields_default_settings(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "mold.yaml", "")

    assert load_configuration(config_path) == GeneratorSettings()


def test_indent_accepts_tab_string() -> None:
    assert parse_configuration({"indent": "\t"}).indent == "\t"


@pytest.mark.parametrize(
    ("mapping", "message"),
    [
        ({"colors": True}, "Unknown configuration keys: colors"),
        ({"zod": {"strict": True}}, "Unknown keys in configuration section 'zod': strict"),
        ({"prisma": ["generate_relations"]}, "Configuration section 'prisma' must be a mapping"),
        ({"flat": "yes"}, "flat must be a boolean"),
        ({"typescript": {"readonly_fields": 1}}, "typescript.readonly_fields must be a boolean"),
        ({"indent": 0}, "indent must be between 1 and 16 spaces"),
        ({"indent": 17}, "indent must be between 1 and 16 spaces"),
        ({"indent": True}, "indent must be a number of spaces or a string"),
        ({"indent": "ab"}, "indent string must contain only spaces or tabs"),
        ({"indent": ""}, "indent string must contain only spaces or tabs"),
        ({"indent": 1.5}, "indent must be a number of spaces or a string"),
    ],
)
def test_parse_configuration_rejects_invalid_values(mapping: dict, message: str) -> None:
    with pytest.raises(ConfigurationError, match=message):
        parse_configuration(mapping)


def test_errors_when_configuration_root_is_not_mapping(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "mold.yaml", "- flat\n- indent\n")

    with pytest.raises(ConfigurationError, match="Configuration root must be a mapping"):
        load_configuration(config_path)


def test_errors_when_file_is_missing(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Configuration file not found"):
        load_configuration(tmp_path / "missing.yaml")


def test_errors_when_yaml_is_malformed(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "mold.yaml", "flat: [true\n")

    with pytest.raises(ConfigurationError, match="Failed to parse configuration file"):
        load_configuration(config_path)


def test_errors_when_file_is_not_utf8(tmp_path: Path) -> None:
    config_path = tmp_path / "mold.yaml"
    config_path.write_bytes(b"flat: \xff\xfe\n")

    with pytest.raises(ConfigurationError, match="Failed to read configuration file") as exc_info:
        load_configuration(config_path)
    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


def test_errors_when_path_is_a_directory(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Failed to read configuration file") as exc_info:
        load_configuration(tmp_path)
    assert isinstance(exc_info.value.__cause__, OSError)
