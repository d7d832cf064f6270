"""JSON parsing entry point tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from mold_cli.inference import (
    FileReadError,
    InferenceError,
    InvalidRootError,
    JsonParseError,
    parse_json_file,
    parse_json_string,
    parse_json_value,
)
from mold_cli.type_model import INTEGER, STRING, UUID, ObjectType


def test_parse_json_string_builds_schema_with_extracted_types() -> None:
    text = json.dumps(
        {
            "id": "550e8400-e29b-41d4-a716-446655440000",
            "address": {"city": "Berlin", "zip": 10115},
        }
    )

    schema = parse_json_string(text, "User")

    assert schema.name == "User"
    assert [nested.name for nested in schema.nested_types] == ["UserAddress"]
    assert schema.root_object.fields[0].field_type == UUID
    assert schema.nested_types[0].object_type.fields[1].field_type == INTEGER


def test_flat_mode_has_no_nested_types_and_plain_strings() -> None:
    text = '{"id": "550e8400-e29b-41d4-a716-446655440000", "address": {"city": "Berlin"}}'

    schema = parse_json_string(text, "User", flat_mode=True)

    assert schema.nested_types == ()
    assert schema.root_object.fields[0].field_type == STRING
    assert isinstance(schema.root_object.fields[1].field_type, ObjectType)


def test_empty_object_root_is_accepted() -> None:
    schema = parse_json_value({}, "Empty")

    assert schema.root_object.is_empty
    assert schema.nested_types == ()


@pytest.mark.parametrize(
    ("text", "description"),
    [
        ("[1, 2]", "[1, 2]"),
        ("42", "42"),
        ('"hello"', '"hello"'),
        ("null", "null"),
    ],
)
def test_non_object_root_is_rejected(text: str, description: str) -> None:
    with pytest.raises(InvalidRootError) as exc_info:
        parse_json_string(text, "Root")

    assert str(exc_info.value) == f"Root must be an object, got {description}"


def test_invalid_root_preview_is_truncated() -> None:
    with pytest.raises(InvalidRootError) as exc_info:
        parse_json_value(list(range(100)), "Root")

    message = str(exc_info.value)
    assert message.endswith("...")
    assert len(message.removeprefix("Root must be an object, got ")) == 80


def test_malformed_json_is_reported() -> None:
    with pytest.raises(JsonParseError, match="Invalid JSON"):
        parse_json_string('{"a": ', "Root")


def test_parse_errors_share_a_base_class() -> None:
    with pytest.raises(InferenceError):
        parse_json_string("not json", "Root")


def test_parse_json_file_names_root_after_file_stem(tmp_path: Path) -> None:
    source = tmp_path / "user-profile.json"
    source.write_text('{"name": "Ada"}', encoding="utf-8")

    schema = parse_json_file(source)

    assert schema.name == "UserProfile"


def test_parse_json_file_uses_explicit_name(tmp_path: Path) -> None:
    source = tmp_path / "data.json"
    source.write_text('{"user": {"name": "Ada"}}', encoding="utf-8")

    schema = parse_json_file(source, name="account")

    assert schema.name == "Account"
    assert [nested.name for nested in schema.nested_types] == ["AccountUser"]


def test_parse_json_file_reports_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileReadError, match="Failed to read file"):
        parse_json_file(tmp_path / "missing.json")
