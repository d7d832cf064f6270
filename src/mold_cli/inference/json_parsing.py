"""JSON document to schema parsing service."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from mold_cli.naming import get_file_stem, to_pascal_case
from mold_cli.type_model import NestedType, ObjectType, Schema

from .type_inference import infer_type_flat, infer_type_with_extraction

logger = logging.getLogger(__name__)

_MAX_VALUE_PREVIEW = 80


class InferenceError(Exception):
    """Raised when a JSON document cannot be turned into a schema."""


class FileReadError(InferenceError):
    """Raised when the JSON input file cannot be read."""


class JsonParseError(InferenceError):
    """Raised when the input text is not valid JSON."""


class InvalidRootError(InferenceError):
    """Raised when the document root is not a JSON object."""


def parse_json_file(path: Path | str, name: str | None = None, flat_mode: bool = False) -> Schema:
    """Read and parse a JSON file; the root name defaults to the PascalCase file stem."""
    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileReadError(f"Failed to read file: {exc}") from exc

    root_name = to_pascal_case(name) if name else to_pascal_case(get_file_stem(source))
    return parse_json_string(text, root_name, flat_mode=flat_mode)


def parse_json_string(text: str, name: str, flat_mode: bool = False) -> Schema:
    """Parse JSON text into a schema named `name`."""
    try:
        value = json.loads(text)
    except json.JSONDecodeError as exc:
        raise JsonParseError(f"Invalid JSON: {exc}") from exc
    return parse_json_value(value, name, flat_mode=flat_mode)


def parse_json_value(value: Any, name: str, flat_mode: bool = False) -> Schema:
    """Infer a schema from an already decoded JSON value.

    Args:
      value: Decoded JSON document; its top level must be an object.
      name: Root type name, also the first segment of extracted type names.
      flat_mode: Keep nested objects inline and type every string as plain string.

    Returns:
      The inferred schema.

    Raises:
      InvalidRootError: If the document root is not an object.
    """
    nested_types: list[NestedType] = []
    if flat_mode:
        root_type = infer_type_flat(value)
    else:
        root_type = infer_type_with_extraction(value, [name], nested_types)

    if not isinstance(root_type, ObjectType):
        raise InvalidRootError(f"Root must be an object, got {_preview(value)}")

    logger.debug(
        "Inferred schema %s with %d root fields and %d nested types",
        name,
        len(root_type.fields),
        len(nested_types),
    )
    return Schema(name=name, root_type=root_type, nested_types=tuple(nested_types))


def _preview(value: Any) -> str:
    text = json.dumps(value)
    if len(text) > _MAX_VALUE_PREVIEW:
        return text[: _MAX_VALUE_PREVIEW - 3] + "..."
    return text
