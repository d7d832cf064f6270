"""Inference exports."""

from .json_parsing import (
    FileReadError,
    InferenceError,
    InvalidRootError,
    JsonParseError,
    parse_json_file,
    parse_json_string,
    parse_json_value,
)
from .string_patterns import detect_string_type, is_semantic_string_type
from .type_inference import infer_type_flat, infer_type_with_extraction, unify_types

__all__ = [
    "FileReadError",
    "InferenceError",
    "InvalidRootError",
    "JsonParseError",
    "detect_string_type",
    "infer_type_flat",
    "infer_type_with_extraction",
    "is_semantic_string_type",
    "parse_json_file",
    "parse_json_string",
    "parse_json_value",
    "unify_types",
]
