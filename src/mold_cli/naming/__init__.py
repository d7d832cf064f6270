"""Naming utility exports."""

from .identifier_naming import (
    get_file_stem,
    is_prisma_reserved,
    is_ts_reserved,
    path_to_type_name,
    sanitize_identifier,
    split_words,
    to_camel_case,
    to_pascal_case,
    to_snake_case,
)

__all__ = [
    "get_file_stem",
    "is_prisma_reserved",
    "is_ts_reserved",
    "path_to_type_name",
    "sanitize_identifier",
    "split_words",
    "to_camel_case",
    "to_pascal_case",
    "to_snake_case",
]
