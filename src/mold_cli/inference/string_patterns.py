"""Semantic string subtype detection."""

from __future__ import annotations

import re

from mold_cli.type_model import (
    DATE,
    DATETIME,
    EMAIL,
    STRING,
    URL,
    UUID,
    DateTimeType,
    DateType,
    EmailType,
    SchemaType,
    UrlType,
    UuidType,
)

_UUID_PATTERN = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)
_DATETIME_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})?")
_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")
_EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_URL_PATTERN = re.compile(r"https?://\S+")

# Most specific first; the first full match wins.
_STRING_PATTERNS: tuple[tuple[re.Pattern[str], SchemaType], ...] = (
    (_UUID_PATTERN, UUID),
    (_DATETIME_PATTERN, DATETIME),
    (_DATE_PATTERN, DATE),
    (_EMAIL_PATTERN, EMAIL),
    (_URL_PATTERN, URL),
)

_SEMANTIC_STRING_TYPES = (DateTimeType, DateType, UuidType, EmailType, UrlType)


def detect_string_type(value: str) -> SchemaType:
    """Classify a string value into a semantic subtype, defaulting to plain string."""
    for pattern, schema_type in _STRING_PATTERNS:
        if pattern.fullmatch(value):
            return schema_type
    return STRING


def is_semantic_string_type(schema_type: SchemaType) -> bool:
    return isinstance(schema_type, _SEMANTIC_STRING_TYPES)
