"""Case conversion, identifier sanitizing and reserved-word checks."""

from __future__ import annotations

import re
from collections.abc import Sequence
from pathlib import Path

_SEPARATOR_PATTERN = re.compile(r"[\W_]+")

# ECMAScript reserved words plus the literals `null`, `true` and `false`.
_TS_KEYWORDS = frozenset(
    {
        "break",
        "case",
        "catch",
        "class",
        "const",
        "continue",
        "debugger",
        "default",
        "delete",
        "do",
        "else",
        "enum",
        "export",
        "extends",
        "false",
        "finally",
        "for",
        "function",
        "if",
        "import",
        "in",
        "instanceof",
        "new",
        "null",
        "return",
        "super",
        "switch",
        "this",
        "throw",
        "true",
        "try",
        "typeof",
        "var",
        "void",
        "while",
        "with",
    }
)

# Strict-mode and TypeScript contextual keywords.
_TS_CONTEXTUAL_KEYWORDS = frozenset(
    {
        "yield",
        "let",
        "static",
        "implements",
        "interface",
        "package",
        "private",
        "protected",
        "public",
        "type",
    }
)

_PRISMA_RESERVED = frozenset(
    {"model", "enum", "type", "datasource", "generator", "true", "false", "null"}
)

_DEFAULT_FILE_STEM = "Schema"


def split_words(text: str) -> list[str]:
    """Split text on separators, case changes, acronyms and digit runs."""
    words: list[str] = []
    for chunk in _SEPARATOR_PATTERN.split(text):
        if not chunk:
            continue
        words.extend(_split_chunk(chunk))
    return words


def to_pascal_case(text: str) -> str:
    """Convert `user_name` style text to `UserName`."""
    return "".join(_capitalize(word) for word in split_words(text))


def to_camel_case(text: str) -> str:
    """Convert `user_name` style text to `userName`."""
    words = split_words(text)
    if not words:
        return ""
    return words[0].lower() + "".join(_capitalize(word) for word in words[1:])


def to_snake_case(text: str) -> str:
    """Convert `UserName` style text to `user_name`."""
    return "_".join(word.lower() for word in split_words(text))


def sanitize_identifier(text: str) -> str:
    """Return an identifier valid in most target languages.

    Empty input becomes `_empty`, a leading digit gets an underscore prefix and every
    character other than a letter, digit or underscore is replaced by an underscore.
    """
    if not text:
        return "_empty"
    prefix = "_" if text[0] in "0123456789" else ""
    return prefix + "".join(char if char.isalnum() or char == "_" else "_" for char in text)


def is_ts_reserved(name: str) -> bool:
    return name in _TS_KEYWORDS or name in _TS_CONTEXTUAL_KEYWORDS


def is_prisma_reserved(name: str) -> bool:
    return name in _PRISMA_RESERVED


def path_to_type_name(path: Sequence[str]) -> str:
    """Join a document path into a type name, e.g. `["user", "address"]` -> `UserAddress`."""
    return "".join(to_pascal_case(segment) for segment in path)


def get_file_stem(path: Path | str) -> str:
    """Return the file name without extension, falling back to `Schema`."""
    return Path(path).stem or _DEFAULT_FILE_STEM


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def _split_chunk(chunk: str) -> list[str]:
    words: list[str] = []
    current = ""
    for index, char in enumerate(chunk):
        if current:
            previous = current[-1]
            following = chunk[index + 1] if index + 1 < len(chunk) else ""
            if (
                (previous.islower() and char.isupper())
                or previous.isdigit() != char.isdigit()
                or (previous.isupper() and char.isupper() and following.islower())
            ):
                words.append(current)
                current = ""
        current += char
    if current:
        words.append(current)
    return words
