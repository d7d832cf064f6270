"""Shared generator contract and helpers."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from enum import Enum

from mold_cli.configuration.runtime_settings import GeneratorSettings
from mold_cli.naming import sanitize_identifier
from mold_cli.type_model import (
    ArrayType,
    NestedType,
    ObjectType,
    OptionalType,
    Schema,
    SchemaType,
    UnionType,
    describe_type,
    type_signature,
)

TypeRefs = dict[str, str]


class GenerationError(Exception):
    """Raised when a schema cannot be rendered into target source text."""


class OutputFormat(str, Enum):
    """Target notations, in generation order."""

    TYPESCRIPT = "typescript"
    ZOD = "zod"
    PRISMA = "prisma"


class Generator(ABC):
    """Renders a schema into the source text of one target notation."""

    label: str
    output_format: OutputFormat

    @abstractmethod
    def generate(self, schema: Schema, settings: GeneratorSettings) -> str:
        """Return the rendered source text for `schema`."""

    @abstractmethod
    def file_extension(self) -> str:
        """Return the canonical file extension, without the leading dot."""


def build_type_refs(schema: Schema) -> TypeRefs:
    """Map each extracted object's structural signature to its type name.

    When several nested types share a signature, the first one registered keeps it.
    """
    type_refs: TypeRefs = {}
    for nested in schema.nested_types:
        type_refs.setdefault(type_signature(nested.object_type), nested.name)
    return type_refs


def lookup_type_ref(object_type: ObjectType, type_refs: TypeRefs) -> str | None:
    return type_refs.get(type_signature(object_type))


def referenced_type_names(object_type: ObjectType, type_refs: TypeRefs) -> list[str]:
    """Return the type names the fields of `object_type` render as references, in field order."""
    names: list[str] = []
    for member in object_type.fields:
        _collect_references(member.field_type, type_refs, names)
    return names


def order_nested_types(schema: Schema, type_refs: TypeRefs) -> list[NestedType]:
    """Order nested types so every referenced type precedes the types that reference it.

    Types without dependencies between them keep their extraction order.
    """
    by_name = {nested.name: nested for nested in schema.nested_types}
    ordered: list[NestedType] = []
    visited: set[str] = set()

    def visit(nested: NestedType) -> None:
        if nested.name in visited:
            return
        visited.add(nested.name)
        for name in referenced_type_names(nested.object_type, type_refs):
            dependency = by_name.get(name)
            if dependency is not None:
                visit(dependency)
        ordered.append(nested)

    for nested in schema.nested_types:
        visit(nested)
    return ordered


def is_bare_identifier(name: str) -> bool:
    """Return whether `name` can be written unquoted as an object key."""
    return sanitize_identifier(name) == name


def quote_string_literal(value: str) -> str:
    """Return a double-quoted JavaScript string literal."""
    return json.dumps(value)


def unsupported_type_error(schema_type: SchemaType) -> GenerationError:
    return GenerationError(f"Unsupported schema type: {describe_type(schema_type)}")


def _collect_references(schema_type: SchemaType, type_refs: TypeRefs, names: list[str]) -> None:
    if isinstance(schema_type, ObjectType):
        type_name = lookup_type_ref(schema_type, type_refs)
        if type_name is not None:
            if type_name not in names:
                names.append(type_name)
            return
        for member in schema_type.fields:
            _collect_references(member.field_type, type_refs, names)
    elif isinstance(schema_type, ArrayType):
        _collect_references(schema_type.element, type_refs, names)
    elif isinstance(schema_type, OptionalType):
        _collect_references(schema_type.inner, type_refs, names)
    elif isinstance(schema_type, UnionType):
        for variant in schema_type.variants:
            _collect_references(variant, type_refs, names)
