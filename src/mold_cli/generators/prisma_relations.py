"""Prisma column rendering, relation scaffolding and attribute inference."""

from __future__ import annotations

from dataclasses import dataclass

from mold_cli.naming import is_prisma_reserved, sanitize_identifier, to_pascal_case
from mold_cli.type_model import (
    AnyType,
    ArrayType,
    BooleanType,
    DateTimeType,
    DateType,
    EmailType,
    EnumType,
    Field,
    IntegerType,
    NullType,
    NumberType,
    ObjectType,
    OptionalType,
    SchemaType,
    StringType,
    UnionType,
    UrlType,
    UuidType,
)

from .generator_contracts import TypeRefs, lookup_type_ref, unsupported_type_error

JSON_TYPE = "Json"
FOREIGN_KEY_TYPE = "Int"

_SCALAR_COLUMN_TYPES: dict[type, str] = {
    StringType: "String",
    NumberType: "Float",
    IntegerType: "Int",
    BooleanType: "Boolean",
    DateTimeType: "DateTime",
    DateType: "DateTime",
    UuidType: "String",
    EmailType: "String",
    UrlType: "String",
    EnumType: "String",
}
_LIST_ELEMENT_TYPES = (
    StringType,
    NumberType,
    IntegerType,
    BooleanType,
    DateTimeType,
    DateType,
    UuidType,
    EmailType,
    UrlType,
)
_CREATED_AT_NAMES = frozenset({"createdat", "created_at"})
_UPDATED_AT_NAMES = frozenset({"updatedat", "updated_at"})


@dataclass(frozen=True)
class PrismaColumn:
    """One rendered line of a Prisma model body."""

    name: str
    column_type: str
    attributes: tuple[str, ...] = ()

    def render(self, indent: str) -> str:
        parts = [self.name, self.column_type, *self.attributes]
        return indent + " ".join(parts)


def prisma_column_type(schema_type: SchemaType) -> str | None:
    """Return the Prisma column type for a non-relational type, or None when unrepresentable."""
    scalar = _SCALAR_COLUMN_TYPES.get(type(schema_type))
    if scalar is not None:
        return scalar
    if isinstance(schema_type, ArrayType):
        if isinstance(schema_type.element, _LIST_ELEMENT_TYPES):
            return f"{_SCALAR_COLUMN_TYPES[type(schema_type.element)]}[]"
        return JSON_TYPE
    if isinstance(schema_type, OptionalType):
        inner = prisma_column_type(schema_type.inner)
        return f"{inner}?" if inner is not None else None
    if isinstance(schema_type, UnionType):
        return JSON_TYPE
    if isinstance(schema_type, (NullType, AnyType, ObjectType)):
        return None
    raise unsupported_type_error(schema_type)


def build_field_columns(
    member: Field, type_refs: TypeRefs, generate_relations: bool
) -> list[PrismaColumn]:
    """Render a field as zero, one or two Prisma columns."""
    field_type = member.field_type
    optional = member.optional
    if isinstance(field_type, OptionalType):
        field_type = field_type.inner
        optional = True

    name = format_field_name(member.name)
    marker = "?" if optional else ""

    if isinstance(field_type, ObjectType):
        if not generate_relations or field_type.is_empty:
            return [PrismaColumn(name, f"{JSON_TYPE}{marker}")]
        related_model = _related_model_name(field_type, member.name, type_refs)
        return [
            PrismaColumn(name, f"{related_model}{marker}"),
            PrismaColumn(f"{name}Id", f"{FOREIGN_KEY_TYPE}{marker}", ("@unique",)),
        ]

    if isinstance(field_type, ArrayType) and isinstance(field_type.element, ObjectType):
        element = field_type.element
        if not generate_relations:
            return [PrismaColumn(name, JSON_TYPE)]
        if element.is_empty:
            return [PrismaColumn(name, f"{JSON_TYPE}[]")]
        related_model = _related_model_name(element, member.name, type_refs)
        return [PrismaColumn(name, f"{related_model}[]")]

    if isinstance(field_type, AnyType):
        return []

    column_type = prisma_column_type(field_type)
    if column_type is None:
        return []
    if isinstance(field_type, ArrayType):
        # Prisma lists cannot be optional.
        return [PrismaColumn(name, column_type)]
    return [PrismaColumn(name, f"{column_type}{marker}", field_attributes(member, field_type))]


def field_attributes(member: Field, field_type: SchemaType) -> tuple[str, ...]:
    """Infer Prisma attributes from the field name, primitive kind and metadata.

    `field_type` is the field type with any optional wrapper removed.
    """
    attributes: list[str] = []
    if member.metadata.is_unique:
        attributes.append("@unique")
    lowered = member.name.lower()
    if isinstance(field_type, UuidType) and lowered == "id":
        attributes.append("@default(uuid())")
    if isinstance(field_type, DateTimeType):
        if lowered in _CREATED_AT_NAMES:
            attributes.append("@default(now())")
        elif lowered in _UPDATED_AT_NAMES:
            attributes.append("@updatedAt")
    return tuple(attributes)


def format_field_name(name: str) -> str:
    """Sanitize a field name, appending an underscore on reserved-word collisions."""
    sanitized = sanitize_identifier(name)
    if is_prisma_reserved(sanitized):
        return f"{sanitized}_"
    return sanitized


def format_model_name(name: str) -> str:
    """PascalCase a model name, suffixing `Model` on reserved-word collisions."""
    pascal = to_pascal_case(name)
    if is_prisma_reserved(pascal.lower()):
        return f"{pascal}Model"
    return pascal


def _related_model_name(object_type: ObjectType, field_name: str, type_refs: TypeRefs) -> str:
    type_name = lookup_type_ref(object_type, type_refs)
    return format_model_name(type_name if type_name is not None else field_name)
