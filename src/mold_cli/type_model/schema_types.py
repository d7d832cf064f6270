"""Closed set of inferred schema type variants."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias, Union


class SchemaModelError(Exception):
    """Raised when a type model value violates its structural invariants."""


@dataclass(frozen=True)
class StringType:
    """Plain string value."""


@dataclass(frozen=True)
class NumberType:
    """Floating point number."""


@dataclass(frozen=True)
class IntegerType:
    """Whole number; always a subtype of NumberType."""


@dataclass(frozen=True)
class BooleanType:
    """`true` or `false`."""


@dataclass(frozen=True)
class NullType:
    """JSON `null`."""


@dataclass(frozen=True)
class DateTimeType:
    """ISO-8601 date and time string."""


@dataclass(frozen=True)
class DateType:
    """ISO-8601 calendar date string."""


@dataclass(frozen=True)
class UuidType:
    """Hyphenated hexadecimal UUID string."""


@dataclass(frozen=True)
class EmailType:
    """Email address string."""


@dataclass(frozen=True)
class UrlType:
    """HTTP or HTTPS URL string."""


@dataclass(frozen=True)
class AnyType:
    """Unknown value, produced only for empty arrays."""


@dataclass(frozen=True)
class EnumType:
    """Set of literal string values."""

    values: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.values:
            raise SchemaModelError("Enum requires at least one value.")
        if len(set(self.values)) != len(self.values):
            raise SchemaModelError(f"Enum values must be distinct: {list(self.values)}")


@dataclass(frozen=True)
class ArrayType:
    element: SchemaType


@dataclass(frozen=True)
class OptionalType:
    inner: SchemaType


@dataclass(frozen=True)
class UnionType:
    """Ordered set of two or more distinct variants."""

    variants: tuple[SchemaType, ...]

    def __post_init__(self) -> None:
        if len(self.variants) < 2:
            raise SchemaModelError("Union requires at least two variants.")
        distinct: list[SchemaType] = []
        for variant in self.variants:
            if variant in distinct:
                raise SchemaModelError(f"Union variants must be distinct: {variant!r}")
            distinct.append(variant)


@dataclass(frozen=True)
class FieldMetadata:
    """Advisory field hints; not part of structural equality."""

    description: str | None = None
    default_value: str | None = None
    is_unique: bool = False
    is_readonly: bool = False


@dataclass(frozen=True)
class Field:
    """Named member of an object type."""

    name: str
    field_type: SchemaType
    optional: bool = False
    metadata: FieldMetadata = field(default_factory=FieldMetadata, compare=False)


@dataclass(frozen=True)
class ObjectType:
    """Ordered fields with unique names."""

    fields: tuple[Field, ...] = ()

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for member in self.fields:
            if member.name in seen:
                raise SchemaModelError(f"Duplicate field name in object: {member.name}")
            seen.add(member.name)

    @property
    def is_empty(self) -> bool:
        return not self.fields


SchemaType: TypeAlias = Union[
    StringType,
    NumberType,
    IntegerType,
    BooleanType,
    NullType,
    DateTimeType,
    DateType,
    UuidType,
    EmailType,
    UrlType,
    EnumType,
    ArrayType,
    ObjectType,
    OptionalType,
    UnionType,
    AnyType,
]

STRING = StringType()
NUMBER = NumberType()
INTEGER = IntegerType()
BOOLEAN = BooleanType()
NULL = NullType()
DATETIME = DateTimeType()
DATE = DateType()
UUID = UuidType()
EMAIL = EmailType()
URL = UrlType()
ANY = AnyType()

_SCALAR_NAMES: dict[type, str] = {
    StringType: "String",
    NumberType: "Number",
    IntegerType: "Integer",
    BooleanType: "Boolean",
    NullType: "Null",
    DateTimeType: "DateTime",
    DateType: "Date",
    UuidType: "Uuid",
    EmailType: "Email",
    UrlType: "Url",
    AnyType: "Any",
}


def type_signature(schema_type: SchemaType) -> str:
    """Return a canonical text signature; equal types always share a signature."""
    scalar_name = _SCALAR_NAMES.get(type(schema_type))
    if scalar_name is not None:
        return scalar_name
    if isinstance(schema_type, EnumType):
        return "Enum(" + ",".join(_quote(value) for value in schema_type.values) + ")"
    if isinstance(schema_type, ArrayType):
        return f"Array({type_signature(schema_type.element)})"
    if isinstance(schema_type, OptionalType):
        return f"Optional({type_signature(schema_type.inner)})"
    if isinstance(schema_type, UnionType):
        return "Union(" + ",".join(type_signature(item) for item in schema_type.variants) + ")"
    if isinstance(schema_type, ObjectType):
        members = ",".join(
            f"{_quote(member.name)}{'?' if member.optional else ''}:"
            f"{type_signature(member.field_type)}"
            for member in schema_type.fields
        )
        return "Object{" + members + "}"
    raise SchemaModelError(f"Unsupported schema type: {schema_type!r}")


def describe_type(schema_type: SchemaType) -> str:
    """Return the short variant name used in log and error messages."""
    scalar_name = _SCALAR_NAMES.get(type(schema_type))
    if scalar_name is not None:
        return scalar_name
    return type(schema_type).__name__.removesuffix("Type")


def _quote(text: str) -> str:
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'
