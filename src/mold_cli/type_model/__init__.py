"""Type model exports."""

from .schema_models import NestedType, Schema
from .schema_types import (
    ANY,
    BOOLEAN,
    DATE,
    DATETIME,
    EMAIL,
    INTEGER,
    NULL,
    NUMBER,
    STRING,
    URL,
    UUID,
    AnyType,
    ArrayType,
    BooleanType,
    DateTimeType,
    DateType,
    EmailType,
    EnumType,
    Field,
    FieldMetadata,
    IntegerType,
    NullType,
    NumberType,
    ObjectType,
    OptionalType,
    SchemaModelError,
    SchemaType,
    StringType,
    UnionType,
    UrlType,
    UuidType,
    describe_type,
    type_signature,
)

__all__ = [
    "ANY",
    "BOOLEAN",
    "DATE",
    "DATETIME",
    "EMAIL",
    "INTEGER",
    "NULL",
    "NUMBER",
    "STRING",
    "URL",
    "UUID",
    "AnyType",
    "ArrayType",
    "BooleanType",
    "DateTimeType",
    "DateType",
    "EmailType",
    "EnumType",
    "Field",
    "FieldMetadata",
    "IntegerType",
    "NestedType",
    "NullType",
    "NumberType",
    "ObjectType",
    "OptionalType",
    "Schema",
    "SchemaModelError",
    "SchemaType",
    "StringType",
    "UnionType",
    "UrlType",
    "UuidType",
    "describe_type",
    "type_signature",
]
