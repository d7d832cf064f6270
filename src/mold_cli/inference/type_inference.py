"""Bottom-up structural type inference and array element unification."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from mold_cli.naming import path_to_type_name
from mold_cli.type_model import (
    ANY,
    BOOLEAN,
    INTEGER,
    NULL,
    NUMBER,
    STRING,
    ArrayType,
    Field,
    IntegerType,
    NestedType,
    NumberType,
    ObjectType,
    SchemaType,
    StringType,
    UnionType,
)

from .string_patterns import detect_string_type, is_semantic_string_type

logger = logging.getLogger(__name__)

ARRAY_ITEM_SEGMENT = "Item"

# Integers outside the signed/unsigned 64-bit range are decoded as floats by most JSON
# readers, so they are typed as plain numbers.
_MIN_INTEGER = -(2**63)
_MAX_INTEGER = 2**64 - 1


def infer_type_flat(value: Any) -> SchemaType:
    """Infer a type without nested-type extraction or string pattern detection."""
    if isinstance(value, str):
        return STRING
    if isinstance(value, Mapping):
        return ObjectType(
            tuple(
                Field(name=str(key), field_type=infer_type_flat(item))
                for key, item in value.items()
            )
        )
    if _is_array(value):
        if not value:
            return ArrayType(ANY)
        return ArrayType(unify_types([infer_type_flat(item) for item in value]))
    return _infer_scalar_type(value)


def infer_type_with_extraction(
    value: Any, path: list[str], nested_types: list[NestedType]
) -> SchemaType:
    """Infer a type, appending every non-empty nested object field to `nested_types`.

    `path` holds the key names from the document root and is restored before returning.
    Array elements that are objects are visited under the synthetic `Item` segment. A name
    already taken by the root or an earlier nested type gets a numeric suffix. The
    extracted objects stay inline in their parent fields; callers resolve names by
    structural lookup in `nested_types`.
    """
    if isinstance(value, str):
        return detect_string_type(value)
    if isinstance(value, Mapping):
        return ObjectType(
            tuple(
                _infer_extracted_field(str(key), item, path, nested_types)
                for key, item in value.items()
            )
        )
    if _is_array(value):
        if not value:
            return ArrayType(ANY)
        element_types = []
        for item in value:
            if isinstance(item, Mapping):
                path.append(ARRAY_ITEM_SEGMENT)
                try:
                    element_types.append(infer_type_with_extraction(item, path, nested_types))
                finally:
                    path.pop()
            else:
                element_types.append(infer_type_with_extraction(item, path, nested_types))
        return ArrayType(unify_types(element_types))
    return _infer_scalar_type(value)


def unify_types(types: Sequence[SchemaType]) -> SchemaType:
    """Reduce array element types to the most precise common type."""
    if not types:
        return ANY

    unique: list[SchemaType] = []
    for schema_type in types:
        if schema_type not in unique:
            unique.append(schema_type)

    if len(unique) == 1:
        return unique[0]

    has_integer = any(isinstance(item, IntegerType) for item in unique)
    has_number = any(isinstance(item, NumberType) for item in unique)
    if has_integer and has_number:
        remaining = [item for item in unique if not isinstance(item, IntegerType)]
        if len(remaining) == 1:
            return remaining[0]
        return UnionType(tuple(remaining))

    if all(isinstance(item, StringType) or is_semantic_string_type(item) for item in unique):
        return STRING

    return UnionType(tuple(unique))


def _infer_extracted_field(
    key: str, value: Any, path: list[str], nested_types: list[NestedType]
) -> Field:
    if not (isinstance(value, Mapping) and value):
        return Field(name=key, field_type=infer_type_with_extraction(value, path, nested_types))

    path.append(key)
    try:
        field_type = infer_type_with_extraction(value, path, nested_types)
        if isinstance(field_type, ObjectType):
            type_name = _unique_type_name(path_to_type_name(path), path[0], nested_types)
            nested_types.append(NestedType(name=type_name, object_type=field_type))
            logger.debug("Extracted nested type %s (%d fields)", type_name, len(field_type.fields))
    finally:
        path.pop()
    return Field(name=key, field_type=field_type)


def _unique_type_name(type_name: str, root_name: str, nested_types: list[NestedType]) -> str:
    taken = {root_name, *(nested.name for nested in nested_types)}
    if type_name not in taken:
        return type_name
    suffix = 2
    while f"{type_name}{suffix}" in taken:
        suffix += 1
    logger.debug("Type name %s is already taken, using %s%d", type_name, type_name, suffix)
    return f"{type_name}{suffix}"


def _infer_scalar_type(value: Any) -> SchemaType:
    if value is None:
        return NULL
    if isinstance(value, bool):
        return BOOLEAN
    if isinstance(value, int):
        return INTEGER if _MIN_INTEGER <= value <= _MAX_INTEGER else NUMBER
    if isinstance(value, float):
        return NUMBER
    raise TypeError(f"Unsupported JSON value: {value!r}")


def _is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))
