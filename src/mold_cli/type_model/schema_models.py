"""Schema container entities."""

from __future__ import annotations

from dataclasses import dataclass

from .schema_types import ObjectType, SchemaModelError, SchemaType


@dataclass(frozen=True)
class NestedType:
    """Named object type extracted from a nested document path."""

    name: str
    object_type: ObjectType


@dataclass(frozen=True)
class Schema:
    """Inferred root object plus any extracted nested types."""

    name: str
    root_type: SchemaType
    nested_types: tuple[NestedType, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.root_type, ObjectType):
            raise SchemaModelError("Schema root type must be an object.")

    @property
    def root_object(self) -> ObjectType:
        assert isinstance(self.root_type, ObjectType)
        return self.root_type
