"""Zod validation schema generator."""

from __future__ import annotations

from mold_cli.configuration.runtime_settings import GeneratorSettings
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
    Schema,
    SchemaType,
    StringType,
    UnionType,
    UrlType,
    UuidType,
)

from .generator_contracts import (
    Generator,
    OutputFormat,
    TypeRefs,
    build_type_refs,
    is_bare_identifier,
    lookup_type_ref,
    order_nested_types,
    quote_string_literal,
    unsupported_type_error,
)

ZOD_IMPORT = 'import { z } from "zod";'
SCHEMA_SUFFIX = "Schema"

_SCALAR_SCHEMAS: dict[type, str] = {
    StringType: "z.string()",
    NumberType: "z.number()",
    IntegerType: "z.number().int()",
    BooleanType: "z.boolean()",
    NullType: "z.null()",
    AnyType: "z.unknown()",
    DateTimeType: "z.string().datetime()",
    DateType: "z.string().date()",
    UuidType: "z.string().uuid()",
    EmailType: "z.string().email()",
    UrlType: "z.string().url()",
}
_EMPTY_OBJECT = "z.record(z.unknown())"


class ZodGenerator(Generator):
    """Renders one exported object schema and inferred type per declaration."""

    label = "Zod"
    output_format = OutputFormat.ZOD

    def generate(self, schema: Schema, settings: GeneratorSettings) -> str:
        type_refs = build_type_refs(schema)
        renderer = _ZodRenderer(settings, type_refs)
        blocks = [ZOD_IMPORT]
        # Constants must be declared before the schemas that reference them.
        blocks.extend(
            renderer.render_declaration(nested.name, nested.object_type)
            for nested in order_nested_types(schema, type_refs)
        )
        blocks.append(renderer.render_declaration(schema.name, schema.root_object))
        return "\n\n".join(blocks) + "\n"

    def file_extension(self) -> str:
        return "zod.ts"


def schema_variable_name(type_name: str) -> str:
    return f"{type_name}{SCHEMA_SUFFIX}"


class _ZodRenderer:
    def __init__(self, settings: GeneratorSettings, type_refs: TypeRefs) -> None:
        self._settings = settings
        self._type_refs = type_refs

    def render_declaration(self, name: str, object_type: ObjectType) -> str:
        variable = schema_variable_name(name)
        return "\n".join(
            [
                f"export const {variable} = {self._render_object(object_type, '')};",
                f"export type {name} = z.infer<typeof {variable}>;",
            ]
        )

    def render_type(self, schema_type: SchemaType, indent: str = "") -> str:
        scalar = _SCALAR_SCHEMAS.get(type(schema_type))
        if scalar is not None:
            return scalar
        if isinstance(schema_type, EnumType):
            literals = [f"z.literal({quote_string_literal(value)})" for value in schema_type.values]
            if len(literals) == 1:
                return literals[0]
            return f"z.union([{', '.join(literals)}])"
        if isinstance(schema_type, ArrayType):
            return f"z.array({self.render_type(schema_type.element, indent)})"
        if isinstance(schema_type, OptionalType):
            return f"{self.render_type(schema_type.inner, indent)}.optional()"
        if isinstance(schema_type, UnionType):
            members = [self.render_type(item, indent) for item in schema_type.variants]
            if len(members) == 1:
                return members[0]
            return f"z.union([{', '.join(members)}])"
        if isinstance(schema_type, ObjectType):
            type_name = lookup_type_ref(schema_type, self._type_refs)
            if type_name is not None:
                return schema_variable_name(type_name)
            return self._render_object(schema_type, indent)
        raise unsupported_type_error(schema_type)

    def _render_object(self, object_type: ObjectType, indent: str) -> str:
        if object_type.is_empty:
            return _EMPTY_OBJECT
        lines = ["z.object({"]
        lines.extend(self._render_field(member, indent) for member in object_type.fields)
        lines.append(f"{indent}}})")
        rendered = "\n".join(lines)
        if self._settings.zod_strict_objects:
            rendered += ".strict()"
        return rendered

    def _render_field(self, member: Field, indent: str) -> str:
        field_indent = indent + self._settings.indent
        field_type = self.render_type(member.field_type, field_indent)
        if member.optional:
            field_type += ".optional()"
        return f"{field_indent}{format_field_name(member.name)}: {field_type},"


def format_field_name(name: str) -> str:
    """Quote property names that are not bare identifiers."""
    if not is_bare_identifier(name):
        return quote_string_literal(name)
    return name
