"""TypeScript interface generator."""

from __future__ import annotations

from mold_cli.configuration.runtime_settings import GeneratorSettings
from mold_cli.naming import is_ts_reserved
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
    quote_string_literal,
    unsupported_type_error,
)

_STRING_LIKE = (StringType, DateTimeType, DateType, UuidType, EmailType, UrlType)
_EMPTY_OBJECT = "Record<string, unknown>"


class TypeScriptGenerator(Generator):
    """Renders one interface per extracted type followed by the root interface."""

    label = "TypeScript"
    output_format = OutputFormat.TYPESCRIPT

    def generate(self, schema: Schema, settings: GeneratorSettings) -> str:
        renderer = _TypeScriptRenderer(settings, build_type_refs(schema))
        blocks = [
            renderer.render_interface(nested.name, nested.object_type)
            for nested in schema.nested_types
        ]
        blocks.append(renderer.render_interface(schema.name, schema.root_object))
        return "\n\n".join(blocks) + "\n"

    def file_extension(self) -> str:
        return "ts"


class _TypeScriptRenderer:
    def __init__(self, settings: GeneratorSettings, type_refs: TypeRefs) -> None:
        self._settings = settings
        self._type_refs = type_refs

    def render_interface(self, name: str, object_type: ObjectType) -> str:
        keyword = "export interface" if self._settings.ts_export_interfaces else "interface"
        lines = [f"{keyword} {name} {{"]
        lines.extend(self._render_field(member, "") for member in object_type.fields)
        lines.append("}")
        return "\n".join(lines)

    def render_type(self, schema_type: SchemaType, indent: str = "") -> str:
        if isinstance(schema_type, _STRING_LIKE):
            return "string"
        if isinstance(schema_type, (NumberType, IntegerType)):
            return "number"
        if isinstance(schema_type, BooleanType):
            return "boolean"
        if isinstance(schema_type, NullType):
            return "null"
        if isinstance(schema_type, AnyType):
            return "unknown"
        if isinstance(schema_type, EnumType):
            return " | ".join(quote_string_literal(value) for value in schema_type.values)
        if isinstance(schema_type, ArrayType):
            element = self.render_type(schema_type.element, indent)
            if isinstance(schema_type.element, (UnionType, EnumType, OptionalType)):
                return f"({element})[]"
            return f"{element}[]"
        if isinstance(schema_type, OptionalType):
            return f"{self.render_type(schema_type.inner, indent)} | undefined"
        if isinstance(schema_type, UnionType):
            rendered = sorted({self.render_type(item, indent) for item in schema_type.variants})
            return " | ".join(rendered)
        if isinstance(schema_type, ObjectType):
            type_name = lookup_type_ref(schema_type, self._type_refs)
            if type_name is not None:
                return type_name
            return self._render_inline_object(schema_type, indent)
        raise unsupported_type_error(schema_type)

    def _render_inline_object(self, object_type: ObjectType, indent: str) -> str:
        if object_type.is_empty:
            return _EMPTY_OBJECT
        lines = ["{"]
        lines.extend(self._render_field(member, indent) for member in object_type.fields)
        lines.append(f"{indent}}}")
        return "\n".join(lines)

    def _render_field(self, member: Field, indent: str) -> str:
        field_indent = indent + self._settings.indent
        readonly = "readonly " if self._settings.ts_readonly_fields else ""
        optional = "?" if member.optional else ""
        field_type = self.render_type(member.field_type, field_indent)
        return f"{field_indent}{readonly}{format_field_name(member.name)}{optional}: {field_type};"


def format_field_name(name: str) -> str:
    """Quote property names that are not bare identifiers or collide with reserved words."""
    if not is_bare_identifier(name) or is_ts_reserved(name):
        return quote_string_literal(name)
    return name
