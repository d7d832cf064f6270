"""Prisma model generator."""

from __future__ import annotations

import logging

from mold_cli.configuration.runtime_settings import GeneratorSettings
from mold_cli.type_model import ObjectType, Schema, describe_type

from .generator_contracts import Generator, OutputFormat, TypeRefs, build_type_refs
from .prisma_relations import build_field_columns, format_model_name

logger = logging.getLogger(__name__)


class PrismaGenerator(Generator):
    """Renders one model per extracted type followed by the root model."""

    label = "Prisma"
    output_format = OutputFormat.PRISMA

    def generate(self, schema: Schema, settings: GeneratorSettings) -> str:
        type_refs = build_type_refs(schema)
        blocks = [
            self._render_model(nested.name, nested.object_type, type_refs, settings)
            for nested in schema.nested_types
        ]
        blocks.append(self._render_model(schema.name, schema.root_object, type_refs, settings))
        return "\n\n".join(blocks) + "\n"

    def file_extension(self) -> str:
        return "prisma"

    def _render_model(
        self,
        name: str,
        object_type: ObjectType,
        type_refs: TypeRefs,
        settings: GeneratorSettings,
    ) -> str:
        model_name = format_model_name(name)
        lines = [f"model {model_name} {{"]
        for member in object_type.fields:
            columns = build_field_columns(member, type_refs, settings.prisma_generate_relations)
            if not columns:
                logger.debug(
                    "Skipping %s field %s.%s without a Prisma column type",
                    describe_type(member.field_type),
                    model_name,
                    member.name,
                )
            lines.extend(column.render(settings.indent) for column in columns)
        lines.append("}")
        return "\n".join(lines)
