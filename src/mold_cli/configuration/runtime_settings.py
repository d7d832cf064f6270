"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_INDENT = "  "


@dataclass(frozen=True)
class GeneratorSettings:
    """Formatting options consumed by the code generators."""

    flat_mode: bool = False
    indent: str = DEFAULT_INDENT
    ts_export_interfaces: bool = False
    ts_readonly_fields: bool = False
    zod_strict_objects: bool = False
    prisma_generate_relations: bool = True
