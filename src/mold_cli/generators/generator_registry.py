"""Generator lookup by output format."""

from __future__ import annotations

from .generator_contracts import Generator, OutputFormat
from .prisma_generator import PrismaGenerator
from .typescript_generator import TypeScriptGenerator
from .zod_generator import ZodGenerator

_GENERATOR_TYPES: dict[OutputFormat, type[Generator]] = {
    OutputFormat.TYPESCRIPT: TypeScriptGenerator,
    OutputFormat.ZOD: ZodGenerator,
    OutputFormat.PRISMA: PrismaGenerator,
}


def create_generator(output_format: OutputFormat) -> Generator:
    """Return a generator instance for the requested output format."""
    return _GENERATOR_TYPES[output_format]()
