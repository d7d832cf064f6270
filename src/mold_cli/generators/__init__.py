"""Code generator exports."""

from .generator_contracts import GenerationError, Generator, OutputFormat, build_type_refs
from .generator_registry import create_generator
from .prisma_generator import PrismaGenerator
from .typescript_generator import TypeScriptGenerator
from .zod_generator import ZodGenerator

__all__ = [
    "GenerationError",
    "Generator",
    "OutputFormat",
    "PrismaGenerator",
    "TypeScriptGenerator",
    "ZodGenerator",
    "build_type_refs",
    "create_generator",
]
