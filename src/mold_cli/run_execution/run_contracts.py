"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass, field

from mold_cli.configuration.runtime_settings import GeneratorSettings
from mold_cli.generators.generator_contracts import OutputFormat
from mold_cli.output_writing.output_models import GeneratedOutput, WrittenOutput
from mold_cli.type_model import Schema


@dataclass(frozen=True)
class RunRequest:
    """Input contract for one generation run."""

    input_path: str
    formats: frozenset[OutputFormat]
    output_dir: str | None = None
    name: str | None = None
    settings: GeneratorSettings = field(default_factory=GeneratorSettings)


@dataclass(frozen=True)
class RunOutcome:
    """Output contract for one completed run."""

    schema: Schema
    outputs: tuple[GeneratedOutput, ...]
    written: tuple[WrittenOutput, ...]
