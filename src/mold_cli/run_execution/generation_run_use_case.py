"""Generation run use-case service."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from mold_cli.configuration.runtime_settings import GeneratorSettings
from mold_cli.generators import GenerationError, OutputFormat, create_generator
from mold_cli.inference import InferenceError, parse_json_file
from mold_cli.naming import get_file_stem
from mold_cli.output_writing import (
    GeneratedOutput,
    OutputWriteError,
    WrittenOutput,
    write_outputs,
)
from mold_cli.type_model import Schema

from .run_contracts import RunOutcome, RunRequest

logger = logging.getLogger(__name__)


class RunExecutionError(Exception):
    """Raised when a generation run cannot be completed."""


class NoOutputFormatError(RunExecutionError):
    """Raised when a run selects no output format."""

    def __init__(self) -> None:
        super().__init__("No output format specified. Use --ts, --zod, --prisma, or --all")


def execute_generation_run(request: RunRequest) -> RunOutcome:
    """Infer a schema from the input file, render the selected formats and write them."""
    if not request.formats:
        raise NoOutputFormatError()

    input_path = Path(request.input_path)
    if not input_path.exists():
        raise RunExecutionError(f"Cannot find file '{input_path}'")

    try:
        schema = parse_json_file(input_path, request.name, flat_mode=request.settings.flat_mode)
    except InferenceError as exc:
        raise RunExecutionError(f"Failed to parse '{input_path}': {exc}") from exc
    logger.info(
        "Parsed %s as %s (%d nested types)", input_path, schema.name, len(schema.nested_types)
    )

    try:
        outputs = generate_outputs(schema, request.formats, request.settings)
    except GenerationError as exc:
        raise RunExecutionError(str(exc)) from exc

    written: tuple[WrittenOutput, ...] = ()
    if request.output_dir:
        try:
            written = tuple(
                write_outputs(outputs, request.output_dir, get_file_stem(input_path))
            )
        except OutputWriteError as exc:
            raise RunExecutionError(str(exc)) from exc

    return RunOutcome(schema=schema, outputs=tuple(outputs), written=written)


def generate_outputs(
    schema: Schema, formats: Iterable[OutputFormat], settings: GeneratorSettings
) -> list[GeneratedOutput]:
    """Render `schema` in every requested format, in TypeScript, Zod, Prisma order."""
    requested = set(formats)
    outputs: list[GeneratedOutput] = []
    for output_format in OutputFormat:
        if output_format not in requested:
            continue
        generator = create_generator(output_format)
        outputs.append(
            GeneratedOutput(
                label=generator.label,
                content=generator.generate(schema, settings),
                extension=generator.file_extension(),
            )
        )
        logger.debug("Generated %s output for %s", generator.label, schema.name)
    return outputs
