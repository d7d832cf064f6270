"""Generated output writer service."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

import click

from .output_models import GeneratedOutput, WrittenOutput

logger = logging.getLogger(__name__)

SECTION_RULE = "─" * 60


class OutputWriteError(Exception):
    """Raised when generated output cannot be written."""


def write_outputs(
    outputs: Sequence[GeneratedOutput], output_dir: Path | str, base_name: str
) -> list[WrittenOutput]:
    """Write each output to `<output_dir>/<base_name>.<extension>`, creating the directory."""
    destination = Path(output_dir)
    try:
        destination.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputWriteError(f"Failed to create directory '{destination}': {exc}") from exc

    written: list[WrittenOutput] = []
    for output in outputs:
        file_path = destination / f"{base_name}.{output.extension}"
        try:
            file_path.write_text(output.content, encoding="utf-8")
        except OSError as exc:
            raise OutputWriteError(f"Failed to write output: {file_path}: {exc}") from exc
        logger.debug("Wrote %s output to %s", output.label, file_path)
        written.append(WrittenOutput(label=output.label, path=file_path.resolve()))
    return written


def render_console_output(outputs: Sequence[GeneratedOutput], *, styled: bool = False) -> str:
    """Join outputs under `// <label>` headers separated by a horizontal rule."""
    sections: list[str] = []
    for output in outputs:
        header = _dim(f"// {output.label}", styled)
        sections.append(f"{header}\n{output.content.rstrip()}")
    separator = "\n\n" + _dim(SECTION_RULE, styled) + "\n"
    return separator.join(sections) + "\n"


def _dim(text: str, styled: bool) -> str:
    return click.style(text, dim=True) if styled else text
