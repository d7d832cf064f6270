"""Output writing exports."""

from .output_models import GeneratedOutput, WrittenOutput
from .output_writer import OutputWriteError, render_console_output, write_outputs

__all__ = [
    "GeneratedOutput",
    "OutputWriteError",
    "WrittenOutput",
    "render_console_output",
    "write_outputs",
]
