"""Run execution domain exports."""

from .generation_run_use_case import (
    NoOutputFormatError,
    RunExecutionError,
    execute_generation_run,
    generate_outputs,
)
from .run_contracts import RunOutcome, RunRequest

__all__ = [
    "NoOutputFormatError",
    "RunExecutionError",
    "RunOutcome",
    "RunRequest",
    "execute_generation_run",
    "generate_outputs",
]
