"""Output writing entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class GeneratedOutput:
    """Rendered source text for one target notation."""

    label: str
    content: str
    extension: str


@dataclass(frozen=True)
class WrittenOutput:
    """Generated output persisted to disk."""

    label: str
    path: Path
