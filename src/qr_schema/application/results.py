"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from qr_schema.schemas import Entry
from qr_schema.types import Direction


@dataclass(frozen=True)
class SkippedInput:
    """An input dropped from a batch, with the reason it was dropped."""

    source_path: Path
    reason: str


@dataclass(frozen=True)
class ConversionResult:
    """Structured batch outcome."""

    direction: Direction
    output_path: Path
    entries: tuple[Entry, ...] = ()
    written: tuple[Path, ...] = ()
    skipped: tuple[SkippedInput, ...] = ()
