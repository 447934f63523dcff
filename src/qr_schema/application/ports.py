"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    import numpy as np


@dataclass(frozen=True, eq=False)
class Raster:
    """Grayscale pixel buffer read from an image file.

    ``pixels`` is a ``(height, width)`` ``uint8`` array.
    """

    pixels: np.ndarray
    width: int
    height: int


class RasterReader(Protocol):
    """Read an image file into a pixel buffer."""

    def read(self, path: Path) -> Raster:
        """Raise ``UnreadableInputError`` for missing or non-image files."""


class SymbolDecoder(Protocol):
    """Locate and decode a QR symbol in a pixel buffer."""

    def decode(self, raster: Raster) -> str:
        """Return the payload; raise ``SymbolNotFoundError`` if there is none."""


class SymbolEncoder(Protocol):
    """Render a payload as a QR raster file."""

    def encode(self, payload: str, output_path: Path, module_scale: int) -> Path:
        """Write the raster and return its path; raise ``EncodeFailureError`` on failure."""
