"""Raster file adapters backed by Pillow."""

from __future__ import annotations

from pathlib import Path

import numpy as np
from PIL import Image

from qr_schema.application.ports import Raster
from qr_schema.errors import UnreadableInputError


class PillowRasterReader:
    """Read any Pillow-supported image file as an 8-bit grayscale raster."""

    def read(self, path: Path) -> Raster:
        """Load ``path`` and flatten it to a single luminance channel.

        Parameters
        ----------
        path : Path
            Image file to read.

        Returns
        -------
        Raster
            Pixel buffer with its width and height.

        Raises
        ------
        UnreadableInputError
            If the file is missing, unreadable, not an image, or too large for
            Pillow's decompression-bomb guard.
        """
        try:
            with Image.open(path) as image:
                gray = image.convert("L")
        except (OSError, ValueError, Image.DecompressionBombError) as exc:
            raise UnreadableInputError(
                f"Cannot read image {path}: {exc}", source_path=path
            ) from exc
        pixels = np.asarray(gray, dtype=np.uint8)
        height, width = pixels.shape
        return Raster(pixels=pixels, width=width, height=height)
