"""QR symbol adapters: pyzbar for decoding, segno for encoding."""

from __future__ import annotations

from pathlib import Path

from qr_schema.application.ports import Raster
from qr_schema.errors import (
    DependencyError,
    EncodeFailureError,
    SymbolNotFoundError,
    UnreadableInputError,
)


class ZbarSymbolDecoder:
    """Decode the first QR symbol found in a raster with ZBar."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def decode(self, raster: Raster) -> str:
        """Decode a QR payload from a grayscale raster.

        Parameters
        ----------
        raster : Raster
            8-bit grayscale pixels with their dimensions.

        Returns
        -------
        str
            Text of the first QR symbol, in scan order.

        Raises
        ------
        SymbolNotFoundError
            If the raster holds no QR symbol.
        UnreadableInputError
            If ZBar rejects the pixel buffer.
        DependencyError
            If pyzbar or the native zbar library is missing.
        """
        try:
            from pyzbar.pyzbar import ZBarSymbol
            from pyzbar.pyzbar import decode as zbar_decode
            from pyzbar.pyzbar_error import PyZbarError
        except ImportError as exc:
            raise DependencyError(
                "pyzbar and the zbar shared library are required to decode QR images."
            ) from exc

        image = (raster.pixels.tobytes(), raster.width, raster.height)
        try:
            symbols = zbar_decode(image, symbols=[ZBarSymbol.QRCODE])
        except (PyZbarError, ValueError) as exc:
            raise UnreadableInputError(f"ZBar could not scan raster: {exc}") from exc
        if not symbols:
            raise SymbolNotFoundError("No QR symbol found in raster.")
        return symbols[0].data.decode(self.encoding, errors="replace")


class SegnoSymbolEncoder:
    """Render payloads as PNG QR codes with segno."""

    def encode(self, payload: str, output_path: Path, module_scale: int) -> Path:
        """Write ``payload`` as a PNG QR code.

        The symbol is built before the file is opened, so a payload that does
        not fit in any QR version leaves nothing on disk.

        Raises
        ------
        EncodeFailureError
            If the payload cannot be encoded or the file cannot be written.
        DependencyError
            If segno is not installed.
        """
        try:
            import segno
        except ImportError as exc:
            raise DependencyError("segno is required to write QR images.") from exc

        try:
            qr = segno.make(payload, micro=False)
        except ValueError as exc:  # segno.DataOverflowError is a ValueError
            raise EncodeFailureError(
                f"Cannot encode payload for {output_path.name}: {exc}",
                source_path=output_path,
            ) from exc
        try:
            qr.save(str(output_path), kind="png", scale=module_scale)
        except (OSError, ValueError) as exc:
            raise EncodeFailureError(
                f"Cannot write {output_path}: {exc}", source_path=output_path
            ) from exc
        return output_path
