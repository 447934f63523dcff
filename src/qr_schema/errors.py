"""Exception hierarchy shared by the converter layers."""

from __future__ import annotations

from pathlib import Path


class ConversionError(Exception):
    """Base class for errors raised while converting schemas and QR images."""

    exit_code: int = 1

    def __init__(self, message: str, source_path: Path | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.source_path = source_path


class DependencyError(ConversionError):
    """A codec library (or its native backend) is not available."""


class UnreadableInputError(ConversionError):
    """An input file is missing, unreadable or not a raster image."""


class MalformedDocumentError(ConversionError):
    """A schema document is not JSON, or not an array of ``{name, data}`` objects."""


class SymbolNotFoundError(ConversionError):
    """A raster was decoded but contains no QR symbol."""


class EncodeFailureError(ConversionError):
    """A payload could not be materialized as a QR raster."""


class UnsafeEntryNameError(EncodeFailureError):
    """An entry name would write outside the destination directory."""
