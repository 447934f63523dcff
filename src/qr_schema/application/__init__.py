"""Application-layer use-cases and option objects."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from qr_schema.application.options import ConversionOptions, ConverterDefaults
from qr_schema.application.ports import (
    Raster,
    RasterReader,
    SymbolDecoder,
    SymbolEncoder,
)
from qr_schema.application.results import ConversionResult, SkippedInput


def build_conversion_options(
    *,
    module_scale: int = 8,
    document_name: str | None = None,
    image_directory: str | None = None,
) -> ConversionOptions:
    """Build typed conversion options via lazy use-case import."""
    from qr_schema.application.use_cases import build_conversion_options as _impl

    return _impl(
        module_scale=module_scale,
        document_name=document_name,
        image_directory=image_directory,
    )


def serialize_images(
    *,
    image_paths: Iterable[Path],
    output_path: Path | None,
    options: ConversionOptions,
    reader: RasterReader | None = None,
    decoder: SymbolDecoder | None = None,
) -> ConversionResult:
    """Decode QR images into a schema document via lazy use-case import."""
    from qr_schema.application.use_cases import serialize_images as _impl

    return _impl(
        image_paths=image_paths,
        output_path=output_path,
        options=options,
        reader=reader,
        decoder=decoder,
    )


def deserialize_documents(
    *,
    document_paths: Iterable[Path],
    output_dir: Path | None,
    options: ConversionOptions,
    encoder: SymbolEncoder | None = None,
) -> ConversionResult:
    """Render schema documents as QR images via lazy use-case import."""
    from qr_schema.application.use_cases import deserialize_documents as _impl

    return _impl(
        document_paths=document_paths,
        output_dir=output_dir,
        options=options,
        encoder=encoder,
    )


__all__ = [
    "ConversionOptions",
    "ConverterDefaults",
    "ConversionResult",
    "Raster",
    "RasterReader",
    "SkippedInput",
    "SymbolDecoder",
    "SymbolEncoder",
    "build_conversion_options",
    "deserialize_documents",
    "serialize_images",
]
