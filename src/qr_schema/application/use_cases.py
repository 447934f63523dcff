"""Application use-cases orchestrating batch conversion workflows."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path, PurePath

from pydantic import ValidationError

from qr_schema.adapters.raster import PillowRasterReader
from qr_schema.adapters.symbols import SegnoSymbolEncoder, ZbarSymbolDecoder
from qr_schema.application.options import (
    ConversionOptions,
    ConverterDefaults,
    resolve_destination,
)
from qr_schema.application.ports import RasterReader, SymbolDecoder, SymbolEncoder
from qr_schema.application.results import ConversionResult, SkippedInput
from qr_schema.document import read_document, write_document
from qr_schema.errors import (
    ConversionError,
    MalformedDocumentError,
    SymbolNotFoundError,
    UnreadableInputError,
    UnsafeEntryNameError,
)
from qr_schema.schemas import DeserializeConfig, Entry, SerializeConfig

logger = logging.getLogger(__name__)


def _decode_image(
    path: Path, reader: RasterReader, decoder: SymbolDecoder
) -> Entry | SkippedInput:
    try:
        raster = reader.read(path)
        try:
            payload = decoder.decode(raster)
        except SymbolNotFoundError:
            logger.debug("no QR symbol in %s, keeping empty payload", path)
            payload = ""
    except UnreadableInputError as exc:
        return SkippedInput(source_path=path, reason=exc.message)
    return Entry(name=path.name, data=payload)


def _load_entries(path: Path) -> list[Entry] | SkippedInput:
    try:
        return read_document(path)
    except (UnreadableInputError, MalformedDocumentError) as exc:
        return SkippedInput(source_path=path, reason=exc.message)


def entry_output_path(output_dir: Path, name: str) -> Path:
    """Return where the raster for an entry named ``name`` is written.

    Raises
    ------
    UnsafeEntryNameError
        If ``name`` is not a plain file name or contains a NUL byte.
    """
    normalized = name.replace("\\", "/")
    if (
        not name
        or "\x00" in name
        or name in {".", ".."}
        or PurePath(normalized).name != normalized
    ):
        raise UnsafeEntryNameError(f"Entry name {name!r} is not a plain file name.")
    return output_dir / name


def serialize_images(
    *,
    image_paths: Iterable[Path],
    output_path: Path | None,
    options: ConversionOptions,
    reader: RasterReader | None = None,
    decoder: SymbolDecoder | None = None,
) -> ConversionResult:
    """Use-case: decode QR images into one schema document.

    Images that cannot be read or decoded are dropped from the document;
    images without a QR symbol produce an entry with an empty payload.
    """
    try:
        config = SerializeConfig(
            image_paths=list(image_paths),
            output_path=resolve_destination(
                output_path, options.defaults.document_name
            ),
        )
    except ValidationError as exc:
        raise ConversionError(f"Invalid serialize parameters: {exc}") from exc

    reader = reader or PillowRasterReader()
    decoder = decoder or ZbarSymbolDecoder()

    entries: list[Entry] = []
    skipped: list[SkippedInput] = []
    for path in config.image_paths:
        outcome = _decode_image(path, reader, decoder)
        if isinstance(outcome, SkippedInput):
            logger.info("skipping image %s: %s", path, outcome.reason)
            skipped.append(outcome)
            continue
        logger.debug("decoded %s (%d chars)", path, len(outcome.data))
        entries.append(outcome)

    out_path = write_document(entries, config.output_path)
    return ConversionResult(
        direction="serialize",
        output_path=out_path,
        entries=tuple(entries),
        skipped=tuple(skipped),
    )


def deserialize_documents(
    *,
    document_paths: Iterable[Path],
    output_dir: Path | None,
    options: ConversionOptions,
    encoder: SymbolEncoder | None = None,
) -> ConversionResult:
    """Use-case: render the entries of schema documents as QR images.

    Unreadable or malformed documents are dropped as a whole. An entry that
    cannot be encoded raises and stops the remaining writes.
    """
    try:
        config = DeserializeConfig(
            document_paths=list(document_paths),
            output_dir=resolve_destination(
                output_dir, options.defaults.image_directory
            ),
            module_scale=options.module_scale,
        )
    except ValidationError as exc:
        raise ConversionError(f"Invalid deserialize parameters: {exc}") from exc

    encoder = encoder or SegnoSymbolEncoder()

    entries: list[Entry] = []
    skipped: list[SkippedInput] = []
    for path in config.document_paths:
        outcome = _load_entries(path)
        if isinstance(outcome, SkippedInput):
            logger.info("skipping document %s: %s", path, outcome.reason)
            skipped.append(outcome)
            continue
        entries.extend(outcome)

    config.output_dir.mkdir(parents=True, exist_ok=True)

    written: list[Path] = []
    for entry in entries:
        target = entry_output_path(config.output_dir, entry.name)
        written.append(encoder.encode(entry.data, target, config.module_scale))
        logger.debug("wrote %s", target)

    return ConversionResult(
        direction="deserialize",
        output_path=config.output_dir,
        entries=tuple(entries),
        written=tuple(written),
        skipped=tuple(skipped),
    )


def build_conversion_options(
    *,
    module_scale: int = 8,
    document_name: str | None = None,
    image_directory: str | None = None,
) -> ConversionOptions:
    """Build typed option object from command/API params."""
    base = ConverterDefaults()
    return ConversionOptions(
        module_scale=module_scale,
        defaults=ConverterDefaults(
            document_name=document_name or base.document_name,
            image_directory=image_directory or base.image_directory,
        ),
    )
