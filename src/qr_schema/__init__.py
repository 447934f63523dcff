"""Convert between QR code images and a JSON schema of ``{name, data}`` entries."""

from __future__ import annotations

from pathlib import Path

from qr_schema.document import format_document, parse_document
from qr_schema.schemas import Entry
from qr_schema.types import PathInput, PathInputs

__version__ = "0.1.0"


def serialize(
    image_paths: PathInputs,
    output_path: PathInput | None = None,
) -> Path:
    """Serialize QR images into a schema document.

    Parameters
    ----------
    image_paths : Sequence[str | Path]
        Images to decode, in the order their entries should appear.
    output_path : str | Path | None, default=None
        Document to write. Defaults to ``schema.json``.

    Returns
    -------
    Path
        Path of the written document.

    Notes
    -----
    Files that are not readable images are left out of the document. Images
    without a QR symbol are kept with an empty ``data`` payload.
    """
    from .api import serialize_images_to_schema as _impl

    return _impl(image_paths=image_paths, output_path=output_path)


def deserialize(
    document_paths: PathInputs,
    output_dir: PathInput | None = None,
    module_scale: int = 8,
) -> Path:
    """Deserialize schema documents into QR images.

    Parameters
    ----------
    document_paths : Sequence[str | Path]
        Schema documents whose entries are concatenated in order.
    output_dir : str | Path | None, default=None
        Directory receiving one PNG per entry. Defaults to ``schema``.
    module_scale : int, default=8
        Pixels per QR module.

    Returns
    -------
    Path
        The image directory.

    Raises
    ------
    EncodeFailureError
        If an entry cannot be rendered; remaining entries are not written.
    """
    from .api import deserialize_schema_to_images as _impl

    return _impl(
        document_paths=document_paths,
        output_dir=output_dir,
        module_scale=module_scale,
    )


__all__ = [
    "Entry",
    "deserialize",
    "format_document",
    "parse_document",
    "serialize",
]
