"""Public file-based conversion API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from qr_schema.application.use_cases import build_conversion_options
from qr_schema.application.use_cases import deserialize_documents
from qr_schema.application.use_cases import serialize_images
from qr_schema.types import PathInput, PathInputs


def serialize_images_to_schema(
    image_paths: PathInputs,
    output_path: Optional[PathInput] = None,
) -> Path:
    """Decode QR images into one schema document and return its path."""
    result = serialize_images(
        image_paths=[Path(path) for path in image_paths],
        output_path=Path(output_path) if output_path else None,
        options=build_conversion_options(),
    )
    return result.output_path


def deserialize_schema_to_images(
    document_paths: PathInputs,
    output_dir: Optional[PathInput] = None,
    module_scale: int = 8,
) -> Path:
    """Render schema documents as QR images and return the image directory."""
    result = deserialize_documents(
        document_paths=[Path(path) for path in document_paths],
        output_dir=Path(output_dir) if output_dir else None,
        options=build_conversion_options(module_scale=module_scale),
    )
    return result.output_path
