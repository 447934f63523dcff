"""Typed option objects shared across conversion use-cases."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_DOCUMENT_NAME = "schema.json"
DEFAULT_IMAGE_DIRECTORY = "schema"
DEFAULT_MODULE_SCALE = 8


@dataclass(frozen=True)
class ConverterDefaults:
    """Destinations used when the caller does not name one."""

    document_name: str = DEFAULT_DOCUMENT_NAME
    image_directory: str = DEFAULT_IMAGE_DIRECTORY


@dataclass(frozen=True)
class ConversionOptions:
    """Shared conversion options passed through use-cases."""

    module_scale: int = DEFAULT_MODULE_SCALE
    defaults: ConverterDefaults = ConverterDefaults()


def resolve_destination(output_path: Path | str | None, default: str) -> Path:
    """Return the explicit output path, or ``default`` when none was given."""
    if output_path is None or str(output_path) == "":
        return Path(default)
    return Path(output_path)
