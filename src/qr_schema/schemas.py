"""Pydantic schemas for schema-document entries and use-case inputs."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Entry(BaseModel):
    """One named QR payload.

    ``name`` is the file name the payload is written to (normally the base name
    of the image it was decoded from) and ``data`` is the symbol's text.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, strict=True)

    name: str
    data: str


DOCUMENT_ADAPTER: TypeAdapter[list[Entry]] = TypeAdapter(list[Entry])


class SerializeConfig(BaseModel):
    """Validated input for the images -> document direction."""

    model_config = ConfigDict(extra="forbid")

    image_paths: list[Path] = Field(default_factory=list)
    output_path: Path


class DeserializeConfig(BaseModel):
    """Validated input for the documents -> images direction."""

    model_config = ConfigDict(extra="forbid")

    document_paths: list[Path] = Field(default_factory=list)
    output_dir: Path
    module_scale: int = Field(default=8, ge=1)
