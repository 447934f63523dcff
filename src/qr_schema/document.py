"""JSON codec for schema documents.

A schema document is a flat JSON array of ``{"name": ..., "data": ...}``
objects. There is no envelope, version field or checksum.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError

from qr_schema.errors import MalformedDocumentError, UnreadableInputError
from qr_schema.schemas import DOCUMENT_ADAPTER, Entry


def parse_document(text: str | bytes) -> list[Entry]:
    """Parse a schema document.

    Parameters
    ----------
    text : str | bytes
        JSON text of the document.

    Returns
    -------
    list[Entry]
        Entries in document order.

    Raises
    ------
    MalformedDocumentError
        If ``text`` is not JSON, the top-level value is not an array, or any
        element is not an object with exactly the string fields ``name`` and
        ``data``. The document is rejected as a whole.
    """
    try:
        return DOCUMENT_ADAPTER.validate_json(text)
    except ValidationError as exc:
        raise MalformedDocumentError(
            f"Invalid schema document ({exc.error_count()} error(s)): "
            f"{exc.errors()[0]['msg']}"
        ) from exc


def format_document(entries: Iterable[Entry]) -> str:
    """Serialize entries to compact JSON text, preserving their order."""
    return DOCUMENT_ADAPTER.dump_json(list(entries)).decode("utf-8")


def read_document(path: Path) -> list[Entry]:
    """Read and parse the schema document stored at ``path``.

    Raises
    ------
    UnreadableInputError
        If the file cannot be read or is not valid UTF-8.
    MalformedDocumentError
        If the content fails :func:`parse_document`.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise UnreadableInputError(
            f"Cannot read schema document {path}: {exc}", source_path=path
        ) from exc
    try:
        return parse_document(text)
    except MalformedDocumentError as exc:
        exc.source_path = path
        raise


def write_document(entries: Iterable[Entry], path: Path) -> Path:
    """Write entries as a schema document and return the written path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(format_document(entries), encoding="utf-8")
    return path
