#!/usr/bin/env python3
"""
qr_schema.cli.cli

Typer-based CLI that serializes QR code images into a JSON schema and
deserializes schemas back into QR code images.

Examples
--------
Collect a folder of QR codes into ``schema.json``:

    qr-schema -s codes/*.png

Recreate the images under ``restored/``:

    qr-schema -d -o restored schema.json
"""

from __future__ import annotations

import logging
import traceback
from pathlib import Path

import typer

from qr_schema import __version__
from qr_schema.application.options import DEFAULT_MODULE_SCALE
from qr_schema.errors import ConversionError

APP_NAME = "qr-schema"

app = typer.Typer(
    name=APP_NAME,
    help="Serialize (PNG) QR codes into a JSON schema and back.",
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format=LOG_FORMAT,
    )


def _print_conversion_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly conversion error.

    Parameters
    ----------
    exc : Exception
        Exception raised during conversion.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{APP_NAME} {__version__}")
        raise typer.Exit()


@app.command()
def main(
    files: list[Path] | None = typer.Argument(
        None,
        help="Input files: QR images with -s, JSON schemas with -d.",
        show_default=False,
    ),
    serialize: bool = typer.Option(
        False, "-s", "--serialize", help="Serializes (PNG) QR codes into a JSON schema."
    ),
    deserialize: bool = typer.Option(
        False, "-d", "--deserialize", help="Deserializes a JSON schema into (PNG) QR codes."
    ),
    output: str | None = typer.Option(
        None,
        "-o",
        "--output",
        help="Where file(s) produced by this tool should be saved "
        "(default: schema.json with -s, schema/ with -d).",
        show_default=False,
    ),
    scale: int = typer.Option(
        DEFAULT_MODULE_SCALE, "--scale", min=1, help="Pixels per QR module when writing images."
    ),
    debug: bool = typer.Option(False, "--debug", help="Show debug logs and full tracebacks on error."),
    version: bool = typer.Option(
        False,
        "-v",
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Convert between (PNG) QR codes and a JSON schema of {name, data} entries.

    Parameters
    ----------
    files : list[Path] | None
        Input paths, processed in the given order.
    serialize : bool, default=False
        Decode images into one schema document.
    deserialize : bool, default=False
        Render schema documents as one image per entry.
    output : str | None, default=None
        Destination document (``-s``) or directory (``-d``). An empty value
        selects the default.

    Notes
    -----
    - Unreadable images and malformed schemas are skipped without failing the run.
    - An entry that cannot be encoded stops the run with a non-zero exit code.
    """
    del version
    if serialize == deserialize:
        raise typer.BadParameter(
            "Pass exactly one of -s/--serialize or -d/--deserialize.",
            param_hint="'-s' / '-d'",
        )

    _configure_logging(debug)
    inputs = list(files or [])
    destination = Path(output) if output else None

    try:
        from qr_schema import api

        if serialize:
            out = api.serialize_images_to_schema(
                image_paths=inputs, output_path=destination
            )
        else:
            out = api.deserialize_schema_to_images(
                document_paths=inputs, output_dir=destination, module_scale=scale
            )
        typer.echo(f"✓ Saved: {out}")
    except ConversionError as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_conversion_error(exc, debug))


if __name__ == "__main__":
    app()
