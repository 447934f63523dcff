#!/usr/bin/env python3
"""Architecture boundary checks."""

from __future__ import annotations

from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _assert_no_imports(path: Path, banned: list[str]) -> None:
    text = _read(path)
    for token in banned:
        if token in text:
            raise SystemExit(f"Architecture violation in {path}: found '{token}'")


def main() -> None:
    """Run repository architecture boundary checks."""
    codec_imports = [
        "import segno",
        "from pyzbar",
        "import pyzbar",
        "from PIL",
        "import PIL",
    ]

    for name in ("document.py", "schemas.py", "errors.py"):
        _assert_no_imports(ROOT / "src/qr_schema" / name, codec_imports + ["import typer"])

    _assert_no_imports(ROOT / "src/qr_schema/cli/cli.py", codec_imports)

    app_dir = ROOT / "src/qr_schema/application"
    for path in app_dir.glob("*.py"):
        _assert_no_imports(path, codec_imports + ["import typer", "from typer"])

    print("Architecture checks passed.")


if __name__ == "__main__":
    main()
