"""Shared pytest configuration, marker assignment and image fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def blank_png(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory writing a solid-color PNG without any QR symbol."""

    def _make(name: str = "blank.png", size: tuple[int, int] = (64, 48)) -> Path:
        path = tmp_path / name
        Image.new("RGB", size, color=(255, 255, 255)).save(path, format="PNG")
        return path

    return _make


@pytest.fixture
def garbage_file(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory writing bytes that no image decoder accepts."""

    def _make(name: str = "garbage.png") -> Path:
        path = tmp_path / name
        path.write_bytes(b"this is definitely not a PNG\x00\x01\x02")
        return path

    return _make
