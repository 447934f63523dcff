"""Shared type aliases for converter modules."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Literal, TypeAlias

Direction: TypeAlias = Literal["serialize", "deserialize"]
PathInput: TypeAlias = str | Path
PathInputs: TypeAlias = Sequence[PathInput]
