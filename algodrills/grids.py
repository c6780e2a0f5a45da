"""Traversal orders over rectangular grids."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

__all__ = ["wave_order"]


def wave_order(matrix: Sequence[Sequence[Any]]) -> list[Any]:
    """Read column by column, downwards on even columns and upwards on odd."""
    if not matrix:
        return []
    result: list[Any] = []
    for col, column in enumerate(zip(*matrix)):
        result.extend(reversed(column) if col % 2 else column)
    return result