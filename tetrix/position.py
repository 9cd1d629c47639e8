"""Grid coordinates of a single tile."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A row/column location on the playfield."""

    row: int
    col: int