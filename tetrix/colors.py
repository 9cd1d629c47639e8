"""Palette used for the playfield and the interface."""

from __future__ import annotations

Color = tuple[int, int, int, int]

DARK_GREY: Color = (26, 31, 40, 255)
RED: Color = (232, 18, 18, 255)
BLUE: Color = (13, 64, 216, 255)
GREEN: Color = (47, 230, 23, 255)
YELLOW: Color = (237, 234, 4, 255)
ORANGE: Color = (236, 116, 17, 255)
PURPLE: Color = (116, 0, 247, 255)
CYAN: Color = (21, 204, 209, 255)
DARK_BLUE: Color = (44, 44, 127, 255)
LIGHT_BLUE: Color = (59, 85, 162, 255)
WHITE: Color = (255, 255, 255, 255)


def cell_colors() -> list[Color]:
    """Return cell colours indexed by cell value; index 0 is an empty cell."""
    return [DARK_GREY, RED, BLUE, GREEN, YELLOW, ORANGE, PURPLE, CYAN]