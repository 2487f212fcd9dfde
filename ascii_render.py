"""
ASCII rendering of Connect Four boards with coloured pieces.
"""

from __future__ import annotations

import logging
from typing import Callable

import simple_chalk as chalk  # type: ignore[import-untyped]

from board import Cell, Grid
from geometry import Coordinate

logger = logging.getLogger(__name__)

EMPTY_CHAR = "."
HIGHLIGHT_CHAR = "*"

PIECE_COLORS: dict[str, Callable[[str], str]] = {
    "R": chalk.red,
    "Y": chalk.yellow,
}


def render_cell(value: str, empty: str, highlighted: bool = False, width: int = 1) -> str:
    """Render one cell value, right-aligned to `width`, as a (possibly coloured) string."""
    if highlighted:
        return chalk.green(HIGHLIGHT_CHAR.rjust(width))
    if value == empty:
        return EMPTY_CHAR.rjust(width)
    colorize = PIECE_COLORS.get(value, lambda s: s)
    # Pad before colouring; escape codes would throw off rjust
    return colorize(value.rjust(width))


def render_board(grid: Grid, highlight: Cell | None = None) -> str:
    """
    Render a board to a string, one line per row, top row first.

    Args:
        grid: The board to render
        highlight: Optional cell to mark, e.g. the winning move

    Returns:
        Rendered board with a header of 1-based column numbers and
        1-based row numbers down the left side, with ANSI colour codes
    """
    highlight_pos: Coordinate | None = highlight.coordinate if highlight is not None else None
    label_width = len(str(grid.rows))
    col_width = len(str(grid.cols))

    header = " " * label_width + " " + " ".join(str(c + 1).rjust(col_width) for c in range(grid.cols))
    lines = [header]

    for r, row in enumerate(grid.cells):
        rendered = [
            render_cell(value, grid.empty, highlight_pos == Coordinate(r, c), col_width)
            for c, value in enumerate(row)
        ]
        lines.append(str(r + 1).rjust(label_width) + " " + " ".join(rendered))

    logger.debug("render_board: %dx%d, highlight=%s", grid.rows, grid.cols, highlight_pos)
    return "\n".join(lines)
