"""
Winning-move search for Connect Four.

Scans a player's pieces, looks for three in a row in every direction and
reports the empty, supported cell that would complete four.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Sequence

from board import Cell, CellRun, Grid
from board_parser import parse_board
from geometry import Direction, Order, Orientation

logger = logging.getLogger(__name__)

NOT_FOUND = "none"
RESULT_FORMAT = "({row}x{column})"

# Candidate scan: left to right, starting from the bottom row
SCAN_PRIMARY = Direction(Orientation.HORIZONTAL, Order.ASCENDING)
SCAN_SECONDARY = Direction(Orientation.VERTICAL, Order.DESCENDING)

MATCH_DIRECTIONS: tuple[Direction, ...] = (
    Direction(Orientation.HORIZONTAL, Order.ASCENDING),
    Direction(Orientation.VERTICAL, Order.DESCENDING),
    Direction(Orientation.FORWARD_DIAGONAL, Order.DESCENDING),
    Direction(Orientation.BACKWARD_DIAGONAL, Order.DESCENDING),
)


@dataclass(frozen=True)
class MatchRules:
    """Tunables for the winning-move search."""

    run_length: int = 3  # Pieces already in line; one more wins
    match_directions: tuple[Direction, ...] = MATCH_DIRECTIONS


def collect_run(cell: Cell, direction: Direction, player: str, length: int) -> CellRun | None:
    """
    Grow a run of `length` of the player's cells starting at `cell`.

    Returns None if the run reaches the edge or meets another value first.
    """
    run = CellRun(direction, cell)
    while len(run) < length:
        added = run.append_following()
        if added is None or added.value != player:
            return None
    return run


def open_end(run: CellRun) -> Cell | None:
    """
    Return the cell that would extend the run into a win.

    The preceding cell is preferred over the following one. A cell qualifies
    when it exists, is empty and is supported from below.
    """
    for cell in (run.preceding(), run.following()):
        if cell is not None and cell.is_empty() and cell.is_supported():
            return cell
    return None


def iter_winning_cells(grid: Grid, player: str, rules: MatchRules = MatchRules()) -> Iterator[Cell]:
    """
    Yield every cell that completes a line for the player, in search order.

    A cell is yielded once per run it completes, so it may appear more than
    once.
    """
    for candidate in grid.traverse(SCAN_PRIMARY, SCAN_SECONDARY, player):
        for direction in rules.match_directions:
            run = collect_run(candidate, direction, player, rules.run_length)
            if run is None:
                continue
            logger.debug("Run of %d for %s from %r going %s", len(run), player, candidate, direction)
            cell = open_end(run)
            if cell is not None:
                yield cell


def find_winning_cell(grid: Grid, player: str, rules: MatchRules = MatchRules()) -> Cell | None:
    """
    Find the first cell where the player can complete a line.

    Args:
        grid: The board to search
        player: The player's cell value, 'R' or 'Y'
        rules: Search tunables

    Returns:
        The winning empty cell, or None if there is none
    """
    cell = next(iter_winning_cells(grid, player, rules), None)
    if cell is None:
        logger.info("No winning move for %s on %dx%d grid", player, grid.rows, grid.cols)
    else:
        logger.info("Winning move for %s at %s", player, cell.format(RESULT_FORMAT))
    return cell


def format_result(cell: Cell | None) -> str:
    """Format a search result as '(RxC)' with 1-based row and column, or 'none'."""
    if cell is None:
        return NOT_FOUND
    return cell.format(RESULT_FORMAT)


def connect_four_winner(lines: Sequence[str]) -> str:
    """
    Solve a board given in text form.

    Args:
        lines: The player ('R' or 'Y') followed by rows such as '(x,Y,R,x)',
               top row first

    Returns:
        '(RxC)' for the winning cell, or 'none'
    """
    player, grid = parse_board(lines)
    return format_result(find_winning_cell(grid, player))
