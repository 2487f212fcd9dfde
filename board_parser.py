"""
Parsing of the text board format.

A board is given as a list of strings: the player to move ('R' or 'Y'),
then one string per row, top row first, e.g. "(x,Y,R,x)".
"""

from __future__ import annotations

from typing import Sequence

from board import EMPTY, Grid

__all__ = ["PLAYERS", "parse_board", "parse_row"]

PLAYERS = ("R", "Y")


def parse_row(row_str: str, row_idx: int = 0) -> tuple[str, ...]:
    """
    Parse one row such as "(x,Y,R,x)" into its cell values.

    Every comma-separated token must be exactly one non-space character.

    Raises:
        ValueError: If the row is not a parenthesised, comma-separated list
    """
    stripped = row_str.strip()
    tokens = stripped[1:-1].split(",") if len(stripped) >= 2 else []
    malformed = (
        not stripped.startswith("(")
        or not stripped.endswith(")")
        or any(len(token) != 1 or token.isspace() or token in "()" for token in tokens)
    )
    if malformed:
        error_msg = (
            f"Invalid row: \"{row_str}\"\n"
            f"  Row {row_idx}\n"
            f"  Expected a parenthesised, comma-separated list of single characters\n"
            f"  Example: (x,Y,R,x)"
        )
        raise ValueError(error_msg)
    return tuple(tokens)


def parse_board(lines: Sequence[str], empty: str = EMPTY) -> tuple[str, Grid]:
    """
    Parse a player and a board from their text form.

    Example:
        ["R", "(x,x,x)", "(Y,R,x)"]
        Returns:
        - player "R"
        - a 2x3 Grid with rows ("x", "x", "x") and ("Y", "R", "x")

    Args:
        lines: The player value followed by the board rows, top row first
        empty: Marker used for empty cells

    Returns:
        (player, grid)
    """
    if not lines:
        raise ValueError("Board input is empty: expected a player followed by rows")

    player = lines[0].strip()
    if player not in PLAYERS:
        raise ValueError(f"Invalid player: '{player}'\n  Expected one of: {', '.join(PLAYERS)}")

    row_strings = lines[1:]
    if not row_strings:
        raise ValueError(f"Board for player '{player}' has no rows")

    rows = [parse_row(row_str, row_idx) for row_idx, row_str in enumerate(row_strings)]

    # Validate all rows have same length
    cols = len(rows[0])
    mismatched = [(i, len(row)) for i, row in enumerate(rows) if len(row) != cols]
    if mismatched:
        error_msg = (
            f"Inconsistent row lengths\n"
            f"  Expected: {cols} columns (from row 0)\n"
            f"  Mismatched rows:\n"
        )
        for row_idx, actual_cols in mismatched:
            error_msg += f"    Row {row_idx}: {actual_cols} columns - \"{row_strings[row_idx]}\"\n"
        error_msg += "  All rows must have the same number of cells"
        raise ValueError(error_msg)

    return player, Grid.from_rows(rows, empty)
