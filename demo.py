"""
Command-line demo: find the winning move on a Connect Four board.

Usage:
    python demo.py                      # solve the built-in example
    python demo.py R "(x,x,x,x)" ...    # solve a board, top row first
    python demo.py -v ...               # also log the search
"""

from __future__ import annotations

import logging
import sys

from ascii_render import render_board
from board_parser import parse_board
from connectfour import find_winning_cell, format_result

EXAMPLE = [
    "R",
    "(x,x,x,x,x,x,x)",
    "(x,x,x,x,x,x,x)",
    "(x,x,x,x,x,x,x)",
    "(Y,Y,x,x,Y,x,R)",
    "(Y,Y,R,R,Y,R,x)",
    "(Y,x,R,R,R,Y,Y)",
]


def main(argv: list[str] | None = None) -> int:
    """Run the demo. Returns the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)

    if args and args[0] in ("-v", "--verbose"):
        logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
        args = args[1:]

    lines = args or EXAMPLE

    try:
        player, grid = parse_board(lines)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    cell = find_winning_cell(grid, player)

    print(f"Player: {player}")
    print(render_board(grid, highlight=cell))
    print()
    print(format_result(cell))
    return 0


if __name__ == "__main__":
    sys.exit(main())
