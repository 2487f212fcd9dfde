"""
Rectangular board of single-character cells.
Provides cell lookup, direction-driven traversal and runs of neighbouring cells.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

from geometry import Axis, Boundaries, Coordinate, Direction, Order, Orientation

EMPTY = "x"

# Stepping backward along this direction reaches the cell below
DOWNWARD = Direction(Orientation.VERTICAL, Order.DESCENDING)


# =============================================================================
# Grid
# =============================================================================


@dataclass(frozen=True)
class Grid:
    """An immutable rectangular matrix of cell values, indexed [row][col]."""

    cells: tuple[tuple[str, ...], ...]
    empty: str = EMPTY

    def __post_init__(self) -> None:
        if not self.cells or not self.cells[0]:
            raise ValueError("Grid must have at least one row and one column")
        cols = len(self.cells[0])
        mismatched = [i for i, row in enumerate(self.cells) if len(row) != cols]
        if mismatched:
            raise ValueError(
                f"Grid rows must all have {cols} cells; mismatched rows: {mismatched}"
            )

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[str]], empty: str = EMPTY) -> Grid:
        return cls(tuple(tuple(row) for row in rows), empty)

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0])

    @property
    def boundaries(self) -> Boundaries:
        return {
            Axis.ROW: (0, self.rows - 1),
            Axis.COL: (0, self.cols - 1),
        }

    def contains(self, coordinate: Coordinate) -> bool:
        row, col = coordinate.row, coordinate.col
        if row is None or col is None:
            return False
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell_at(self, coordinate: Coordinate) -> Cell | None:
        """Return the cell at a coordinate, or None if it lies off the grid."""
        if not self.contains(coordinate):
            return None
        return Cell(self, coordinate)

    def traverse(
        self,
        primary: Direction,
        secondary: Direction,
        value_filter: str | None = None,
    ) -> GridTraversal:
        """
        Sweep the grid along the primary direction, moving one step along the
        secondary direction each time the primary one runs off the edge.

        Both directions should have simple (single-axis) orientations on
        different axes.

        Args:
            primary: Direction stepped on every move
            secondary: Direction stepped after the primary axis wraps around
            value_filter: If given, only cells holding this value are yielded

        Returns:
            A restartable iterable of cells
        """
        return GridTraversal(self, primary, secondary, value_filter)


class GridTraversal:
    """
    Iterable over the cells of a sweep.

    Each call to iter() starts a new pass from the first cell. A pass yields
    at most rows * cols cells and always terminates.
    """

    def __init__(
        self,
        grid: Grid,
        primary: Direction,
        secondary: Direction,
        value_filter: str | None = None,
    ):
        self.grid = grid
        self.primary = primary
        self.secondary = secondary
        self.value_filter = value_filter

    def __iter__(self) -> Iterator[Cell]:
        boundaries = self.grid.boundaries
        start = self.secondary.start(boundaries).merge(self.primary.start(boundaries))
        cell = self.grid.cell_at(start)

        while cell is not None:
            if self.value_filter is None or cell.value == self.value_filter:
                yield cell

            next_cell = cell.next(self.primary)
            if next_cell is None:
                wrapped = cell.next(self.primary, wrap_around=True)
                next_cell = wrapped.next(self.secondary) if wrapped is not None else None
            cell = next_cell


# =============================================================================
# Cell
# =============================================================================


class Cell:
    """
    A single position on a grid. Its value is read from the grid.

    Construction checks the coordinate against the grid; use Grid.cell_at
    to get None instead of an error for positions off the grid.
    """

    __slots__ = ("grid", "coordinate", "_row", "_col")

    def __init__(self, grid: Grid, coordinate: Coordinate):
        row, col = coordinate.row, coordinate.col
        if row is None or col is None or not grid.contains(coordinate):
            raise ValueError(f"{coordinate} is not on the {grid.rows}x{grid.cols} grid")
        self.grid = grid
        self.coordinate = coordinate
        self._row = row
        self._col = col

    @property
    def value(self) -> str:
        return self.grid.cells[self._row][self._col]

    @property
    def row(self) -> int:
        """Human-readable (1-based) row number."""
        return self._row + 1

    @property
    def column(self) -> int:
        """Human-readable (1-based) column number."""
        return self._col + 1

    def next(self, direction: Direction, wrap_around: bool = False) -> Cell | None:
        """Return the cell after this one in the given direction, if any."""
        boundaries = self.grid.boundaries if wrap_around else None
        return self.grid.cell_at(direction.step_forward(self.coordinate, wrap_around, boundaries))

    def previous(self, direction: Direction, wrap_around: bool = False) -> Cell | None:
        """Return the cell before this one in the given direction, if any."""
        boundaries = self.grid.boundaries if wrap_around else None
        return self.grid.cell_at(direction.step_backward(self.coordinate, wrap_around, boundaries))

    def is_empty(self) -> bool:
        return self.value == self.grid.empty

    def is_supported(self) -> bool:
        """True if the cell directly below is filled or this is the bottom row."""
        below = self.previous(DOWNWARD)
        return below is None or not below.is_empty()

    def format(self, template: str = "{row}:{column}:{value}") -> str:
        """
        Describe this cell with a template.

        Placeholders: {row} and {column} (1-based) and {value}.
        """
        return template.format(row=self.row, column=self.column, value=self.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return self.grid is other.grid and self.coordinate == other.coordinate

    def __hash__(self) -> int:
        return hash((id(self.grid), self.coordinate))

    def __repr__(self) -> str:
        return f"Cell({self.coordinate.row}, {self.coordinate.col}, {self.value!r})"


# =============================================================================
# Cell runs
# =============================================================================


class CellRun:
    """
    Consecutive cells along one direction.

    Each cell is the direct neighbour, in `direction`, of the one before it.
    The run can grow by one cell at either end.
    """

    def __init__(self, direction: Direction, *cells: Cell):
        self.direction = direction
        self._cells: deque[Cell] = deque(cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __getitem__(self, index: int) -> Cell:
        return self._cells[index]

    @property
    def first(self) -> Cell:
        return self._cells[0]

    @property
    def last(self) -> Cell:
        return self._cells[-1]

    def following(self) -> Cell | None:
        """The cell just past the end of the run."""
        return self.last.next(self.direction)

    def preceding(self) -> Cell | None:
        """The cell just before the start of the run."""
        return self.first.previous(self.direction)

    def append_following(self) -> Cell | None:
        """Extend the run at its end. Returns the added cell, or None at the edge."""
        cell = self.following()
        if cell is not None:
            self._cells.append(cell)
        return cell

    def prepend_preceding(self) -> Cell | None:
        """Extend the run at its start. Returns the added cell, or None at the edge."""
        cell = self.preceding()
        if cell is not None:
            self._cells.appendleft(cell)
        return cell

    def values(self) -> tuple[str, ...]:
        return tuple(cell.value for cell in self._cells)

    def __repr__(self) -> str:
        return f"CellRun({self.direction}, {list(self._cells)!r})"
