"""
Grid geometry: axes, orientations, orders and directions.
A Direction pairs an Orientation with an Order and knows how to step a
Coordinate forward or backward, optionally wrapping around the grid edges.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from functools import reduce
from operator import xor


class Axis(Enum):
    """One of the two grid axes."""

    ROW = "row"  # Index of the row (vertical traversal)
    COL = "col"  # Index within a row (horizontal traversal)


# Valid (low, high) index range for each axis of a grid
Boundaries = dict[Axis, tuple[int, int]]


@dataclass(frozen=True)
class AxisBounds:
    """Boundaries of one axis resolved into traversal order."""

    start: int
    end: int


@dataclass(frozen=True)
class Vector:
    """A traversal axis, optionally stepped in the opposite sense."""

    axis: Axis
    inverted: bool = False


# =============================================================================
# Order
# =============================================================================


class Order(Enum):
    """Stepping sense along an axis."""

    ASCENDING = 1
    DESCENDING = -1

    @property
    def increase(self) -> int:
        """The value added to an index to move one step in this order."""
        return self.value

    def boundaries(self, bounds: tuple[int, int]) -> AxisBounds:
        """Assign a raw (a, b) range to start and end according to this order."""
        if self is Order.ASCENDING:
            return AxisBounds(start=min(bounds), end=max(bounds))
        return AxisBounds(start=max(bounds), end=min(bounds))

    def invert(self, *flags: bool) -> Order:
        """
        Compose this order with any number of inversion flags.

        An odd number of true flags yields the opposite order, an even number
        (including none) yields this order.
        """
        if reduce(xor, flags, False):
            return Order.DESCENDING if self is Order.ASCENDING else Order.ASCENDING
        return self


# =============================================================================
# Orientation
# =============================================================================


class Orientation(Enum):
    """Named family of directions, defined by the vectors it steps along."""

    HORIZONTAL = (Vector(Axis.COL),)
    VERTICAL = (Vector(Axis.ROW),)
    FORWARD_DIAGONAL = (Vector(Axis.COL, inverted=True), Vector(Axis.ROW))  # /
    BACKWARD_DIAGONAL = (Vector(Axis.COL), Vector(Axis.ROW))  # \

    @property
    def vectors(self) -> tuple[Vector, ...]:
        return self.value

    @property
    def is_simple(self) -> bool:
        """True when the orientation steps along a single axis."""
        return len(self.value) == 1


# =============================================================================
# Coordinate
# =============================================================================


@dataclass(frozen=True)
class Coordinate:
    """
    A 0-based position on a grid.

    Either axis may be unset, which is how the start of a single-axis
    direction is expressed before it is merged with another.
    """

    row: int | None = None
    col: int | None = None

    def get(self, axis: Axis) -> int | None:
        match axis:
            case Axis.ROW:
                return self.row
            case Axis.COL:
                return self.col

    def with_axis(self, axis: Axis, value: int) -> Coordinate:
        match axis:
            case Axis.ROW:
                return replace(self, row=value)
            case Axis.COL:
                return replace(self, col=value)

    def merge(self, other: Coordinate) -> Coordinate:
        """Combine two coordinates, values set in `other` taking precedence."""
        return Coordinate(
            row=other.row if other.row is not None else self.row,
            col=other.col if other.col is not None else self.col,
        )

    @property
    def is_complete(self) -> bool:
        return self.row is not None and self.col is not None


# =============================================================================
# Direction
# =============================================================================


@dataclass(frozen=True)
class Direction:
    """An orientation travelled in a given order."""

    orientation: Orientation
    order: Order

    def start(self, boundaries: Boundaries) -> Coordinate:
        """
        Return the first coordinate of a traversal in this direction.

        Only the axes of this direction's orientation are set.
        """
        coordinate = Coordinate()
        for vector in self.orientation.vectors:
            order = self.order.invert(vector.inverted)
            coordinate = coordinate.with_axis(vector.axis, order.boundaries(boundaries[vector.axis]).start)
        return coordinate

    def step_forward(
        self,
        coordinate: Coordinate,
        wrap_around: bool = False,
        boundaries: Boundaries | None = None,
    ) -> Coordinate:
        """
        Return the coordinate one step further along this direction.

        Args:
            coordinate: The coordinate to step from
            wrap_around: If True, an axis sitting at its end boundary (or not
                         set at all) is reset to its start boundary instead
                         of being stepped past the edge.
            boundaries: Grid boundaries, required when wrap_around is True.

        Returns:
            The next coordinate. It may lie outside the grid; callers check.
        """
        return self._step(coordinate, False, wrap_around, boundaries)

    def step_backward(
        self,
        coordinate: Coordinate,
        wrap_around: bool = False,
        boundaries: Boundaries | None = None,
    ) -> Coordinate:
        """Return the coordinate one step back along this direction."""
        return self._step(coordinate, True, wrap_around, boundaries)

    def reversed(self) -> Direction:
        """The same orientation travelled in the opposite order."""
        return Direction(self.orientation, self.order.invert(True))

    def _step(
        self,
        coordinate: Coordinate,
        reverse: bool,
        wrap_around: bool,
        boundaries: Boundaries | None,
    ) -> Coordinate:
        wrap_bounds = boundaries if wrap_around else None
        if wrap_around and wrap_bounds is None:
            raise ValueError("wrap_around requires grid boundaries")

        for vector in self.orientation.vectors:
            order = self.order.invert(vector.inverted, reverse)
            current = coordinate.get(vector.axis)

            if wrap_bounds is not None:
                bounds = order.boundaries(wrap_bounds[vector.axis])
                if current is None or current == bounds.end:
                    coordinate = coordinate.with_axis(vector.axis, bounds.start)
                    continue

            if current is None:
                raise ValueError(f"Cannot step {self}: coordinate has no {vector.axis.value} index")

            coordinate = coordinate.with_axis(vector.axis, current + order.increase)

        return coordinate

    def __str__(self) -> str:
        return f"{self.orientation.name}-{self.order.name}"
