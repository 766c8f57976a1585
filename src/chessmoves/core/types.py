"""Coordinate value type and board-geometry helpers.

Board layout (row-major, row 0 first)::

    index  0 -> (0, 0), index  7 -> (0, 7)
    index  8 -> (1, 0), ...
    index 63 -> (7, 7)
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

BOARD_SIZE = 8
SQUARE_COUNT = BOARD_SIZE * BOARD_SIZE


@dataclass(frozen=True, slots=True, order=True)
class Coord:
    """Immutable ``(row, column)`` pair addressing a board square."""

    row: int
    column: int

    @classmethod
    def from_index(cls, index: int) -> Coord:
        """Map a linear index to a coordinate, e.g. ``9 -> (1, 1)``.

        No range check is performed: indices past 63 yield off-board rows.
        """
        return cls(index // BOARD_SIZE, index % BOARD_SIZE)

    @property
    def index(self) -> int:
        """Linear index, the inverse of :meth:`from_index` on the board."""
        return self.row * BOARD_SIZE + self.column

    @property
    def is_on_board(self) -> bool:
        return 0 <= self.row < BOARD_SIZE and 0 <= self.column < BOARD_SIZE

    def __str__(self) -> str:
        return f"({self.row}, {self.column})"


def all_coords() -> Iterator[Coord]:
    """The 64 board-aligned coordinates in index order."""
    for index in range(SQUARE_COUNT):
        yield Coord.from_index(index)
