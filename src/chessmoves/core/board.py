"""Board - coordinate to square-content mapping on an 8x8 grid."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import TypeAlias

from chessmoves.core.enums import TargetKind
from chessmoves.core.piece import Piece
from chessmoves.core.types import BOARD_SIZE, Coord, all_coords

_LOGGER = logging.getLogger(__name__)

# None stands for an empty square.
Square: TypeAlias = Piece | None


class Board:
    """Mutable board keyed by :class:`Coord`.

    Every board-aligned coordinate is materialised as empty on construction,
    and :meth:`put` only fills coordinates that have no entry yet.  Pieces
    passed to the constructor are stored before the empty squares are
    seeded, so they survive.
    """

    __slots__ = ("_squares",)

    def __init__(self, pieces: Mapping[Coord, Square] | None = None) -> None:
        self._squares: dict[Coord, Square] = {}
        if pieces:
            for coord, content in pieces.items():
                self.put(coord, content)
        self.fill_empty()

    def fill_empty(self) -> Board:
        """Seed every board-aligned coordinate without an entry as empty."""
        for coord in all_coords():
            self._squares.setdefault(coord, None)
        return self

    # -- Factory ------------------------------------------------------------

    @classmethod
    def unseeded(cls) -> Board:
        """Board with no entries at all; lookups still answer empty."""
        b = cls.__new__(cls)
        b._squares = {}
        return b

    # -- Element access -----------------------------------------------------

    def put(self, coord: Coord, content: Square) -> Board:
        """Insert *content* at *coord* unless the coordinate already has an entry.

        The pre-seeded empty squares count as entries, so on a board built
        with ``Board()`` this only fills coordinates off the 8x8 grid.  The
        first value stored at a coordinate wins; later puts are no-ops.
        """
        if coord in self._squares:
            _LOGGER.debug("Ignoring put at %s: coordinate already populated", coord)
            return self
        self._squares[coord] = content
        return self

    def get(self, coord: Coord) -> Square:
        return self._squares.get(coord)

    def __getitem__(self, coord: Coord) -> Square:
        return self.get(coord)

    def __contains__(self, coord: object) -> bool:
        return coord in self._squares

    def __len__(self) -> int:
        return len(self._squares)

    def is_empty(self, coord: Coord) -> bool:
        return self.get(coord) is None

    # -- Query helpers ------------------------------------------------------

    def can_move_between(self, origin: Coord, target: Coord) -> bool:
        """Whether the piece on *origin* may trace the shape to *target*.

        The occupant of *target* is not consulted.
        """
        piece = self.get(origin)
        if piece is None:
            return False
        return piece.can_move(origin, target)

    def target_kind(self, origin: Coord, target: Coord) -> TargetKind | None:
        """Classify *target* relative to the piece on *origin* (None if empty)."""
        piece = self.get(origin)
        if piece is None:
            return None
        other = self.get(target)
        if other is None:
            return TargetKind.EMPTY
        if other.color == piece.color:
            return TargetKind.SAME
        return TargetKind.OPPOSITE

    def occupied(self) -> Iterator[tuple[Coord, Piece]]:
        """Occupied squares in coordinate order."""
        for coord in sorted(self._squares):
            piece = self._squares[coord]
            if piece is not None:
                yield coord, piece

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            cells = []
            for column in range(BOARD_SIZE):
                p = self.get(Coord(row, column))
                cells.append(str(p) if p else ".")
            rows.append(f"{row} {' '.join(cells)}")
        rows.append("  " + " ".join(str(column) for column in range(BOARD_SIZE)))
        return "\n".join(rows)
