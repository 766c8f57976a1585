"""Shared notation-layer data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple

from chessmoves.core.types import BOARD_SIZE, Coord


@dataclass(frozen=True, slots=True)
class FenRecord:
    """Decoded FEN snapshot.

    ``squares`` holds 64 entries in FEN reading order: a piece letter, or
    the blank marker for an empty square.
    """

    squares: tuple[str, ...]
    active_color: str
    castling: str
    en_passant: str
    halfmove_clock: int
    fullmove_number: int

    def piece_at(self, coord: Coord) -> str:
        return self.squares[coord.index]

    def ranks(self) -> list[tuple[str, ...]]:
        """The squares chunked into rows of eight."""
        return [
            self.squares[start : start + BOARD_SIZE]
            for start in range(0, len(self.squares), BOARD_SIZE)
        ]


class MovePair(NamedTuple):
    """One numbered move group: White's move followed by Black's reply."""

    white: str
    black: str


@dataclass(slots=True)
class PgnGame:
    """Header tags and paired moves extracted from PGN text."""

    tags: dict[str, str] = field(default_factory=dict)
    moves: list[MovePair] = field(default_factory=list)
