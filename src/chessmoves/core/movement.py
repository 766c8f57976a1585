"""Geometric movement rules, one pure predicate per piece kind.

A rule only looks at the shape of a move: the row/column deltas between the
origin and the target.  It never sees a board, so blocking pieces, captures,
colour and turn order play no part.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TypeAlias

from chessmoves.core.enums import PieceType
from chessmoves.core.types import Coord, all_coords

MoveRule: TypeAlias = Callable[[Coord, Coord], bool]


def _deltas(origin: Coord, target: Coord) -> tuple[int, int]:
    """Absolute ``(column, row)`` distances."""
    return abs(origin.column - target.column), abs(origin.row - target.row)


# ── Rules ────────────────────────────────────────────────────────────────


def pawn_can_move(origin: Coord, target: Coord) -> bool:
    """Pawns only advance towards higher rows, whatever their colour.

    A single step needs an origin row of at least 1; the double step is
    hard-wired to row 1 -> row 3 on the same column.  Single steps may go
    straight or one column sideways.
    """
    same_column = origin.column == target.column
    one_column = abs(origin.column - target.column) == 1
    single_step = origin.row >= 1 and target.row == origin.row + 1
    double_step = origin.row == 1 and target.row == 3 and same_column
    return (single_step or double_step) and (same_column or one_column)


def knight_can_move(origin: Coord, target: Coord) -> bool:
    dx, dy = _deltas(origin, target)
    return dx + dy == 3 and dx * dy == 2


def bishop_can_move(origin: Coord, target: Coord) -> bool:
    dx, dy = _deltas(origin, target)
    return dx == dy


def rook_can_move(origin: Coord, target: Coord) -> bool:
    return origin.row == target.row or origin.column == target.column


def queen_can_move(origin: Coord, target: Coord) -> bool:
    return bishop_can_move(origin, target) or rook_can_move(origin, target)


def king_can_move(origin: Coord, target: Coord) -> bool:
    dx, dy = _deltas(origin, target)
    return dx <= 1 and dy <= 1


MOVE_RULES: dict[PieceType, MoveRule] = {
    PieceType.PAWN: pawn_can_move,
    PieceType.KNIGHT: knight_can_move,
    PieceType.BISHOP: bishop_can_move,
    PieceType.ROOK: rook_can_move,
    PieceType.QUEEN: queen_can_move,
    PieceType.KING: king_can_move,
}


def can_move(piece_type: PieceType, origin: Coord, target: Coord) -> bool:
    """Whether *piece_type* may trace the shape ``origin -> target``."""
    return MOVE_RULES[piece_type](origin, target)


# ── Target enumeration ───────────────────────────────────────────────────


class Targets:
    """Lazy, re-iterable view of every square a rule reaches from *source*.

    Each iteration rescans the 64 board squares in index order.  The source
    itself is included whenever the rule accepts a zero-length move.
    """

    __slots__ = ("_rule", "_source")

    def __init__(self, rule: MoveRule, source: Coord) -> None:
        self._rule = rule
        self._source = source

    @property
    def source(self) -> Coord:
        return self._source

    def __iter__(self) -> Iterator[Coord]:
        for candidate in all_coords():
            if self._rule(self._source, candidate):
                yield candidate

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, Coord) or not item.is_on_board:
            return False
        return self._rule(self._source, item)

    def __repr__(self) -> str:
        return f"Targets({self._rule.__name__}, {self._source})"


def available_targets(rule: MoveRule, source: Coord) -> Targets:
    """Every board square *rule* accepts as a destination from *source*."""
    return Targets(rule, source)
