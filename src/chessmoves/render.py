"""Plain-text rendering of squares, boards and decoded FEN layouts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chessmoves.core.notation.fen import BLANK
from chessmoves.core.piece import Piece
from chessmoves.core.types import BOARD_SIZE, Coord

if TYPE_CHECKING:
    from chessmoves.core.board import Board, Square
    from chessmoves.core.notation.models import FenRecord


@dataclass(slots=True, frozen=True)
class RenderOptions:
    """How squares are drawn."""

    unicode: bool = True
    empty: str = "."
    separator: str = " "


DEFAULT_OPTIONS = RenderOptions()


def render_square(content: Square, options: RenderOptions = DEFAULT_OPTIONS) -> str:
    if content is None:
        return options.empty
    return content.symbol if options.unicode else str(content)


def render_board(board: Board, options: RenderOptions = DEFAULT_OPTIONS) -> str:
    """One line per row, row 0 first."""
    lines: list[str] = []
    for row in range(BOARD_SIZE):
        cells = [
            render_square(board.get(Coord(row, column)), options)
            for column in range(BOARD_SIZE)
        ]
        lines.append(options.separator.join(cells))
    return "\n".join(lines)


def render_fen_board(record: FenRecord, options: RenderOptions = DEFAULT_OPTIONS) -> str:
    """Rows of a decoded FEN layout; blank markers are drawn as ``options.empty``.

    Characters that are not piece letters are shown as they appear.
    """
    lines: list[str] = []
    for rank in record.ranks():
        lines.append(options.separator.join(_fen_cell(ch, options) for ch in rank))
    return "\n".join(lines)


def _fen_cell(ch: str, options: RenderOptions) -> str:
    if ch == BLANK:
        return options.empty
    if not options.unicode:
        return ch
    try:
        return Piece.from_char(ch).symbol
    except ValueError:
        return ch
