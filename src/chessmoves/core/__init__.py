"""Core domain layer — pure chess geometry and notation with zero external dependencies.

Quick start::

    from chessmoves.core import Board, Color, Coord, Piece, PieceType

    board = Board({Coord(0, 0): Piece(Color.WHITE, PieceType.ROOK)})
    board.can_move_between(Coord(0, 0), Coord(0, 7))  # True
    list(board[Coord(0, 0)].available_targets(Coord(0, 0)))
"""

from chessmoves.core.board import Board, Square
from chessmoves.core.enums import Color, PieceType, TargetKind
from chessmoves.core.movement import (
    MOVE_RULES,
    MoveRule,
    Targets,
    available_targets,
    can_move,
)
from chessmoves.core.notation import (
    STARTING_FEN,
    FenError,
    FenErrorKind,
    FenRecord,
    MovePair,
    NotationError,
    PgnGame,
    parse_fen,
    parse_pgn,
)
from chessmoves.core.piece import Piece
from chessmoves.core.types import BOARD_SIZE, SQUARE_COUNT, Coord, all_coords

__all__ = [
    # Enums
    "Color",
    "PieceType",
    "TargetKind",
    # Types / helpers
    "BOARD_SIZE",
    "SQUARE_COUNT",
    "Coord",
    "Square",
    "all_coords",
    # Domain objects
    "Board",
    "Piece",
    # Movement
    "MOVE_RULES",
    "MoveRule",
    "Targets",
    "available_targets",
    "can_move",
    # Notation
    "STARTING_FEN",
    "FenError",
    "FenErrorKind",
    "FenRecord",
    "MovePair",
    "NotationError",
    "PgnGame",
    "parse_fen",
    "parse_pgn",
]
