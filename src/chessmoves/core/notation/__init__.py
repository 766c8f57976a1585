"""Notation package: FEN and PGN decoding."""

from chessmoves.core.notation.errors import FenError, FenErrorKind, NotationError
from chessmoves.core.notation.fen import BLANK, STARTING_FEN, parse_fen
from chessmoves.core.notation.models import FenRecord, MovePair, PgnGame
from chessmoves.core.notation.pgn import parse_pgn, parse_pgn_moves, parse_pgn_tags

__all__ = [
    "BLANK",
    "STARTING_FEN",
    "FenError",
    "FenErrorKind",
    "FenRecord",
    "MovePair",
    "NotationError",
    "PgnGame",
    "parse_fen",
    "parse_pgn",
    "parse_pgn_moves",
    "parse_pgn_tags",
]
