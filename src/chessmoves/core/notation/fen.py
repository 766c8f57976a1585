"""FEN parsing."""

from __future__ import annotations

import logging
import re

from chessmoves.core.notation.errors import FenError, FenErrorKind
from chessmoves.core.notation.models import FenRecord
from chessmoves.core.types import SQUARE_COUNT

_LOGGER = logging.getLogger(__name__)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

# Placeholder for an empty square in the expanded board field.
BLANK = " "

_FIELD_COUNT = 6
_COUNTER_RE = re.compile(r"\+?[0-9]+")
_COUNTER_MAX = 2**32 - 1


def _parse_counter(text: str) -> int | None:
    """Unsigned 32-bit decimal, or None if *text* is not one."""
    if _COUNTER_RE.fullmatch(text) is None:
        return None
    value = int(text)
    if value > _COUNTER_MAX:
        return None
    return value


def _expand_board(placement: str) -> list[str]:
    squares: list[str] = []
    for rank_text in placement.split("/"):
        for ch in rank_text:
            if ch.isascii() and ch.isdigit():
                squares.extend([BLANK] * int(ch))
            else:
                squares.append(ch)
    return squares


def parse_fen(fen: str) -> FenRecord:
    """Parse a six-field FEN string into a :class:`FenRecord`.

    Raises :class:`FenError` when any field fails validation; no partial
    record is returned.  Castling and en-passant fields are kept verbatim,
    and rank boundaries are not checked beyond the 64-square total.
    """
    parts = fen.split()
    if len(parts) != _FIELD_COUNT:
        raise FenError(
            FenErrorKind.WRONG_FIELD_COUNT,
            f"Invalid FEN (need {_FIELD_COUNT} fields, got {len(parts)}): {fen!r}",
        )

    placement, side_part, castling, en_passant, halfmove_part, fullmove_part = parts

    if not side_part:
        raise FenError(
            FenErrorKind.MISSING_ACTIVE_COLOR, f"Invalid FEN active color: {fen!r}"
        )
    active_color = side_part[0]

    halfmove = _parse_counter(halfmove_part)
    if halfmove is None:
        raise FenError(
            FenErrorKind.INVALID_HALFMOVE_CLOCK,
            f"Invalid FEN halfmove clock: {halfmove_part!r}",
        )

    fullmove = _parse_counter(fullmove_part)
    if fullmove is None:
        raise FenError(
            FenErrorKind.INVALID_FULLMOVE_NUMBER,
            f"Invalid FEN fullmove number: {fullmove_part!r}",
        )

    squares = _expand_board(placement)
    if len(squares) != SQUARE_COUNT:
        raise FenError(
            FenErrorKind.BOARD_SIZE_MISMATCH,
            f"Invalid FEN board ({len(squares)} squares, need {SQUARE_COUNT}): "
            f"{placement!r}",
        )

    _LOGGER.debug("Decoded FEN %r", fen)
    return FenRecord(
        squares=tuple(squares),
        active_color=active_color,
        castling=castling,
        en_passant=en_passant,
        halfmove_clock=halfmove,
        fullmove_number=fullmove,
    )
