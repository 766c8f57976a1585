"""Decode failures raised by the notation parsers."""

from __future__ import annotations

from enum import Enum


class NotationError(ValueError):
    """Base class for text that cannot be decoded."""


class FenErrorKind(Enum):
    """Why a FEN record was rejected."""

    WRONG_FIELD_COUNT = "wrong field count"
    BOARD_SIZE_MISMATCH = "board size mismatch"
    MISSING_ACTIVE_COLOR = "missing active color"
    INVALID_HALFMOVE_CLOCK = "invalid halfmove clock"
    INVALID_FULLMOVE_NUMBER = "invalid fullmove number"


class FenError(NotationError):
    """A FEN record failed validation; ``kind`` names the failed check."""

    def __init__(self, kind: FenErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
