"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from chessmoves.core.enums import Color, PieceType
from chessmoves.core.piece import Piece


@pytest.fixture
def white_rook() -> Piece:
    return Piece(Color.WHITE, PieceType.ROOK)


@pytest.fixture
def black_knight() -> Piece:
    return Piece(Color.BLACK, PieceType.KNIGHT)


@pytest.fixture(autouse=True)
def _reset_root_logging() -> Iterator[None]:
    """Keep handlers installed by ``app.main`` from leaking between tests."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
