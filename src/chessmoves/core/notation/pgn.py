"""PGN parsing.

Decoding is a pair of regex scans over the raw text and never fails: text
that does not fit either pattern is left out of the result.  Comments,
variations, NAGs and result tokens get no special treatment, and a white
move without a black reply (``43. Re6`` at the end of a game) is dropped.
"""

from __future__ import annotations

import logging
import re

from chessmoves.core.notation.models import MovePair, PgnGame

_LOGGER = logging.getLogger(__name__)

_PGN_TAG_RE = re.compile(r'\[(\w+)\s+"([^"]+)"\]')
_PGN_MOVE_PAIR_RE = re.compile(r"(\d+)\.\s+(\S+)\s+(\S+)")


def parse_pgn_tags(pgn_text: str) -> dict[str, str]:
    """Every ``[Key "Value"]`` pair in *pgn_text*; later keys overwrite."""
    tags: dict[str, str] = {}
    for match in _PGN_TAG_RE.finditer(pgn_text):
        key, value = match.groups()
        tags[key] = value
    return tags


def parse_pgn_moves(pgn_text: str) -> list[MovePair]:
    """Every ``N. white black`` group in order of appearance."""
    return [
        MovePair(match.group(2), match.group(3))
        for match in _PGN_MOVE_PAIR_RE.finditer(pgn_text)
    ]


def parse_pgn(pgn_text: str) -> PgnGame:
    """Parse a single PGN game into header tags and move pairs."""
    game = PgnGame(tags=parse_pgn_tags(pgn_text), moves=parse_pgn_moves(pgn_text))
    _LOGGER.debug(
        "Decoded PGN: %d tags, %d move pairs", len(game.tags), len(game.moves)
    )
    return game
