"""Tests for FEN decoding."""

import pytest

from chessmoves.core.notation import (
    BLANK,
    STARTING_FEN,
    FenError,
    FenErrorKind,
    FenRecord,
    NotationError,
    parse_fen,
)
from chessmoves.core.types import Coord


class TestFenParsing:
    def test_starting_fields(self) -> None:
        record = parse_fen(STARTING_FEN)
        assert record.active_color == "w"
        assert record.castling == "KQkq"
        assert record.en_passant == "-"
        assert record.halfmove_clock == 0
        assert record.fullmove_number == 1

    def test_starting_squares(self) -> None:
        record = parse_fen(STARTING_FEN)
        assert len(record.squares) == 64
        assert "".join(record.squares[:8]) == "rnbqkbnr"
        assert "".join(record.squares[56:]) == "RNBQKBNR"
        assert all(sq == BLANK for sq in record.squares[16:48])

    def test_ranks_and_piece_at(self) -> None:
        record = parse_fen(STARTING_FEN)
        ranks = record.ranks()
        assert len(ranks) == 8
        assert ranks[1] == ("p",) * 8
        assert record.piece_at(Coord(7, 4)) == "K"
        assert record.piece_at(Coord(3, 3)) == BLANK

    def test_fields_kept_verbatim(self) -> None:
        record = parse_fen("8/8/8/8/8/8/8/8 black Zz e9 12 40")
        assert record.active_color == "b"
        assert record.castling == "Zz"
        assert record.en_passant == "e9"
        assert record.halfmove_clock == 12
        assert record.fullmove_number == 40

    def test_unknown_letters_kept(self) -> None:
        record = parse_fen("x7/8/8/8/8/8/8/8 w - - 0 1")
        assert record.squares[0] == "x"

    def test_rank_count_not_checked(self) -> None:
        # Four ranks of sixteen still add up to 64 squares.
        record = parse_fen("88/88/88/rnbqkbnrpppppppp w - - 0 1")
        assert len(record.squares) == 64

    def test_extra_whitespace_tolerated(self) -> None:
        record = parse_fen(f"  {STARTING_FEN.replace(' ', chr(9))}\n")
        assert record.fullmove_number == 1

    def test_record_is_immutable(self) -> None:
        record = parse_fen(STARTING_FEN)
        assert isinstance(record, FenRecord)
        with pytest.raises(AttributeError):
            record.active_color = "b"  # type: ignore[misc]


class TestFenErrors:
    def _kind(self, fen: str) -> FenErrorKind:
        with pytest.raises(FenError) as excinfo:
            parse_fen(fen)
        return excinfo.value.kind

    def test_five_fields(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0"
        assert self._kind(fen) == FenErrorKind.WRONG_FIELD_COUNT

    def test_seven_fields(self) -> None:
        assert self._kind(STARTING_FEN + " x") == FenErrorKind.WRONG_FIELD_COUNT

    def test_empty_input(self) -> None:
        assert self._kind("") == FenErrorKind.WRONG_FIELD_COUNT

    def test_63_squares(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBN w KQkq - 0 1"
        assert self._kind(fen) == FenErrorKind.BOARD_SIZE_MISMATCH

    def test_65_squares(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNRR w KQkq - 0 1"
        assert self._kind(fen) == FenErrorKind.BOARD_SIZE_MISMATCH

    @pytest.mark.parametrize("value", ["x", "-1", "1.5", "4294967296", "+"])
    def test_invalid_halfmove(self, value: str) -> None:
        fen = f"8/8/8/8/8/8/8/8 w - - {value} 1"
        assert self._kind(fen) == FenErrorKind.INVALID_HALFMOVE_CLOCK

    def test_invalid_fullmove(self) -> None:
        fen = "8/8/8/8/8/8/8/8 w - - 0 one"
        assert self._kind(fen) == FenErrorKind.INVALID_FULLMOVE_NUMBER

    def test_counter_accepts_plus_sign(self) -> None:
        assert parse_fen("8/8/8/8/8/8/8/8 w - - +3 +4").halfmove_clock == 3

    def test_counters_checked_before_board(self) -> None:
        assert self._kind("8/8 w - - x 1") == FenErrorKind.INVALID_HALFMOVE_CLOCK

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="halfmove clock"):
            parse_fen("8/8/8/8/8/8/8/8 w - - x 1")
        assert issubclass(FenError, NotationError)
