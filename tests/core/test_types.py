"""Tests for Coord and index mapping."""

import pytest

from chessmoves.core.types import SQUARE_COUNT, Coord, all_coords


class TestFromIndex:
    @pytest.mark.parametrize(
        ("index", "expected"),
        [
            (0, Coord(0, 0)),
            (1, Coord(0, 1)),
            (7, Coord(0, 7)),
            (8, Coord(1, 0)),
            (14, Coord(1, 6)),
            (63, Coord(7, 7)),
        ],
    )
    def test_known_indices(self, index: int, expected: Coord) -> None:
        assert Coord.from_index(index) == expected

    def test_roundtrip_all_squares(self) -> None:
        for index in range(SQUARE_COUNT):
            coord = Coord.from_index(index)
            assert coord.row * 8 + coord.column == index
            assert coord.index == index

    def test_past_board_is_not_rejected(self) -> None:
        coord = Coord.from_index(64)
        assert coord == Coord(8, 0)
        assert not coord.is_on_board


class TestCoordValue:
    def test_equal_coords_share_hash(self) -> None:
        assert Coord(3, 4) == Coord(3, 4)
        assert hash(Coord(3, 4)) == hash(Coord(3, 4))
        assert {Coord(3, 4): "x"}[Coord(3, 4)] == "x"

    def test_immutable(self) -> None:
        coord = Coord(1, 2)
        with pytest.raises(AttributeError):
            coord.row = 5  # type: ignore[misc]

    def test_on_board(self) -> None:
        assert Coord(0, 0).is_on_board
        assert Coord(7, 7).is_on_board
        assert not Coord(-1, 0).is_on_board
        assert not Coord(0, 8).is_on_board

    def test_all_coords_in_index_order(self) -> None:
        coords = list(all_coords())
        assert len(coords) == SQUARE_COUNT
        assert [c.index for c in coords] == list(range(SQUARE_COUNT))
