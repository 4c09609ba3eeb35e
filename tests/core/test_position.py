"""Tests for board snapshots and square helpers."""

import pytest

from checkmateiq.core import (
    STARTING_FEN,
    Color,
    PieceType,
    Position,
    center_distance,
    file_of,
    in_central_block,
    parse_square,
    rank_of,
    square_name,
)


class TestSquares:
    def test_round_trip_names(self) -> None:
        assert parse_square("a1") == 0
        assert parse_square("h8") == 63
        assert parse_square("e4") == 28
        assert square_name(28) == "e4"

    def test_file_and_rank(self) -> None:
        sq = parse_square("c6")
        assert file_of(sq) == 2
        assert rank_of(sq) == 5

    @pytest.mark.parametrize("name", ["", "e9", "i1", "e44"])
    def test_invalid_square(self, name: str) -> None:
        with pytest.raises(ValueError):
            parse_square(name)

    def test_center_distance(self) -> None:
        assert center_distance(parse_square("d4")) == pytest.approx(1.0)
        assert center_distance(parse_square("a1")) == pytest.approx(7.0)
        assert center_distance(parse_square("b1")) == pytest.approx(6.0)

    def test_central_block(self) -> None:
        assert in_central_block(parse_square("c3"))
        assert in_central_block(parse_square("f6"))
        assert not in_central_block(parse_square("e1"))
        assert not in_central_block(parse_square("g4"))


class TestPosition:
    def test_starting_pieces(self) -> None:
        pos = Position(STARTING_FEN, Color.WHITE, legal_move_count=20)
        pieces = pos.pieces()
        assert len(pieces) == 32
        by_square = {p.square: p for p in pieces}
        king = by_square[parse_square("e1")]
        assert king.piece_type == PieceType.KING
        assert king.color == Color.WHITE
        assert by_square[parse_square("d8")].piece_type == PieceType.QUEEN
        assert by_square[parse_square("d8")].color == Color.BLACK

    def test_pieces_sorted_by_square(self) -> None:
        pos = Position("4k3/8/8/8/3N4/8/8/4K3 w - - 0 1", Color.WHITE)
        assert [square_name(p.square) for p in pos.pieces()] == ["e1", "d4", "e8"]

    def test_placement(self) -> None:
        pos = Position(STARTING_FEN, Color.WHITE)
        assert pos.placement == "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"

    def test_is_frozen(self) -> None:
        pos = Position(STARTING_FEN, Color.WHITE)
        with pytest.raises(AttributeError):
            pos.fen = "8/8/8/8/8/8/8/8 w - - 0 1"  # type: ignore[misc]

    def test_color_helpers(self) -> None:
        assert Color.WHITE.opposite == Color.BLACK
        assert Color.BLACK.sign == -1
        assert PieceType.from_symbol("N") == PieceType.KNIGHT
        with pytest.raises(ValueError):
            PieceType.from_symbol("x")
