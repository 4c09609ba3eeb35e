"""Tests for the static position evaluator."""

from __future__ import annotations

import pytest

from checkmateiq.analysis import (
    MAX_SCORE,
    HashedVariation,
    NoVariation,
    PositionEvaluator,
)
from checkmateiq.core import STARTING_FEN, Color, Position
from checkmateiq.rules import ChessRules


def _position(fen: str, side: Color = Color.WHITE, **kwargs: object) -> Position:
    return Position(fen, side, **kwargs)  # type: ignore[arg-type]


def _play(rules: ChessRules, sans: list[str]) -> list[Position]:
    position = rules.initial_position()
    positions = [position]
    for move in rules.parse_moves(position, sans):
        position = rules.apply(position, move)
        positions.append(position)
    return positions


@pytest.fixture
def evaluator() -> PositionEvaluator:
    return PositionEvaluator(NoVariation())


class TestTerms:
    def test_starting_position_is_mobility_only(self, evaluator: PositionEvaluator) -> None:
        pos = _position(STARTING_FEN, legal_move_count=20)
        assert evaluator.evaluate(pos) == pytest.approx(0.4)

    def test_mobility_favors_side_to_move(self, evaluator: PositionEvaluator) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR b KQkq - 0 1"
        pos = _position(fen, Color.BLACK, legal_move_count=20)
        assert evaluator.evaluate(pos) == pytest.approx(-0.4)

    def test_pawn_advancement_and_center_file(self, evaluator: PositionEvaluator) -> None:
        # e7 pawn: 1 + 5 * 0.1 + 0.2; a2 black pawn: 1 + 5 * 0.1.
        pos = _position("4k3/4P3/8/8/8/8/p7/4K3 w - - 0 1")
        assert evaluator.evaluate(pos) == pytest.approx(0.2)

    def test_knight_centralization(self, evaluator: PositionEvaluator) -> None:
        pos = _position("4k3/8/8/8/3N4/8/8/4K3 w - - 0 1")
        assert evaluator.evaluate(pos) == pytest.approx(3.2 + 6 * 0.05)

    def test_bishop_pair(self, evaluator: PositionEvaluator) -> None:
        pair = _position("4k3/8/8/8/8/8/8/2B1KB2 w - - 0 1")
        single = _position("4k3/8/8/8/8/8/8/2B1K3 w - - 0 1")
        assert evaluator.evaluate(pair) == pytest.approx(6.9)
        assert evaluator.evaluate(single) == pytest.approx(3.3)

    def test_check_penalizes_side_in_check(self, evaluator: PositionEvaluator) -> None:
        fen = "4k3/8/8/8/8/8/8/4K3 w - - 0 1"
        calm = evaluator.evaluate(_position(fen))
        white_checked = evaluator.evaluate(_position(fen, is_check=True))
        black_fen = "4k3/8/8/8/8/8/8/4K3 b - - 0 1"
        black_checked = evaluator.evaluate(_position(black_fen, Color.BLACK, is_check=True))
        assert white_checked - calm == pytest.approx(-0.8)
        assert black_checked - calm == pytest.approx(0.8)

    def test_central_king_penalized_in_middlegame(self, evaluator: PositionEvaluator) -> None:
        home = _position(STARTING_FEN)
        exposed = _position("rnbqkbnr/pppppppp/8/8/4K3/8/PPPPPPPP/RNBQ1BNR w kq - 0 1")
        assert evaluator.evaluate(exposed) - evaluator.evaluate(home) == pytest.approx(-0.5)

    def test_central_black_king_favors_white(self, evaluator: PositionEvaluator) -> None:
        home = _position(STARTING_FEN)
        exposed = _position("rnbq1bnr/pppppppp/8/4k3/8/8/PPPPPPPP/RNBQKBNR w KQ - 0 1")
        assert evaluator.evaluate(exposed) - evaluator.evaluate(home) == pytest.approx(0.5)

    def test_king_safety_ignored_in_endgame(self, evaluator: PositionEvaluator) -> None:
        home = _position("4k3/8/8/8/8/8/8/4K3 w - - 0 1")
        central = _position("4k3/8/8/8/4K3/8/8/8 w - - 0 1")
        assert evaluator.evaluate(central) == pytest.approx(evaluator.evaluate(home))


class TestBounds:
    def test_checkmate_white_mated(self, rules: ChessRules) -> None:
        final = _play(rules, ["f3", "e5", "g4", "Qh4#"])[-1]
        evaluator = PositionEvaluator(HashedVariation(seed=3))
        assert evaluator.evaluate(final) == -MAX_SCORE

    def test_checkmate_black_mated(self, rules: ChessRules) -> None:
        final = _play(rules, ["e4", "e5", "Bc4", "Nc6", "Qh5", "Nf6", "Qxf7#"])[-1]
        evaluator = PositionEvaluator(HashedVariation(seed=3))
        assert evaluator.evaluate(final) == MAX_SCORE

    def test_score_is_clamped(self, evaluator: PositionEvaluator) -> None:
        white_heavy = _position("QQQQQQQQ/QQQQQQQQ/8/8/8/8/8/k6K w - - 0 1")
        black_heavy = _position("qqqqqqqq/qqqqqqqq/8/8/8/8/8/K6k w - - 0 1")
        assert evaluator.evaluate(white_heavy) == MAX_SCORE
        assert evaluator.evaluate(black_heavy) == -MAX_SCORE

    def test_game_positions_stay_in_range(self, rules: ChessRules) -> None:
        sans = ["e4", "e5", "Nf3", "Nc6", "Bb5", "a6", "Bxc6", "dxc6", "O-O", "f6"]
        evaluator = PositionEvaluator(HashedVariation(seed=11))
        for position in _play(rules, sans):
            assert -MAX_SCORE <= evaluator.evaluate(position) <= MAX_SCORE


class TestVariation:
    def test_no_variation_is_zero(self) -> None:
        assert NoVariation().offset(STARTING_FEN) == 0.0

    def test_hashed_offset_is_bounded(self, rules: ChessRules) -> None:
        source = HashedVariation(seed=5)
        sans = ["d4", "d5", "c4", "e6", "Nc3", "Nf6", "Bg5", "Be7"]
        for position in _play(rules, sans):
            assert -0.25 <= source.offset(position.fen) <= 0.25

    def test_same_seed_is_reproducible(self) -> None:
        pos = _position(STARTING_FEN, legal_move_count=20)
        first = PositionEvaluator(HashedVariation(seed=42))
        second = PositionEvaluator(HashedVariation(seed=42))
        scores = {first.evaluate(pos) for _ in range(5)}
        assert len(scores) == 1
        assert second.evaluate(pos) in scores

    def test_seed_changes_offset(self) -> None:
        assert HashedVariation(seed=1).offset(STARTING_FEN) != HashedVariation(
            seed=2
        ).offset(STARTING_FEN)

    def test_amplitude_zero_disables(self) -> None:
        assert HashedVariation(seed=9, amplitude=0.0).offset(STARTING_FEN) == 0.0

    def test_negative_amplitude_rejected(self) -> None:
        with pytest.raises(ValueError):
            HashedVariation(amplitude=-0.1)

    def test_variation_only_shifts_score(self) -> None:
        pos = _position(STARTING_FEN, legal_move_count=20)
        source = HashedVariation(seed=8)
        noisy = PositionEvaluator(source).evaluate(pos)
        assert noisy == pytest.approx(0.4 + source.offset(STARTING_FEN))
