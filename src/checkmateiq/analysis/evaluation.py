"""Static position evaluation.

Scores are in pawns from White's point of view and always lie in
``[-MAX_SCORE, MAX_SCORE]``. There is no search: one call looks at one
position only.
"""

from __future__ import annotations

import hashlib
from typing import Protocol

from checkmateiq.core.enums import Color, PieceType
from checkmateiq.core.position import Piece, Position
from checkmateiq.core.squares import center_distance, in_central_block

MAX_SCORE = 20.0

_PIECE_VALUES: dict[PieceType, float] = {
    PieceType.PAWN: 1.0,
    PieceType.KNIGHT: 3.2,
    PieceType.BISHOP: 3.3,
    PieceType.ROOK: 5.0,
    PieceType.QUEEN: 9.0,
    PieceType.KING: 0.0,
}
_PAWN_ADVANCE_BONUS = 0.1
_PAWN_CENTER_FILE_BONUS = 0.2
_CENTER_FILES = (3, 4)  # d, e
_KNIGHT_CENTER_BONUS = 0.05
_KNIGHT_MAX_CENTER_DISTANCE = 7.0
_BISHOP_PAIR_BONUS = 0.3
_CHECK_PENALTY = 0.8
_KING_SAFETY_MIN_MATERIAL = 20.0
_KING_CENTER_PENALTY = 0.5
_MOBILITY_WEIGHT = 0.02
_DEFAULT_VARIATION = 0.25


class VariationSource(Protocol):
    """Source of the small evaluation noise added to every score."""

    def offset(self, fen: str) -> float: ...


class NoVariation(VariationSource):
    """Fully deterministic mode: the variation term is always zero."""

    __slots__ = ()

    def offset(self, fen: str) -> float:
        del fen
        return 0.0


class HashedVariation(VariationSource):
    """Offset in ``[-amplitude, amplitude]`` derived from a hash of the FEN.

    The same ``(seed, fen)`` pair always yields the same offset, so scores
    are reproducible; changing the seed reshuffles every position.
    """

    __slots__ = ("_amplitude", "_seed")

    def __init__(self, seed: int = 0, amplitude: float = _DEFAULT_VARIATION) -> None:
        if amplitude < 0:
            raise ValueError("Variation amplitude must be >= 0")
        self._seed = seed
        self._amplitude = amplitude

    def offset(self, fen: str) -> float:
        if self._amplitude == 0:
            return 0.0
        digest = hashlib.blake2b(
            f"{self._seed}:{fen}".encode(), digest_size=8
        ).digest()
        unit = int.from_bytes(digest, "big") / float(2**64 - 1)
        return (unit * 2.0 - 1.0) * self._amplitude


def _piece_score(piece: Piece) -> float:
    score = _PIECE_VALUES[piece.piece_type]
    if piece.piece_type == PieceType.PAWN:
        # Ranks advanced from the pawn's own starting rank.
        advancement = piece.rank - 1 if piece.color == Color.WHITE else 6 - piece.rank
        score += advancement * _PAWN_ADVANCE_BONUS
        if piece.file in _CENTER_FILES:
            score += _PAWN_CENTER_FILE_BONUS
    elif piece.piece_type == PieceType.KNIGHT:
        distance = center_distance(piece.square)
        score += (_KNIGHT_MAX_CENTER_DISTANCE - distance) * _KNIGHT_CENTER_BONUS
    return score


def _clamp(score: float) -> float:
    return max(-MAX_SCORE, min(MAX_SCORE, score))


class PositionEvaluator:
    """Material + positional heuristic with an injectable variation term."""

    __slots__ = ("_variation",)

    def __init__(self, variation: VariationSource | None = None) -> None:
        self._variation = variation or HashedVariation()

    @property
    def variation(self) -> VariationSource:
        return self._variation

    def evaluate(self, position: Position) -> float:
        """Score *position*; positive favors White."""
        mover = position.side_to_move
        if position.is_checkmate:
            # The side to move is the one that got mated.
            return -MAX_SCORE * mover.sign

        pieces = position.pieces()
        totals = {Color.WHITE: 0.0, Color.BLACK: 0.0}
        bishops = {Color.WHITE: 0, Color.BLACK: 0}
        material = 0.0
        for piece in pieces:
            totals[piece.color] += _piece_score(piece)
            material += _PIECE_VALUES[piece.piece_type]
            if piece.piece_type == PieceType.BISHOP:
                bishops[piece.color] += 1
        for color, count in bishops.items():
            if count >= 2:
                totals[color] += _BISHOP_PAIR_BONUS

        score = totals[Color.WHITE] - totals[Color.BLACK]

        if position.is_check:
            score -= _CHECK_PENALTY * mover.sign

        if material >= _KING_SAFETY_MIN_MATERIAL:
            for piece in pieces:
                if piece.piece_type == PieceType.KING and in_central_block(piece.square):
                    score -= _KING_CENTER_PENALTY * piece.color.sign

        score += position.legal_move_count * _MOBILITY_WEIGHT * mover.sign
        score += self._variation.offset(position.fen)
        return _clamp(score)
