"""Per-ply move classification and timeline construction."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from checkmateiq.analysis.errors import InternalInconsistency
from checkmateiq.analysis.evaluation import PositionEvaluator
from checkmateiq.analysis.models import MoveRecord, QualityRank
from checkmateiq.analysis.timeline import Timeline
from checkmateiq.core.enums import Color
from checkmateiq.core.move import Move
from checkmateiq.core.position import Position
from checkmateiq.rules.interfaces import IllegalMoveError, IRulesEngine

_LOGGER = logging.getLogger(__name__)

_EXCELLENT_MAX_LOSS = 0.05
_GOOD_MAX_LOSS = 0.25
_INACCURACY_MAX_LOSS = 0.6
_MISTAKE_MAX_LOSS = 1.5
_DEFAULT_MAX_ALTERNATIVES = 2
_CASTLING_TIP = "Castling for king safety."


def eval_loss_for(mover: Color, eval_before: float, eval_after: float) -> float:
    """Evaluation change signed so that positive means worse for *mover*."""
    return (eval_before - eval_after) * mover.sign


def classify_eval_loss(eval_loss: float) -> QualityRank:
    if eval_loss <= _EXCELLENT_MAX_LOSS:
        return QualityRank.EXCELLENT
    if eval_loss <= _GOOD_MAX_LOSS:
        return QualityRank.GOOD
    if eval_loss <= _INACCURACY_MAX_LOSS:
        return QualityRank.INACCURACY
    if eval_loss <= _MISTAKE_MAX_LOSS:
        return QualityRank.MISTAKE
    return QualityRank.BLUNDER


def describe_alternative(move: Move) -> str | None:
    """Tag a tactically notable move, or return None for a quiet one."""
    if move.is_capture:
        captured = move.captured.value if move.captured is not None else "piece"
        return f"{move.san} (captures {captured})"
    if move.is_castling:
        return f"{move.san} (castles for safety)"
    if move.is_check:
        return f"{move.san} (gives check)"
    return None


def suggest_alternatives(
    legal_moves: Iterable[Move],
    limit: int = _DEFAULT_MAX_ALTERNATIVES,
) -> list[str]:
    """First *limit* notable moves, in the rules engine's enumeration order.

    The result depends on that order and is not ranked by strength.
    """
    suggestions: list[str] = []
    if limit <= 0:
        return suggestions
    for move in legal_moves:
        description = describe_alternative(move)
        if description is None:
            continue
        suggestions.append(description)
        if len(suggestions) >= limit:
            break
    return suggestions


def rank_move(
    move: Move,
    next_position: Position,
    eval_loss: float,
    alternatives: Sequence[str] = (),
) -> tuple[QualityRank, str]:
    """Assign a quality rank and tip text to an applied move."""
    if next_position.is_checkmate:
        return QualityRank.CHECKMATE, QualityRank.CHECKMATE.tip
    if next_position.is_check:
        return QualityRank.CHECK, QualityRank.CHECK.tip

    rank = classify_eval_loss(eval_loss)
    if move.is_castling:
        return QualityRank.GOOD, _CASTLING_TIP
    if move.is_capture and rank == QualityRank.GOOD:
        rank = QualityRank.EXCELLENT

    if alternatives and rank == QualityRank.INACCURACY:
        return rank, f"Consider: {', '.join(alternatives)}"
    if alternatives and rank == QualityRank.MISTAKE:
        return rank, f"Better: {', '.join(alternatives)}"
    return rank, rank.tip


class MoveClassifier:
    """Replays a validated move list and annotates every ply."""

    __slots__ = ("_evaluator", "_max_alternatives", "_rules")

    def __init__(
        self,
        rules: IRulesEngine,
        evaluator: PositionEvaluator,
        *,
        max_alternatives: int = _DEFAULT_MAX_ALTERNATIVES,
    ) -> None:
        self._rules = rules
        self._evaluator = evaluator
        self._max_alternatives = max_alternatives

    def build_timeline(
        self,
        moves: Sequence[Move],
        start: Position | None = None,
    ) -> Timeline:
        """Classify *moves* from *start* (default: initial position).

        Raises:
            InternalInconsistency: the rules engine rejected one of the moves.
                Nothing built so far is returned.
        """
        start_position = start or self._rules.initial_position()
        position = start_position
        records: list[MoveRecord] = []
        for ply, move in enumerate(moves):
            record = self._classify_ply(ply, position, move)
            records.append(record)
            position = record.position
        return Timeline(start_position, records)

    def _classify_ply(self, ply: int, position: Position, move: Move) -> MoveRecord:
        mover = position.side_to_move
        eval_before = self._evaluator.evaluate(position)
        alternatives = suggest_alternatives(
            self._rules.legal_moves(position), self._max_alternatives
        )

        try:
            next_position = self._rules.apply(position, move)
        except IllegalMoveError as exc:
            _LOGGER.error(
                "Rules engine rejected validated move %s at ply %d (%s)",
                move.san,
                ply,
                position.fen,
            )
            raise InternalInconsistency(ply, move.san, exc.reason) from exc

        eval_after = self._evaluator.evaluate(next_position)
        eval_loss = eval_loss_for(mover, eval_before, eval_after)
        rank, tip = rank_move(move, next_position, eval_loss, alternatives)
        _LOGGER.debug(
            "ply=%d %s %s before=%.2f after=%.2f loss=%.2f",
            ply,
            move.san,
            rank,
            eval_before,
            eval_after,
            eval_loss,
        )
        return MoveRecord(
            ply=ply,
            color=mover,
            move=move,
            position=next_position,
            evaluation=eval_after,
            rank=rank,
            tip=tip,
            alternatives=tuple(alternatives),
            eval_before=eval_before,
            eval_loss=eval_loss,
        )
