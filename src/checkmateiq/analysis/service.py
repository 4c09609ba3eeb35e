"""Game analyzer service: one synchronous request in, one report out."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Protocol

from checkmateiq.analysis.classifier import MoveClassifier
from checkmateiq.analysis.errors import EmptyInput, RecognitionFailed
from checkmateiq.analysis.evaluation import (
    HashedVariation,
    PositionEvaluator,
    VariationSource,
)
from checkmateiq.analysis.ingest import PgnIngestor
from checkmateiq.analysis.models import (
    GameAnalysisReport,
    MoveRecord,
    QualityRank,
    SideAnalysisSummary,
)
from checkmateiq.analysis.openings import detect_opening
from checkmateiq.analysis.settings import AnalysisSettings
from checkmateiq.core.enums import Color
from checkmateiq.notation.extract import extract_move_text
from checkmateiq.rules.chess_rules import ChessRules
from checkmateiq.rules.interfaces import IRulesEngine

_LOGGER = logging.getLogger(__name__)

RulesFactory = Callable[[], IRulesEngine]


class ITextRecognizer(Protocol):
    """OCR collaborator: image bytes in, best-effort text out."""

    def recognize(self, image: bytes) -> str: ...


@dataclass(slots=True)
class _SideAcc:
    moves: int = 0
    eval_loss_sum: float = 0.0
    excellent: int = 0
    good: int = 0
    inaccuracies: int = 0
    mistakes: int = 0
    blunders: int = 0
    checks: int = 0
    checkmates: int = 0


class GameAnalyzer:
    """Runs ingestion, classification and opening detection for a game.

    Every request gets its own rules engine from *rules_factory*; the
    analyzer keeps no per-game state between calls.
    """

    __slots__ = ("_rules_factory", "_settings", "_variation")

    def __init__(
        self,
        settings: AnalysisSettings | None = None,
        *,
        rules_factory: RulesFactory = ChessRules,
        variation: VariationSource | None = None,
    ) -> None:
        self._settings = settings or AnalysisSettings()
        self._rules_factory = rules_factory
        self._variation = variation or HashedVariation(
            seed=self._settings.variation_seed,
            amplitude=self._settings.variation_amplitude,
        )

    @property
    def settings(self) -> AnalysisSettings:
        return self._settings

    def analyze_moves(self, move_text: str) -> GameAnalysisReport:
        """Analyze a move list such as ``"1. e4 e5 2. Nf3"``."""
        rules = self._rules_factory()
        moves = PgnIngestor(rules).ingest(move_text)

        classifier = MoveClassifier(
            rules,
            PositionEvaluator(self._variation),
            max_alternatives=self._settings.max_alternatives,
        )
        timeline = classifier.build_timeline(moves)
        opening = detect_opening(timeline.sans(), self._settings.opening_plies)

        report = GameAnalysisReport(
            start_fen=timeline.start_position.fen,
            timeline=timeline,
            opening=opening,
            white=_build_side_summary(r for r in timeline if r.color == Color.WHITE),
            black=_build_side_summary(r for r in timeline if r.color == Color.BLACK),
        )
        _LOGGER.info(
            "Analyzed %d plies (%s), final evaluation %.2f",
            report.total_plies,
            opening,
            report.final_evaluation,
        )
        return report

    def analyze_text(self, text: str) -> GameAnalysisReport:
        """Analyze noisy OCR output or pasted text."""
        move_text = extract_move_text(text)
        if not move_text:
            raise EmptyInput()
        return self.analyze_moves(move_text)

    def analyze_image(
        self, image: bytes, recognizer: ITextRecognizer
    ) -> GameAnalysisReport:
        """Run OCR on *image* with *recognizer*, then analyze the text."""
        try:
            text = recognizer.recognize(image)
        except Exception as exc:
            _LOGGER.warning("Text recognition failed: %s", exc)
            raise RecognitionFailed() from exc
        return self.analyze_text(text)


def _build_side_summary(records: Iterable[MoveRecord]) -> SideAnalysisSummary:
    acc = _SideAcc()
    for record in records:
        acc.moves += 1
        acc.eval_loss_sum += max(0.0, record.eval_loss)
        if record.rank == QualityRank.EXCELLENT:
            acc.excellent += 1
        elif record.rank == QualityRank.GOOD:
            acc.good += 1
        elif record.rank == QualityRank.INACCURACY:
            acc.inaccuracies += 1
        elif record.rank == QualityRank.MISTAKE:
            acc.mistakes += 1
        elif record.rank == QualityRank.BLUNDER:
            acc.blunders += 1
        elif record.rank == QualityRank.CHECK:
            acc.checks += 1
        elif record.rank == QualityRank.CHECKMATE:
            acc.checkmates += 1

    avg = (acc.eval_loss_sum / acc.moves) if acc.moves > 0 else 0.0
    return SideAnalysisSummary(
        moves=acc.moves,
        avg_eval_loss=avg,
        inaccuracies=acc.inaccuracies,
        mistakes=acc.mistakes,
        blunders=acc.blunders,
        excellent=acc.excellent,
        good=acc.good,
        checks=acc.checks,
        checkmates=acc.checkmates,
    )
