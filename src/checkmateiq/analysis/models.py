"""Data models produced by game analysis."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from checkmateiq.core.enums import Color
from checkmateiq.core.move import Move
from checkmateiq.core.position import Position

if TYPE_CHECKING:
    from checkmateiq.analysis.timeline import Timeline


class QualityRank(StrEnum):
    """Move quality buckets shown next to every ply."""

    CHECKMATE = "Checkmate"
    CHECK = "Check"
    EXCELLENT = "Excellent"
    GOOD = "Good"
    INACCURACY = "Inaccuracy"
    MISTAKE = "Mistake"
    BLUNDER = "Blunder"

    @property
    def nag(self) -> str:
        """Annotation symbol appended in move lists."""
        return _RANK_NAG[self]

    @property
    def color_hex(self) -> str:
        """Hex colour string for UI display."""
        return _RANK_COLOR[self]

    @property
    def tip(self) -> str:
        """Default tip text when no alternatives are attached."""
        return _RANK_TIP[self]


_RANK_NAG: dict[QualityRank, str] = {
    QualityRank.CHECKMATE: "#",
    QualityRank.CHECK: "",
    QualityRank.EXCELLENT: "!!",
    QualityRank.GOOD: "",
    QualityRank.INACCURACY: "?!",
    QualityRank.MISTAKE: "?",
    QualityRank.BLUNDER: "??",
}

_RANK_COLOR: dict[QualityRank, str] = {
    QualityRank.CHECKMATE: "#4CAF50",
    QualityRank.CHECK: "#4CAF50",
    QualityRank.EXCELLENT: "#4CAF50",
    QualityRank.GOOD: "#8BC34A",
    QualityRank.INACCURACY: "#FF9800",
    QualityRank.MISTAKE: "#F44336",
    QualityRank.BLUNDER: "#D32F2F",
}

_RANK_TIP: dict[QualityRank, str] = {
    QualityRank.CHECKMATE: "Game winning move!",
    QualityRank.CHECK: "Puts opponent in check!",
    QualityRank.EXCELLENT: "Best move!",
    QualityRank.GOOD: "Solid choice.",
    QualityRank.INACCURACY: "Could be improved.",
    QualityRank.MISTAKE: "Significant error.",
    QualityRank.BLUNDER: "Major mistake! Check alternatives.",
}


@dataclass(slots=True, frozen=True)
class MoveRecord:
    """Analysis snapshot for a single played ply."""

    ply: int
    color: Color
    move: Move
    position: Position
    evaluation: float
    rank: QualityRank
    tip: str
    alternatives: tuple[str, ...] = ()
    eval_before: float = 0.0
    eval_loss: float = 0.0

    @property
    def san(self) -> str:
        return self.move.san

    @property
    def move_number(self) -> int:
        return self.ply // 2 + 1

    @property
    def label(self) -> str:
        """Move-list prefix: ``"3."`` for white, ``"3..."`` for black."""
        dots = "." if self.ply % 2 == 0 else "..."
        return f"{self.move_number}{dots}"


@dataclass(slots=True, frozen=True)
class SideAnalysisSummary:
    """Aggregate quality metrics for one side."""

    moves: int
    avg_eval_loss: float
    inaccuracies: int
    mistakes: int
    blunders: int
    excellent: int = 0
    good: int = 0
    checks: int = 0
    checkmates: int = 0


@dataclass(slots=True, frozen=True)
class GameAnalysisReport:
    """Full move-by-move analysis with opening label and side summaries."""

    start_fen: str
    timeline: Timeline
    opening: str
    white: SideAnalysisSummary
    black: SideAnalysisSummary

    @property
    def total_plies(self) -> int:
        return len(self.timeline)

    @property
    def final_evaluation(self) -> float:
        if not self.timeline:
            return 0.0
        return self.timeline[-1].evaluation
