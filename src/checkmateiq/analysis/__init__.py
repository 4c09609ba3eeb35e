"""Game analysis APIs."""

from checkmateiq.analysis.classifier import (
    MoveClassifier,
    classify_eval_loss,
    rank_move,
    suggest_alternatives,
)
from checkmateiq.analysis.errors import (
    AnalysisError,
    EmptyInput,
    ErrorKind,
    IllegalSequence,
    InternalInconsistency,
    RecognitionFailed,
)
from checkmateiq.analysis.evaluation import (
    MAX_SCORE,
    HashedVariation,
    NoVariation,
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
from checkmateiq.analysis.openings import UNKNOWN_OPENING, detect_opening
from checkmateiq.analysis.service import GameAnalyzer, ITextRecognizer
from checkmateiq.analysis.settings import AnalysisSettings
from checkmateiq.analysis.timeline import Timeline, TimelineCursor

__all__ = [
    "MAX_SCORE",
    "UNKNOWN_OPENING",
    "AnalysisError",
    "AnalysisSettings",
    "EmptyInput",
    "ErrorKind",
    "GameAnalysisReport",
    "GameAnalyzer",
    "HashedVariation",
    "ITextRecognizer",
    "IllegalSequence",
    "InternalInconsistency",
    "MoveClassifier",
    "MoveRecord",
    "NoVariation",
    "PgnIngestor",
    "PositionEvaluator",
    "QualityRank",
    "RecognitionFailed",
    "SideAnalysisSummary",
    "Timeline",
    "TimelineCursor",
    "VariationSource",
    "classify_eval_loss",
    "detect_opening",
    "rank_move",
    "suggest_alternatives",
]
