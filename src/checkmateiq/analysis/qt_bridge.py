"""Qt bridge to run game analysis in a worker thread."""

from __future__ import annotations

import logging
import threading
from dataclasses import replace

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from checkmateiq.analysis.errors import AnalysisError, ErrorKind
from checkmateiq.analysis.service import GameAnalyzer
from checkmateiq.analysis.settings import AnalysisSettings

_LOGGER = logging.getLogger(__name__)


class AnalysisWorker(QObject):
    """Thread-affine worker that analyzes games on demand.

    Analysis itself cannot be interrupted; :meth:`cancel` only makes the
    worker drop the result of the request that is currently running.
    """

    analysis_ready = pyqtSignal(int, object)
    analysis_failed = pyqtSignal(int, str, str)
    analysis_discarded = pyqtSignal(int)

    __slots__ = ("_analyzer", "_cancel_event")

    def __init__(self, settings: AnalysisSettings | None = None) -> None:
        super().__init__()
        self._analyzer = GameAnalyzer(settings)
        self._cancel_event = threading.Event()

    @pyqtSlot(str, int)
    def request_analysis(self, text: str, request_id: int) -> None:
        """Analyze *text* (raw or move list) and emit the outcome."""
        self._cancel_event.clear()
        try:
            report = self._analyzer.analyze_text(text)
        except AnalysisError as exc:
            if not exc.user_facing:
                _LOGGER.exception("Analysis request %d failed", request_id)
            self.analysis_failed.emit(request_id, str(exc.kind), exc.message)
            return
        except Exception as exc:
            _LOGGER.exception("Analysis request %d crashed", request_id)
            self.analysis_failed.emit(
                request_id, str(ErrorKind.INTERNAL_INCONSISTENCY), str(exc)
            )
            return

        if self._cancel_event.is_set():
            self.analysis_discarded.emit(request_id)
            return

        self.analysis_ready.emit(request_id, report)

    @pyqtSlot()
    def cancel(self) -> None:
        """Discard the result of the running request."""
        self._cancel_event.set()

    @pyqtSlot(int, float)
    def set_variation(self, seed: int, amplitude: float) -> None:
        """Update the evaluation variation (takes effect on the next request)."""
        settings = replace(
            self._analyzer.settings,
            variation_seed=seed,
            variation_amplitude=amplitude,
        )
        self._analyzer = GameAnalyzer(settings)
