"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator

import pytest

from checkmateiq.analysis import AnalysisSettings, GameAnalyzer, NoVariation
from checkmateiq.rules import ChessRules

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for signal tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture
def rules() -> ChessRules:
    return ChessRules()


@pytest.fixture
def analyzer() -> GameAnalyzer:
    """Analyzer with the variation term switched off."""
    return GameAnalyzer(AnalysisSettings(), variation=NoVariation())
