"""User-configurable analysis settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AnalysisSettings:
    """All user-configurable analysis knobs."""

    # Evaluation variation term; amplitude 0 turns it off.
    variation_seed: int = 0
    variation_amplitude: float = 0.25

    # Classification
    max_alternatives: int = 2

    # Opening detection
    opening_plies: int = 6
