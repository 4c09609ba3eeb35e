"""Opening name lookup by literal move prefix."""

from __future__ import annotations

from collections.abc import Sequence

UNKNOWN_OPENING = "Unknown Opening"
_DEFAULT_PLIES = 6

# Checked top to bottom, so longer prefixes must come before their shorter
# relatives.
OPENINGS: tuple[tuple[str, str], ...] = (
    ("e4 e5 Nf3 Nc6 Bb5", "Spanish Opening (Ruy Lopez)"),
    ("e4 e5 Nf3 Nc6 Bc4", "Italian Game"),
    ("e4 e5 Nf3 Nc6", "Italian Game / Spanish Opening"),
    ("e4 e5", "King's Pawn Game"),
    ("e4 c5", "Sicilian Defense"),
    ("e4 e6", "French Defense"),
    ("e4 c6", "Caro-Kann Defense"),
    ("d4 d5", "Queen's Pawn Game"),
    ("d4 Nf6", "Indian Defense"),
    ("Nf3 d5", "Réti Opening"),
    ("c4", "English Opening"),
)


def detect_opening(sans: Sequence[str], plies: int = _DEFAULT_PLIES) -> str:
    """Name the opening of a game given its SAN moves.

    Only the first *plies* moves are considered and a prefix only matches
    whole moves.
    """
    line = " ".join(sans[:plies])
    for prefix, name in OPENINGS:
        if line == prefix or line.startswith(prefix + " "):
            return name
    return UNKNOWN_OPENING
