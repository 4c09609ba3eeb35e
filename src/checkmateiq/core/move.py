"""Move value object as reported by the rules engine."""

from __future__ import annotations

from dataclasses import dataclass

from checkmateiq.core.enums import PieceType
from checkmateiq.core.squares import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """One ply in SAN plus the metadata the analysis needs.

    Instances are produced by an :class:`~checkmateiq.rules.IRulesEngine`;
    nothing in the analysis layer parses SAN by hand.
    """

    san: str
    uci: str
    from_sq: Square
    to_sq: Square
    is_capture: bool = False
    is_castling: bool = False
    is_check: bool = False
    captured: PieceType | None = None
    promotion: PieceType | None = None

    def __str__(self) -> str:
        return self.san

    @property
    def squares(self) -> tuple[str, str]:
        """Origin and destination square names, e.g. ``("e2", "e4")``."""
        return square_name(self.from_sq), square_name(self.to_sq)
