"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import StrEnum


class Color(StrEnum):
    """Side color."""

    WHITE = "white"
    BLACK = "black"

    @property
    def opposite(self) -> Color:
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    @property
    def sign(self) -> int:
        """+1 for white, -1 for black (evaluations are white-positive)."""
        return 1 if self is Color.WHITE else -1


class PieceType(StrEnum):
    """Chess piece types."""

    PAWN = "pawn"
    KNIGHT = "knight"
    BISHOP = "bishop"
    ROOK = "rook"
    QUEEN = "queen"
    KING = "king"

    @classmethod
    def from_symbol(cls, symbol: str) -> PieceType:
        """Parse a FEN/SAN piece letter (case-insensitive), e.g. ``'n'``."""
        try:
            return _SYMBOL_TO_TYPE[symbol.lower()]
        except KeyError:
            raise ValueError(f"Invalid piece symbol: {symbol!r}") from None


_SYMBOL_TO_TYPE: dict[str, PieceType] = {
    "p": PieceType.PAWN,
    "n": PieceType.KNIGHT,
    "b": PieceType.BISHOP,
    "r": PieceType.ROOK,
    "q": PieceType.QUEEN,
    "k": PieceType.KING,
}
