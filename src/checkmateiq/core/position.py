"""Immutable board snapshots."""

from __future__ import annotations

from dataclasses import dataclass

from checkmateiq.core.enums import Color, PieceType
from checkmateiq.core.squares import Square, file_of, rank_of

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"


@dataclass(frozen=True, slots=True)
class Piece:
    """A piece standing on a square. Derived from a Position on demand."""

    piece_type: PieceType
    color: Color
    square: Square

    @property
    def file(self) -> int:
        return file_of(self.square)

    @property
    def rank(self) -> int:
        return rank_of(self.square)


@dataclass(frozen=True, slots=True)
class Position:
    """Board snapshot identified by its FEN.

    Built by the rules engine, which also fills in the check/mate flags and
    the legal move count so that evaluation never has to call back into it.
    """

    fen: str
    side_to_move: Color
    is_check: bool = False
    is_checkmate: bool = False
    legal_move_count: int = 0

    @property
    def placement(self) -> str:
        """Piece-placement field of the FEN."""
        return self.fen.split(" ", 1)[0]

    def pieces(self) -> list[Piece]:
        """All pieces on the board, a1 first."""
        pieces: list[Piece] = []
        # FEN lists ranks from 8 down to 1.
        for row, rank_text in enumerate(self.placement.split("/")):
            rank = 7 - row
            file = 0
            for ch in rank_text:
                if ch.isdigit():
                    file += int(ch)
                    continue
                color = Color.WHITE if ch.isupper() else Color.BLACK
                pieces.append(
                    Piece(PieceType.from_symbol(ch), color, rank * 8 + file)
                )
                file += 1
        pieces.sort(key=lambda p: p.square)
        return pieces
