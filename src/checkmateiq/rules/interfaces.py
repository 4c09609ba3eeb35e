"""Rules-engine protocol consumed by the analysis layer.

The analysis engine treats chess rules as an oracle: legality, move
application, check/mate detection and FEN all come from an object
implementing :class:`IRulesEngine`.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from checkmateiq.core.move import Move
    from checkmateiq.core.position import Position


class IllegalMoveError(ValueError):
    """Raised when a move or SAN token is not legal in the given position."""

    def __init__(self, token: str, *, ply: int | None = None, reason: str = "") -> None:
        self.token = token
        self.ply = ply
        self.reason = reason
        where = f" at ply {ply}" if ply is not None else ""
        detail = f": {reason}" if reason else ""
        super().__init__(f"Illegal move {token!r}{where}{detail}")


class IRulesEngine(Protocol):
    """Protocol for the chess rules collaborator."""

    def initial_position(self) -> Position:
        """Standard starting position."""
        ...

    def parse_game(self, position: Position, text: str) -> list[Move]:
        """Resolve the mainline of a PGN document or bare move list.

        Headers, comments, variations, NAGs, move numbers and results are
        skipped. Returns an empty list when the text holds no moves. Raises
        :class:`IllegalMoveError` (with ``ply`` set) on the first mainline
        token that is not a legal move, or when the game does not start
        from *position*.
        """
        ...

    def parse_moves(self, position: Position, sans: Sequence[str]) -> list[Move]:
        """Resolve SAN tokens played in order from *position*.

        Raises :class:`IllegalMoveError` (with ``ply`` set) on the first
        token that is not a legal move.
        """
        ...

    def legal_moves(self, position: Position) -> list[Move]:
        """Legal moves in the engine's own enumeration order."""
        ...

    def apply(self, position: Position, move: Move) -> Position:
        """Return the position after *move*; *position* is left untouched."""
        ...
