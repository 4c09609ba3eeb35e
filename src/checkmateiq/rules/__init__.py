"""Chess rules collaborator: protocol plus the python-chess implementation."""

from checkmateiq.rules.chess_rules import ChessRules
from checkmateiq.rules.interfaces import IllegalMoveError, IRulesEngine

__all__ = ["ChessRules", "IRulesEngine", "IllegalMoveError"]
