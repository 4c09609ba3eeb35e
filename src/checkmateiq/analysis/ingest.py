"""Move-list ingestion: text in, validated legal moves out."""

from __future__ import annotations

import logging

from checkmateiq.analysis.errors import EmptyInput, IllegalSequence
from checkmateiq.core.move import Move
from checkmateiq.rules.interfaces import IllegalMoveError, IRulesEngine

_LOGGER = logging.getLogger(__name__)


class PgnIngestor:
    """Turns a move-list string into the game's move history."""

    __slots__ = ("_rules",)

    def __init__(self, rules: IRulesEngine) -> None:
        self._rules = rules

    def ingest(self, move_text: str) -> list[Move]:
        """Parse *move_text* and return the legal moves it describes.

        Raises:
            EmptyInput: no moves were found.
            IllegalSequence: the rules engine rejected a token.
        """
        start = self._rules.initial_position()
        try:
            moves = self._rules.parse_game(start, move_text)
        except IllegalMoveError as exc:
            _LOGGER.warning("Rejected move text at ply %s: %s", exc.ply, exc)
            raise IllegalSequence(exc.token, exc.ply) from exc

        if not moves:
            raise EmptyInput()
        _LOGGER.debug("Ingested %d plies", len(moves))
        return moves
