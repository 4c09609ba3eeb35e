"""Rules engine backed by python-chess."""

from __future__ import annotations

import io
import logging
from collections.abc import Sequence

import chess
import chess.pgn

from checkmateiq.core.enums import Color, PieceType
from checkmateiq.core.move import Move
from checkmateiq.core.position import Position
from checkmateiq.rules.interfaces import IllegalMoveError, IRulesEngine

_LOGGER = logging.getLogger(__name__)


class _MainlineBuilder(chess.pgn.GameBuilder):
    """Game builder that keeps the mainline only and rejects null moves.

    A token the board cannot parse is re-raised as :class:`IllegalMoveError`
    with its token and ply. ``read_game`` files it under ``game.errors`` and
    skips the rest of the game.
    """

    def begin_variation(self) -> chess.pgn.SkipType:
        return chess.pgn.SKIP

    def end_variation(self) -> None:
        pass

    def parse_san(self, board: chess.Board, san: str) -> chess.Move:
        try:
            move = board.parse_san(san)
            if not move:
                raise chess.IllegalMoveError(f"null move {san!r}")
        except ValueError as exc:
            raise IllegalMoveError(
                san, ply=len(board.move_stack), reason=str(exc)
            ) from exc
        return move

    def handle_error(self, error: Exception) -> None:
        _LOGGER.debug("PGN parser error: %s", error)
        self.game.errors.append(error)


class ChessRules(IRulesEngine):
    """Stateless adapter: every call rebuilds a ``chess.Board`` from the FEN.

    Because no board outlives a call, one instance never leaks state between
    games. The analysis service still creates a fresh one per request.
    """

    __slots__ = ()

    def initial_position(self) -> Position:
        return _snapshot(chess.Board())

    def position_from_fen(self, fen: str) -> Position:
        """Snapshot an arbitrary FEN. Raises ``ValueError`` if it is malformed."""
        return _snapshot(chess.Board(fen))

    def parse_game(self, position: Position, text: str) -> list[Move]:
        # read_game stops at the first blank line; pasted move lists often
        # have them between paragraphs.
        body = "\n".join(line for line in text.splitlines() if line.strip())
        game = chess.pgn.read_game(io.StringIO(body), Visitor=_MainlineBuilder)
        if game is None:
            return []

        for error in game.errors:
            if isinstance(error, IllegalMoveError):
                raise error
            _LOGGER.debug("Ignoring PGN error: %s", error)

        setup = game.headers.get("FEN", "")
        try:
            board = game.board()
        except ValueError as exc:
            raise IllegalMoveError(setup, ply=0, reason=str(exc)) from exc
        if board.fen() != position.fen:
            raise IllegalMoveError(
                setup or board.fen(),
                ply=0,
                reason=f"game does not start from {position.fen}",
            )

        moves: list[Move] = []
        for move in game.mainline_moves():
            moves.append(_to_move(board, move))
            board.push(move)
        return moves

    def parse_moves(self, position: Position, sans: Sequence[str]) -> list[Move]:
        board = chess.Board(position.fen)
        moves: list[Move] = []
        for ply, token in enumerate(sans):
            try:
                parsed = board.parse_san(token)
            except ValueError as exc:
                raise IllegalMoveError(token, ply=ply, reason=str(exc)) from exc
            if not parsed:
                raise IllegalMoveError(token, ply=ply, reason="null move")
            moves.append(_to_move(board, parsed))
            board.push(parsed)
        return moves

    def legal_moves(self, position: Position) -> list[Move]:
        board = chess.Board(position.fen)
        return [_to_move(board, move) for move in board.legal_moves]

    def apply(self, position: Position, move: Move) -> Position:
        board = chess.Board(position.fen)
        try:
            parsed = chess.Move.from_uci(move.uci)
        except ValueError as exc:
            raise IllegalMoveError(move.san, reason=str(exc)) from exc
        if not board.is_legal(parsed):
            raise IllegalMoveError(move.san, reason=f"not legal in {position.fen}")
        board.push(parsed)
        return _snapshot(board)


def _snapshot(board: chess.Board) -> Position:
    return Position(
        fen=board.fen(),
        side_to_move=Color.WHITE if board.turn == chess.WHITE else Color.BLACK,
        is_check=board.is_check(),
        is_checkmate=board.is_checkmate(),
        legal_move_count=board.legal_moves.count(),
    )


def _piece_type(piece_type: chess.PieceType | None) -> PieceType | None:
    if piece_type is None:
        return None
    return PieceType.from_symbol(chess.piece_symbol(piece_type))


def _to_move(board: chess.Board, move: chess.Move) -> Move:
    """Describe *move* as played from *board* (which must not have it pushed)."""
    if board.is_en_passant(move):
        captured: PieceType | None = PieceType.PAWN
    else:
        captured = _piece_type(board.piece_type_at(move.to_square))
    return Move(
        san=board.san(move),
        uci=move.uci(),
        from_sq=move.from_square,
        to_sq=move.to_square,
        is_capture=board.is_capture(move),
        is_castling=board.is_castling(move),
        is_check=board.gives_check(move),
        captured=captured,
        promotion=_piece_type(move.promotion),
    )
