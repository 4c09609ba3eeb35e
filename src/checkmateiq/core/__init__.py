"""Core domain layer: value objects shared by the rules adapter and analysis.

Quick start::

    from checkmateiq.core import Color, Position, STARTING_FEN

    pos = Position(STARTING_FEN, Color.WHITE, legal_move_count=20)
    for piece in pos.pieces():
        print(piece)
"""

from checkmateiq.core.enums import Color, PieceType
from checkmateiq.core.move import Move
from checkmateiq.core.position import STARTING_FEN, Piece, Position
from checkmateiq.core.squares import (
    Square,
    center_distance,
    file_of,
    in_central_block,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Squares
    "Square",
    "center_distance",
    "file_of",
    "in_central_block",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Move",
    "Piece",
    "Position",
    "STARTING_FEN",
]
