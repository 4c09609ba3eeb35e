"""Square indexing and board-geometry helpers.

Squares are plain ints laid out rank by rank from White's side, the same
mapping python-chess uses: a1=0, b1=1, ..., h1=7, a2=8, ..., h8=63.
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = int  # 0–63

_FILES = "abcdefgh"
_BOARD_CENTER = 3.5


def file_of(sq: Square) -> int:
    """File index 0–7 (a–h)."""
    return sq & 7


def rank_of(sq: Square) -> int:
    """Rank index 0–7 (1–8)."""
    return sq >> 3


def square_name(sq: Square) -> str:
    """Algebraic name, e.g. 0 → 'a1', 63 → 'h8'."""
    return f"{_FILES[file_of(sq)]}{rank_of(sq) + 1}"


def parse_square(name: str) -> Square:
    """Parse an algebraic square name, e.g. 'e4' → 28."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return (int(name[1]) - 1) * 8 + _FILES.index(name[0])


def center_distance(sq: Square) -> float:
    """Manhattan distance from the square's center to the board center."""
    return abs(_BOARD_CENTER - file_of(sq)) + abs(_BOARD_CENTER - rank_of(sq))


def in_central_block(sq: Square) -> bool:
    """True for the 4x4 block c3–f6."""
    return 2 <= file_of(sq) <= 5 and 2 <= rank_of(sq) <= 5
