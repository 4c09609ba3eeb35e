"""Best-effort move-text extraction from OCR output or pasted text."""

from __future__ import annotations

import re

# Castling (letter O or digit zero) or a SAN move with optional promotion and
# check suffix. Anchored on non-word boundaries so "Nf3" inside "xNf3y" noise
# is still not picked out of longer words.
_SAN_RE = re.compile(
    r"(?<![\w-])"
    r"(?:O-O-O|O-O|0-0-0|0-0|[NBRQK]?[a-h]?[1-8]?x?[a-h][1-8](?:=?[NBRQ])?)"
    r"[+#]?"
    r"(?![\w-])"
)
_MOVE_NUMBER_RE = re.compile(r"(?<![\w.])(\d{1,3})\s*\.(?:\.\.)?")
_TOKEN_RE = re.compile(f"{_MOVE_NUMBER_RE.pattern}|{_SAN_RE.pattern}")


def extract_move_text(text: str) -> str:
    """Pull a space-separated move list out of noisy *text*.

    Move numbers are kept as ``N.`` tokens; everything that does not look
    like a move or a move number is dropped. Castling written with zeros is
    normalized to letters.
    """
    parts: list[str] = []
    for match in _TOKEN_RE.finditer(text):
        number = match.group(1)
        if number is not None:
            parts.append(f"{number}.")
            continue
        parts.append(match.group(0).replace("0", "O"))
    return " ".join(parts)
