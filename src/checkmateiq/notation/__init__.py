"""Notation helpers: move-text extraction from noisy text."""

from checkmateiq.notation.extract import extract_move_text

__all__ = ["extract_move_text"]
