"""Error taxonomy for a single analysis request."""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    EMPTY_INPUT = "empty_input"
    ILLEGAL_SEQUENCE = "illegal_sequence"
    INTERNAL_INCONSISTENCY = "internal_inconsistency"
    RECOGNITION_FAILED = "recognition_failed"


class AnalysisError(Exception):
    """Base class for errors that end an analysis request."""

    kind: ErrorKind
    user_facing = True

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class EmptyInput(AnalysisError):
    """No moves could be recognized in the input text."""

    kind = ErrorKind.EMPTY_INPUT

    def __init__(self, message: str = "No valid moves found in the input.") -> None:
        super().__init__(message)


class IllegalSequence(AnalysisError):
    """The move text does not describe a legal game."""

    kind = ErrorKind.ILLEGAL_SEQUENCE

    def __init__(self, token: str, ply: int | None = None) -> None:
        self.token = token
        self.ply = ply
        where = f" (ply {ply + 1})" if ply is not None else ""
        super().__init__(
            f"Illegal move {token!r}{where}. "
            "Please check the image quality or the pasted text."
        )


class InternalInconsistency(AnalysisError):
    """The rules engine rejected a move it had already validated."""

    kind = ErrorKind.INTERNAL_INCONSISTENCY
    user_facing = False

    def __init__(self, ply: int, san: str, reason: str = "") -> None:
        self.ply = ply
        self.san = san
        detail = f": {reason}" if reason else ""
        super().__init__(f"Rules engine rejected validated move {san!r} at ply {ply}{detail}")


class RecognitionFailed(AnalysisError):
    """The OCR collaborator could not read the image."""

    kind = ErrorKind.RECOGNITION_FAILED

    def __init__(self, message: str = "Failed to extract text. Please try a clearer image.") -> None:
        super().__init__(message)
