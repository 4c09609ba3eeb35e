"""Move-history timeline and its navigation cursor."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import overload

from checkmateiq.analysis.models import MoveRecord
from checkmateiq.core.position import Position


class Timeline:
    """Immutable, randomly accessible sequence of :class:`MoveRecord`.

    Index 0 is the first ply; ``timeline[i].ply == i`` always holds.
    """

    __slots__ = ("_records", "_start")

    def __init__(self, start: Position, records: Iterable[MoveRecord] = ()) -> None:
        self._start = start
        self._records = tuple(records)
        for idx, record in enumerate(self._records):
            if record.ply != idx:
                raise ValueError(f"Record at index {idx} has ply {record.ply}")

    @property
    def start_position(self) -> Position:
        return self._start

    @property
    def records(self) -> tuple[MoveRecord, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[MoveRecord]:
        return iter(self._records)

    @overload
    def __getitem__(self, index: int) -> MoveRecord: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[MoveRecord, ...]: ...

    def __getitem__(self, index: int | slice) -> MoveRecord | tuple[MoveRecord, ...]:
        return self._records[index]

    def __repr__(self) -> str:
        return f"Timeline(plies={len(self._records)})"

    def sans(self) -> list[str]:
        return [record.san for record in self._records]

    def position_at(self, index: int) -> Position:
        """Position after ply *index*; ``-1`` is the start position."""
        if index == -1:
            return self._start
        if not 0 <= index < len(self._records):
            raise IndexError(f"Ply index out of range: {index}")
        return self._records[index].position


class TimelineCursor:
    """Navigation state over a built :class:`Timeline`.

    The cursor only ever moves within ``[-1, len - 1]``; requests outside
    that range are ignored. Moving never triggers evaluation, it just reads
    the stored snapshots.
    """

    __slots__ = ("_index", "_timeline")

    def __init__(self, timeline: Timeline, index: int | None = None) -> None:
        self._timeline = timeline
        self._index = len(timeline) - 1
        if index is not None:
            self.go_to(index)

    # ── State ────────────────────────────────────────────────────────────

    @property
    def timeline(self) -> Timeline:
        return self._timeline

    @property
    def index(self) -> int:
        return self._index

    @property
    def at_start(self) -> bool:
        return self._index == -1

    @property
    def at_end(self) -> bool:
        return self._index == len(self._timeline) - 1

    @property
    def current(self) -> MoveRecord | None:
        if self._index < 0:
            return None
        return self._timeline[self._index]

    @property
    def position(self) -> Position:
        return self._timeline.position_at(self._index)

    @property
    def evaluation(self) -> float:
        record = self.current
        return 0.0 if record is None else record.evaluation

    @property
    def last_move_squares(self) -> tuple[str, str] | None:
        """Squares of the move leading to the current position, for highlighting."""
        record = self.current
        return None if record is None else record.move.squares

    # ── Navigation ───────────────────────────────────────────────────────

    def go_to(self, index: int) -> bool:
        """Jump to *index*. Returns False (and stays put) when out of range."""
        if not -1 <= index <= len(self._timeline) - 1:
            return False
        self._index = index
        return True

    def next(self) -> bool:
        return self.go_to(self._index + 1)

    def previous(self) -> bool:
        return self.go_to(self._index - 1)

    def to_start(self) -> bool:
        return self.go_to(-1)

    def to_end(self) -> bool:
        return self.go_to(len(self._timeline) - 1)
