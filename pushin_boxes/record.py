"""Best results achieved on a level."""

from __future__ import annotations

import math
from dataclasses import dataclass


def format_clock(seconds: float) -> str:
    """Format a duration as ``MM:SS:mmm``, minutes wrapping at an hour."""
    if not math.isfinite(seconds) or seconds < 0:
        raise ValueError(f"invalid duration: {seconds!r}")
    nanos = round(seconds * 1_000_000_000)
    whole, rest = divmod(nanos, 1_000_000_000)
    milliseconds = rest // 1_000_000
    return f"{(whole // 60) % 60:02}:{whole % 60:02}:{milliseconds:03}"


@dataclass(frozen=True)
class LevelRecord:
    """Moves and time in seconds; a record with no moves is unset."""

    moves: int = 0
    time: float = 0.0

    def is_set(self) -> bool:
        return self.moves > 0

    def time_string(self) -> str:
        return format_clock(self.time)

    def moves_string(self) -> str:
        return str(self.moves)

    def moves_in_time(self, separator: str) -> str:
        return f"{self.moves_string()} moves{separator}in {self.time_string()}"

    def is_better_than(self, other: LevelRecord) -> bool:
        """Fewer moves wins; equal moves are decided by time."""
        return (
            not other.is_set()
            or self.moves < other.moves
            or (self.moves <= other.moves and self.time < other.time)
        )