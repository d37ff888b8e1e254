"""Splitting of historical time ranges into request-sized windows."""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterator
from dataclasses import dataclass

from .timeutil import TimeLike, to_datetime

MAX_CANDLES_PER_REQUEST = 300


@dataclass(frozen=True)
class TimeRange:
    start: dt.datetime
    end: dt.datetime
    granularity: int

    def __post_init__(self) -> None:
        # Normalize to aware UTC so comparisons never mix naive and aware values.
        object.__setattr__(self, "start", to_datetime(self.start))
        object.__setattr__(self, "end", to_datetime(self.end))
        if self.granularity <= 0:
            raise ValueError(f"Granularity must be positive, got {self.granularity}")
        if self.start > self.end:
            raise ValueError(f"Range start {self.start} is after end {self.end}")

    @classmethod
    def from_timestamps(cls, start: TimeLike, end: TimeLike, granularity: int) -> TimeRange:
        return cls(to_datetime(start), to_datetime(end), granularity)

    @property
    def duration(self) -> dt.timedelta:
        return self.end - self.start

    def point_count(self) -> float:
        """Number of ``granularity`` buckets spanned by the range."""
        return self.duration.total_seconds() / self.granularity

    def chunks(self, max_points: int = MAX_CANDLES_PER_REQUEST) -> RangeChunks:
        return RangeChunks(self, max_points)


class RangeChunks:
    """Restartable iterable over contiguous windows covering a ``TimeRange``.

    Every window spans at most ``max_points * granularity`` seconds and starts
    where the previous one ended. A range that already fits is yielded as is.
    """

    def __init__(self, time_range: TimeRange, max_points: int = MAX_CANDLES_PER_REQUEST) -> None:
        if max_points <= 0:
            raise ValueError(f"max_points must be positive, got {max_points}")
        self.time_range = time_range
        self.max_points = max_points
        self.step = dt.timedelta(seconds=max_points * time_range.granularity)

    def __iter__(self) -> Iterator[TimeRange]:
        rng = self.time_range
        if rng.duration <= self.step:
            yield rng
            return
        cursor = rng.start
        while cursor < rng.end:
            window_end = min(cursor + self.step, rng.end)
            yield TimeRange(cursor, window_end, rng.granularity)
            cursor = window_end

    def __len__(self) -> int:
        if self.time_range.duration <= self.step:
            return 1
        full, remainder = divmod(self.time_range.duration, self.step)
        return full + (1 if remainder else 0)


def iter_time_ranges(
    start: TimeLike,
    end: TimeLike,
    granularity: int,
    max_points: int = MAX_CANDLES_PER_REQUEST,
) -> RangeChunks:
    return TimeRange.from_timestamps(start, end, granularity).chunks(max_points)


__all__ = ["MAX_CANDLES_PER_REQUEST", "RangeChunks", "TimeRange", "iter_time_ranges"]
