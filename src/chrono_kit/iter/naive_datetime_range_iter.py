"""
NaiveDatetimeRangeIterator — consecutive (start, end) datetime ranges

Pairs neighbouring points of a NaiveDatetimeIterator. Each pair is oriented
smaller-first, so a descending walk yields (curr, prev) rather than the order
in which the points arrive.

    N points → max(0, N - 1) ranges
"""

from datetime import datetime, timedelta
from typing import Optional

from chrono_kit.iter.naive_datetime_iter import NaiveDatetimeIterator


class NaiveDatetimeRangeIterator:
    """
    Iterator over the consecutive ranges of [start, end] spaced by `step`.

    Examples:
        Forward iteration:

        >>> start, end = datetime(2023, 1, 1), datetime(2023, 1, 3)
        >>> it = NaiveDatetimeRangeIterator(start, end, timedelta(days=1))
        >>> [(a.day, b.day) for a, b in it]
        [(1, 2), (2, 3)]

        Reverse iteration:

        >>> it = NaiveDatetimeRangeIterator(start, end, timedelta(days=-1))
        >>> [(a.day, b.day) for a, b in it]
        [(2, 3), (1, 2)]
    """

    def __init__(self, start: datetime, end: datetime, step: timedelta):
        """
        Args:
            start: The starting datetime (inclusive)
            end: The ending datetime (inclusive)
            step: The duration of each range; its sign selects the direction

        Raises:
            ZeroStepError: step is zero
            InvalidRangeError: start is after end
        """
        self._points = NaiveDatetimeIterator(start, end, step)
        self._previous: Optional[datetime] = None
        self._ascending = self._points.ascending

    @property
    def start(self) -> datetime:
        return self._points.start

    @property
    def end(self) -> datetime:
        return self._points.end

    @property
    def step(self) -> timedelta:
        return self._points.step

    @property
    def ascending(self) -> bool:
        return self._ascending

    def __iter__(self) -> "NaiveDatetimeRangeIterator":
        return self

    def __next__(self) -> tuple[datetime, datetime]:
        if self._previous is None:
            self._previous = next(self._points)

        previous = self._previous
        current = next(self._points)
        self._previous = current

        if self._ascending:
            return (previous, current)
        return (current, previous)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(start={self.start!r}, "
            f"end={self.end!r}, step={self.step!r})"
        )
