"""
NaiveDatetimeIterator — fixed-step walk over an inclusive datetime interval

Iterates the closed interval [start, end] in steps of `step`:
- step > 0 → ascending traversal, start → end
- step < 0 → descending traversal, end → start

INVARIANTS:
1. start ≤ end for any step sign (the endpoints describe the interval,
   the sign of the step alone selects the direction)
2. step ≠ 0
3. The first point is start (ascending) / end (descending)
4. The last point is end (ascending) / start (descending), even when the step
   does not divide end - start: the overshooting step is clamped to the endpoint
5. Every point lies inside [start, end]

OVERFLOW:
    datetime + timedelta raises OverflowError outside [datetime.min, datetime.max].
    Such a step is past the far endpoint by definition, so it is handled as an
    overshoot: clamp if the endpoint has not been yielded yet, stop otherwise.
"""

from datetime import datetime, timedelta
from typing import Final, Optional

from loguru import logger


# =============================================================================
# MESSAGES
# =============================================================================

ZERO_STEP_MESSAGE: Final[str] = "Step duration cannot be zero"

INVALID_RANGE_MESSAGE: Final[str] = (
    "Invalid range: start {start} must be before end {end} for positive step"
)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NaiveDatetimeIterError(ValueError):
    """Base class for datetime iterator construction errors."""


class ZeroStepError(NaiveDatetimeIterError):
    """Step duration is zero: the iteration would never advance."""

    def __init__(self) -> None:
        super().__init__(ZERO_STEP_MESSAGE)


class InvalidRangeError(NaiveDatetimeIterError):
    """
    Endpoints out of order: start > end.

    Raised for any step sign. A descending walk is requested with a negative
    step, never by swapping the endpoints.
    """

    def __init__(self, start: datetime, end: datetime) -> None:
        self.start = start
        self.end = end
        super().__init__(INVALID_RANGE_MESSAGE.format(start=start, end=end))


# =============================================================================
# VALIDATION
# =============================================================================


def validate_step_params(start: datetime, end: datetime, step: timedelta) -> bool:
    """
    Check iterator parameters and resolve the direction.

    Args:
        start: Lower endpoint (inclusive)
        end: Upper endpoint (inclusive)
        step: Signed step duration

    Returns:
        True for ascending traversal (step > 0), False for descending

    Raises:
        ZeroStepError: step is zero (checked first)
        InvalidRangeError: start > end

    Examples:
        >>> validate_step_params(datetime(2023, 1, 1), datetime(2023, 1, 2), timedelta(hours=1))
        True
        >>> validate_step_params(datetime(2023, 1, 1), datetime(2023, 1, 2), timedelta(hours=-1))
        False
    """
    zero = step - step
    if step == zero:
        raise ZeroStepError()

    if start > end:
        raise InvalidRangeError(start, end)

    return step > zero


# =============================================================================
# POINT ITERATOR
# =============================================================================


class NaiveDatetimeIterator:
    """
    Iterator over the datetimes of [start, end] spaced by `step`.

    Examples:
        >>> it = NaiveDatetimeIterator(
        ...     datetime(2023, 1, 1), datetime(2023, 1, 1, 12), timedelta(hours=5)
        ... )
        >>> [dt.hour for dt in it]
        [0, 5, 10, 12]
        >>> it = NaiveDatetimeIterator(
        ...     datetime(2023, 1, 1), datetime(2023, 1, 1, 12), timedelta(hours=-5)
        ... )
        >>> [dt.hour for dt in it]
        [12, 7, 2, 0]
    """

    def __init__(self, start: datetime, end: datetime, step: timedelta):
        """
        Args:
            start: The starting datetime (inclusive)
            end: The ending datetime (inclusive)
            step: The duration between points; its sign selects the direction

        Raises:
            ZeroStepError: step is zero
            InvalidRangeError: start is after end
        """
        self._ascending = validate_step_params(start, end, step)
        self._start = start
        self._end = end
        self._step = step

        # None once exhausted
        self._cursor: Optional[datetime] = start if self._ascending else end

    @property
    def start(self) -> datetime:
        return self._start

    @property
    def end(self) -> datetime:
        return self._end

    @property
    def step(self) -> timedelta:
        return self._step

    @property
    def ascending(self) -> bool:
        return self._ascending

    def __iter__(self) -> "NaiveDatetimeIterator":
        return self

    def __next__(self) -> datetime:
        if self._ascending:
            return self._next_asc()
        return self._next_desc()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(start={self._start!r}, "
            f"end={self._end!r}, step={self._step!r})"
        )

    # -------------------------------------------------------------------------
    # Advancing
    # -------------------------------------------------------------------------

    def _tentative(self, cursor: datetime) -> Optional[datetime]:
        """cursor + step, or None when the sum leaves the datetime range."""
        try:
            return cursor + self._step
        except OverflowError:
            return None

    def _next_asc(self) -> datetime:
        cursor = self._cursor
        if cursor is None or cursor > self._end:
            self._cursor = None
            raise StopIteration

        tentative = self._tentative(cursor)
        if cursor < self._end and (tentative is None or tentative > self._end):
            logger.debug(
                "clamping final step {} -> {} to end {}", cursor, tentative, self._end
            )
            self._cursor = self._end
        elif tentative is None:
            logger.debug("step {} overflows past {}, iteration finished", self._step, cursor)
            self._cursor = None
        else:
            self._cursor = tentative

        return cursor

    def _next_desc(self) -> datetime:
        cursor = self._cursor
        if cursor is None or cursor < self._start:
            self._cursor = None
            raise StopIteration

        tentative = self._tentative(cursor)
        if cursor > self._start and (tentative is None or tentative < self._start):
            logger.debug(
                "clamping final step {} -> {} to start {}", cursor, tentative, self._start
            )
            self._cursor = self._start
        elif tentative is None:
            logger.debug("step {} overflows past {}, iteration finished", self._step, cursor)
            self._cursor = None
        else:
            self._cursor = tentative

        return cursor
