"""
DatetimeStepRange — immutable description of a stepped datetime interval

Pydantic model holding (start, end, step). Validates with the same rules as
the iterators and builds fresh iterators on demand, so one description can be
stored, serialized to JSON and walked any number of times.
"""

from datetime import datetime, timedelta

from pydantic import BaseModel, Field, field_validator, model_validator

from chrono_kit.iter.naive_datetime_iter import (
    InvalidRangeError,
    NaiveDatetimeIterator,
    ZeroStepError,
)
from chrono_kit.iter.naive_datetime_range_iter import NaiveDatetimeRangeIterator


class DatetimeStepRange(BaseModel):
    """
    Stepped interval [start, end].

    Immutable (frozen=True). Strict mode: Python callers pass datetime and
    timedelta objects; JSON input uses ISO 8601 strings.

    Examples:
        >>> r = DatetimeStepRange(
        ...     start=datetime(2023, 1, 1), end=datetime(2023, 1, 3), step=timedelta(days=1)
        ... )
        >>> [dt.day for dt in r.points()]
        [1, 2, 3]
        >>> [dt.day for dt in r.reversed().points()]
        [3, 2, 1]
    """

    start: datetime = Field(..., description="Lower endpoint (inclusive, naive)")
    end: datetime = Field(..., description="Upper endpoint (inclusive, naive)")
    step: timedelta = Field(
        ..., description="Signed step; positive walks up, negative walks down"
    )

    model_config = {"frozen": True, "strict": True}

    @field_validator("start", "end")
    @classmethod
    def validate_naive(cls, v: datetime) -> datetime:
        """Wall-clock datetimes only: no tzinfo."""
        if v.tzinfo is not None:
            raise ValueError(f"datetime {v.isoformat()} must be naive (no tzinfo)")
        return v

    @field_validator("step")
    @classmethod
    def validate_step_nonzero(cls, v: timedelta) -> timedelta:
        if not v:
            raise ZeroStepError()
        return v

    @model_validator(mode="after")
    def validate_ordered(self) -> "DatetimeStepRange":
        if self.start > self.end:
            raise InvalidRangeError(self.start, self.end)
        return self

    @property
    def ascending(self) -> bool:
        return self.step > timedelta(0)

    def points(self) -> NaiveDatetimeIterator:
        """New point iterator over the interval."""
        return NaiveDatetimeIterator(self.start, self.end, self.step)

    def ranges(self) -> NaiveDatetimeRangeIterator:
        """New range iterator over the interval."""
        return NaiveDatetimeRangeIterator(self.start, self.end, self.step)

    def reversed(self) -> "DatetimeStepRange":
        """
        Same interval walked in the opposite direction.

        Returns:
            Copy with the step negated
        """
        return self.model_copy(update={"step": -self.step})
