"""
Iterators for datetime ranges

- NaiveDatetimeIterator: individual datetimes of [start, end]
- NaiveDatetimeRangeIterator: consecutive (start, end) ranges of [start, end]
- DatetimeStepRange: immutable, serializable description building either one

Forward iteration uses a positive step, reverse iteration a negative step.
"""

from chrono_kit.iter.naive_datetime_iter import (
    INVALID_RANGE_MESSAGE,
    ZERO_STEP_MESSAGE,
    InvalidRangeError,
    NaiveDatetimeIterError,
    NaiveDatetimeIterator,
    ZeroStepError,
    validate_step_params,
)
from chrono_kit.iter.naive_datetime_range_iter import NaiveDatetimeRangeIterator
from chrono_kit.iter.step_range import DatetimeStepRange

__all__ = [
    # Messages
    "ZERO_STEP_MESSAGE",
    "INVALID_RANGE_MESSAGE",
    # Exceptions
    "NaiveDatetimeIterError",
    "ZeroStepError",
    "InvalidRangeError",
    # Iterators
    "NaiveDatetimeIterator",
    "NaiveDatetimeRangeIterator",
    # Models
    "DatetimeStepRange",
    # Functions
    "validate_step_params",
]
