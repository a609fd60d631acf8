"""
chrono_kit — time manipulation toolkit for naive datetimes

Stepped iteration over inclusive datetime intervals:

    >>> from datetime import datetime, timedelta
    >>> from chrono_kit import NaiveDatetimeRangeIterator
    >>> it = NaiveDatetimeRangeIterator(
    ...     datetime(2023, 1, 1), datetime(2023, 1, 1, 12), timedelta(hours=9)
    ... )
    >>> [(a.hour, b.hour) for a, b in it]
    [(0, 9), (9, 12)]

Logging goes through loguru and is disabled by default;
call ``logger.enable("chrono_kit")`` to see debug records.
"""

from loguru import logger

from chrono_kit.iter import (
    INVALID_RANGE_MESSAGE,
    ZERO_STEP_MESSAGE,
    DatetimeStepRange,
    InvalidRangeError,
    NaiveDatetimeIterError,
    NaiveDatetimeIterator,
    NaiveDatetimeRangeIterator,
    ZeroStepError,
    validate_step_params,
)

logger.disable("chrono_kit")

__version__ = "0.1.0"

__all__ = [
    "ZERO_STEP_MESSAGE",
    "INVALID_RANGE_MESSAGE",
    "NaiveDatetimeIterError",
    "ZeroStepError",
    "InvalidRangeError",
    "NaiveDatetimeIterator",
    "NaiveDatetimeRangeIterator",
    "DatetimeStepRange",
    "validate_step_params",
]
