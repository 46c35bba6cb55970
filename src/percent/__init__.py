"""
percent — конверсии между процентами, долями и абсолютными значениями.

Шесть чистых функций с валидацией входного домена. Ошибки валидации
возвращаются как значение вида PercentErrorKind, а не выбрасываются.
"""

import logging

# Errors
from percent.errors import PercentError, PercentErrorKind

# Numerical Safeguards
from percent.numerical_safeguards import (
    EPS_PERCENT_COMPARE,
    PERCENT_MAX,
    PERCENT_MIN,
    RATIO_MAX,
    RATIO_MIN,
    is_close,
)

# Operations
from percent.operations import (
    PercentResult,
    change,
    from_ratio,
    of,
    percent,
    remain,
    to_ratio,
)

# Value objects
from percent.units import Percentage, Ratio

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Errors
    "PercentError",
    "PercentErrorKind",
    # Constants
    "EPS_PERCENT_COMPARE",
    "PERCENT_MAX",
    "PERCENT_MIN",
    "RATIO_MAX",
    "RATIO_MIN",
    # Utilities
    "is_close",
    # Operations — Types
    "PercentResult",
    # Operations — Functions
    "change",
    "from_ratio",
    "of",
    "percent",
    "remain",
    "to_ratio",
    # Value objects
    "Percentage",
    "Ratio",
]
