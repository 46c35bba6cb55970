"""
Operations — Конверсии процент / доля / абсолютное значение

Шесть чистых функций. Каждая:
1. Приводит входы к float
2. Проверяет предусловия (первое нарушенное -> немедленный возврат)
3. Возвращает PercentResult(value, error)

При ошибке value всегда ровно 0.0. Ошибки валидации возвращаются,
а не выбрасываются.

ФОРМУЛЫ:
    percent(p, v)    = v * (p / 100)                  p ∈ [0, 100]
    of(part, total)  = part / total * 100             total ≠ 0, part ≤ total
    change(old, new) = (new - old) / |old| * 100      old ≠ 0
    remain(p, v)     = v * ((100 - p) / 100)          p ∈ [0, 100]
    from_ratio(r)    = r * 100                        r ∈ [0, 1]
    to_ratio(p)      = p / 100                        p ∈ [0, 100]
"""

import logging
from typing import NamedTuple, Optional

from percent.errors import PercentError, PercentErrorKind
from percent.numerical_safeguards import (
    PERCENT_MAX,
    Number,
    as_float,
    is_percent,
    is_ratio,
)

logger = logging.getLogger(__name__)


# =============================================================================
# RESULT
# =============================================================================


class PercentResult(NamedTuple):
    """
    Результат операции: (value, error).

    Распаковывается как обычный tuple:
        value, err = of(25, 200)

    Инвариант: error is not None => value == 0.0
    """

    value: float
    error: Optional[PercentErrorKind] = None

    @property
    def ok(self) -> bool:
        """True если ошибки нет."""
        return self.error is None

    def unwrap(self) -> float:
        """
        Значение или исключение.

        Raises:
            PercentError: Если результат содержит ошибку
        """
        if self.error is not None:
            raise PercentError(self.error)
        return self.value


def _fail(operation: str, kind: PercentErrorKind, **args: float) -> PercentResult:
    logger.debug("%s rejected %s: %s", operation, args, kind.value)
    return PercentResult(0.0, kind)


# =============================================================================
# OPERATIONS
# =============================================================================


def percent(percent: Number, value: Number) -> PercentResult:
    """
    Доля value, соответствующая percent процентам.

    Args:
        percent: Процент в [0, 100]
        value: Базовое значение (любого знака)

    Returns:
        PercentResult(value * percent / 100, None)
        PercentResult(0.0, OUT_OF_RANGE) если percent вне [0, 100]

    Examples:
        >>> percent(25, 100)
        PercentResult(value=25.0, error=None)
        >>> percent(50, -200)
        PercentResult(value=-100.0, error=None)
    """
    p = as_float(percent, "percent")
    v = as_float(value, "value")

    if not is_percent(p):
        return _fail("percent", PercentErrorKind.OUT_OF_RANGE, percent=p)

    return PercentResult(v * (p / PERCENT_MAX))


def of(part: Number, total: Number) -> PercentResult:
    """
    Сколько процентов part составляет от total.

    Порядок проверок фиксирован: сначала total == 0, затем part > total.
    Поэтому of(150, 0) -> DIVIDE_BY_ZERO, а не PART_GREATER_THAN_TOTAL.

    Args:
        part: Часть
        total: Целое (ненулевое)

    Returns:
        PercentResult(part / total * 100, None)
        PercentResult(0.0, DIVIDE_BY_ZERO) если total == 0
        PercentResult(0.0, PART_GREATER_THAN_TOTAL) если part > total

    Examples:
        >>> of(25, 100)
        PercentResult(value=25.0, error=None)
        >>> of(-200, -50)
        PercentResult(value=400.0, error=None)
    """
    pt = as_float(part, "part")
    tt = as_float(total, "total")

    if tt == 0:
        return _fail("of", PercentErrorKind.DIVIDE_BY_ZERO, part=pt, total=tt)

    if pt > tt:
        return _fail("of", PercentErrorKind.PART_GREATER_THAN_TOTAL, part=pt, total=tt)

    return PercentResult(pt / tt * PERCENT_MAX)


def change(old_value: Number, new_value: Number) -> PercentResult:
    """
    Процентное изменение от old_value к new_value.

    Знаменатель берётся по модулю, поэтому рост от отрицательного
    значения даёт положительный процент.

    Args:
        old_value: Исходное значение (ненулевое)
        new_value: Новое значение

    Returns:
        PercentResult((new - old) / |old| * 100, None)
        PercentResult(0.0, DIVIDE_BY_ZERO) если old_value == 0

    Examples:
        >>> change(25, 100)
        PercentResult(value=300.0, error=None)
        >>> change(-50, -200)
        PercentResult(value=-300.0, error=None)
    """
    old = as_float(old_value, "old_value")
    new = as_float(new_value, "new_value")

    if old == 0:
        return _fail("change", PercentErrorKind.DIVIDE_BY_ZERO, old_value=old)

    return PercentResult((new - old) / abs(old) * PERCENT_MAX)


def remain(percent: Number, value: Number) -> PercentResult:
    """
    Остаток value после вычитания percent процентов.

    percent(p, v) + remain(p, v) == v (с точностью float).

    Examples:
        >>> remain(25, 100)
        PercentResult(value=75.0, error=None)
    """
    p = as_float(percent, "percent")
    v = as_float(value, "value")

    if not is_percent(p):
        return _fail("remain", PercentErrorKind.OUT_OF_RANGE, percent=p)

    return PercentResult(v * ((PERCENT_MAX - p) / PERCENT_MAX))


def from_ratio(ratio: Number) -> PercentResult:
    """Доля [0, 1] -> процент [0, 100]."""
    r = as_float(ratio, "ratio")

    if not is_ratio(r):
        return _fail("from_ratio", PercentErrorKind.OUT_OF_RANGE, ratio=r)

    return PercentResult(r * PERCENT_MAX)


def to_ratio(percent: Number) -> PercentResult:
    """Процент [0, 100] -> доля [0, 1]."""
    p = as_float(percent, "percent")

    if not is_percent(p):
        return _fail("to_ratio", PercentErrorKind.OUT_OF_RANGE, percent=p)

    return PercentResult(p / PERCENT_MAX)
