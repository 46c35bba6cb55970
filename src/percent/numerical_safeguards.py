"""
Numerical Safeguards — Численные примитивы для процентных операций

Модуль содержит:
- Константы шкалы (100% и единичная доля)
- Приведение generic numeric входов к float
- Проверку попадания в замкнутый диапазон
- Сравнение float с учётом машинной точности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все входы расширяются до float (IEEE double) ДО вычислений
2. Константы шкалы — литералы, не конфигурация времени выполнения
3. NaN никогда не попадает в диапазон (сравнения с NaN ложны)
"""

import math
import numbers
from typing import Final, Union

# =============================================================================
# КОНСТАНТЫ ШКАЛЫ
# =============================================================================

# 100% — множитель/делитель во всех конверсиях процент <-> доля
PERCENT_MAX: Final[float] = 100.0
PERCENT_MIN: Final[float] = 0.0

# Единичная доля (ratio)
RATIO_MAX: Final[float] = 1.0
RATIO_MIN: Final[float] = 0.0

# Толерантность для сравнения результатов (complement law, round-trip)
EPS_PERCENT_COMPARE: Final[float] = 1e-10


Number = Union[int, float, numbers.Real]


# =============================================================================
# ПРИВЕДЕНИЕ ТИПОВ
# =============================================================================


def as_float(value: Number, name: str = "value") -> float:
    """
    Расширение generic numeric значения до float.

    Принимает int, float, Fraction, NumPy-скаляры — всё, что
    зарегистрировано как numbers.Real. bool отклоняется явно, хотя
    формально является подклассом int.

    Args:
        value: Исходное значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        float(value)

    Raises:
        TypeError: Если value не является вещественным числом
        OverflowError: Если целое слишком велико для float

    Examples:
        >>> as_float(25)
        25.0
        >>> from fractions import Fraction
        >>> as_float(Fraction(1, 4))
        0.25
        >>> as_float("25")  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        TypeError: value must be a real number, got str
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"{name} must be a real number, got {type(value).__name__}")

    return float(value)


# =============================================================================
# ДИАПАЗОНЫ
# =============================================================================


def is_in_range(value: float, min_value: float, max_value: float) -> bool:
    """
    Проверка min_value <= value <= max_value (границы включены).

    NaN всегда вне диапазона.

    Examples:
        >>> is_in_range(50.0, 0.0, 100.0)
        True
        >>> is_in_range(100.0, 0.0, 100.0)
        True
        >>> is_in_range(float('nan'), 0.0, 100.0)
        False
    """
    return min_value <= value <= max_value


def is_percent(value: float) -> bool:
    """Проверка, что value лежит в [0, 100]."""
    return is_in_range(value, PERCENT_MIN, PERCENT_MAX)


def is_ratio(value: float) -> bool:
    """Проверка, что value лежит в [0, 1]."""
    return is_in_range(value, RATIO_MIN, RATIO_MAX)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_PERCENT_COMPARE,
    abs_tol: float = EPS_PERCENT_COMPARE,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-10)
        abs_tol: Абсолютная толерантность (default: 1e-10)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(0.1 + 0.2, 0.3)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
