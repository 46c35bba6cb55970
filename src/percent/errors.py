"""
Errors — Классификация ошибок валидации

Три фиксированных вида ошибок. Операции возвращают их как значения
(PercentResult.error), а не выбрасывают.

Виды:
- OUT_OF_RANGE: процент вне [0, 100] или доля вне [0, 1]
- DIVIDE_BY_ZERO: нулевой знаменатель (total в of, old_value в change)
- PART_GREATER_THAN_TOTAL: part > total при ненулевом total
"""

from enum import Enum


# =============================================================================
# ENUMS
# =============================================================================


class PercentErrorKind(str, Enum):
    """
    Вид ошибки валидации.

    Члены — синглтоны, сравниваются через `is` или `==`.
    """

    OUT_OF_RANGE = "out_of_range"
    DIVIDE_BY_ZERO = "divide_by_zero"
    PART_GREATER_THAN_TOTAL = "part_greater_than_total"

    @property
    def message(self) -> str:
        """Человекочитаемое сообщение об ошибке."""
        return _MESSAGES[self]


_MESSAGES: dict[PercentErrorKind, str] = {
    PercentErrorKind.OUT_OF_RANGE: "pkg percent: out of the range",
    PercentErrorKind.DIVIDE_BY_ZERO: "pkg percent: division by zero",
    PercentErrorKind.PART_GREATER_THAN_TOTAL: (
        "pkg percent: part cannot be greater than total"
    ),
}


# =============================================================================
# EXCEPTIONS
# =============================================================================


class PercentError(ValueError):
    """
    Ошибка валидации в exception-стиле.

    Выбрасывается только из PercentResult.unwrap() и value-объектов
    (Percentage, Ratio). Сами операции возвращают вид ошибки как значение.

    Attributes:
        kind: Вид ошибки (PercentErrorKind)
    """

    def __init__(self, kind: PercentErrorKind):
        self.kind = kind
        super().__init__(kind.message)
