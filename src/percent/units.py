"""
Units — Value-объекты процента и доли

Immutable Pydantic модели с ограниченными полями. Альтернатива
проверке PercentResult.error: невалидное значение не может быть создано.

- Percentage: значение в [0, 100]
- Ratio: значение в [0, 1]

Все вычисления делегируются в percent.operations.
"""

from pydantic import BaseModel, Field

from percent.numerical_safeguards import (
    PERCENT_MAX,
    PERCENT_MIN,
    RATIO_MAX,
    RATIO_MIN,
    Number,
)
from percent.operations import from_ratio, percent, remain, to_ratio


class Ratio(BaseModel):
    """Доля целого на единичной шкале."""

    value: float = Field(
        ..., ge=RATIO_MIN, le=RATIO_MAX, description="Доля (0-1)"
    )

    model_config = {"frozen": True, "strict": True}

    def to_percentage(self) -> "Percentage":
        """
        Конверсия в Percentage.

        Examples:
            >>> Ratio(value=0.25).to_percentage()
            Percentage(value=25.0)
        """
        return Percentage(value=from_ratio(self.value).unwrap())


class Percentage(BaseModel):
    """
    Процент целого на шкале 0-100.

    Raises:
        pydantic.ValidationError: при создании со значением вне [0, 100]
    """

    value: float = Field(
        ..., ge=PERCENT_MIN, le=PERCENT_MAX, description="Процент (0-100)"
    )

    model_config = {"frozen": True, "strict": True}

    def to_ratio(self) -> Ratio:
        """Конверсия в Ratio."""
        return Ratio(value=to_ratio(self.value).unwrap())

    def share(self, value: Number) -> float:
        """
        Часть value, соответствующая этому проценту.

        Examples:
            >>> Percentage(value=25).share(200)
            50.0
        """
        return percent(self.value, value).unwrap()

    def remain(self, value: Number) -> float:
        """Остаток value после вычитания этого процента."""
        return remain(self.value, value).unwrap()
