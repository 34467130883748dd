"""
Rational — Модель рационального числа

Immutable Pydantic модель дроби в каноничной форме:
- denominator > 0
- gcd(|numerator|, denominator) == 1
- numerator == 0 ⇒ denominator == 1
- обе компоненты в [INT_MIN, INT_MAX]

Каноничность — гарантия типа, а не соглашение: конструктор отклоняет
несокращённые пары (ValidationError). Единственный путь построения из
произвольной пары — simplify() / Rational.of(). model_copy(update=...)
тоже проходит валидацию.
"""

from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, Field, model_validator

from src.core.math.integer_math import gcd
from src.core.math.numerical_safeguards import INT_MAX, INT_MIN


class Rational(BaseModel):
    """
    Дробь в каноничной форме (lowest terms, положительный знаменатель).

    Все операции возвращают новый экземпляр (frozen=True).
    Равенство сравнивает каноничные пары (numerator, denominator).
    """

    numerator: int = Field(..., ge=INT_MIN, le=INT_MAX, strict=True, description="Числитель (несёт знак)")
    denominator: int = Field(..., gt=0, le=INT_MAX, strict=True, description="Знаменатель (всегда > 0)")

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_canonical_form(self) -> "Rational":
        """Отклонение несокращённых пар: их нужно строить через simplify()."""
        if self.numerator == 0:
            if self.denominator != 1:
                raise ValueError(f"zero must be represented as 0/1, got 0/{self.denominator}")
        elif gcd(self.numerator, self.denominator) != 1:
            raise ValueError(
                f"{self.numerator}/{self.denominator} is not in lowest terms; use simplify()"
            )
        return self

    def model_copy(self, *, update: Optional[Mapping[str, Any]] = None, deep: bool = False) -> "Rational":
        """Копия с update проходит валидацию (каноничная форма сохраняется).

        Raises:
            ValidationError: update даёт несокращённую или вне диапазона пару
        """
        if not update:
            return super().model_copy(deep=deep)
        return type(self).model_validate({**self.model_dump(), **update})

    # -------------------------------------------------------------------------
    # Фабрики
    # -------------------------------------------------------------------------

    @classmethod
    def of(cls, numerator: int, denominator: int = 1) -> "Rational":
        """
        Построение из произвольной пары через simplify().

        Raises:
            DivisionByZero: denominator == 0
            ArithmeticOverflow: компоненты вне диапазона
            InvalidInput: нецелые компоненты
        """
        from src.core.math.rational_arithmetic import simplify

        return simplify(numerator, denominator)

    @classmethod
    def zero(cls) -> "Rational":
        return cls(numerator=0, denominator=1)

    @classmethod
    def one(cls) -> "Rational":
        return cls(numerator=1, denominator=1)

    # -------------------------------------------------------------------------
    # Предикаты
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return self.numerator == 0

    def is_integer(self) -> bool:
        return self.denominator == 1

    def is_negative(self) -> bool:
        return self.numerator < 0

    def as_tuple(self) -> tuple[int, int]:
        return (self.numerator, self.denominator)

    # -------------------------------------------------------------------------
    # Операторы (делегируют в rational_arithmetic)
    # -------------------------------------------------------------------------

    def __add__(self, other: Union["Rational", int]) -> "Rational":
        from src.core.math import rational_arithmetic

        other = _coerce(other)
        if other is None:
            return NotImplemented
        return rational_arithmetic.add(self, other)

    def __radd__(self, other: int) -> "Rational":
        return self.__add__(other)

    def __sub__(self, other: Union["Rational", int]) -> "Rational":
        from src.core.math import rational_arithmetic

        other = _coerce(other)
        if other is None:
            return NotImplemented
        return rational_arithmetic.subtract(self, other)

    def __rsub__(self, other: int) -> "Rational":
        from src.core.math import rational_arithmetic

        other = _coerce(other)
        if other is None:
            return NotImplemented
        return rational_arithmetic.subtract(other, self)

    def __mul__(self, other: Union["Rational", int]) -> "Rational":
        from src.core.math import rational_arithmetic

        other = _coerce(other)
        if other is None:
            return NotImplemented
        return rational_arithmetic.multiply(self, other)

    def __rmul__(self, other: int) -> "Rational":
        return self.__mul__(other)

    def __truediv__(self, other: Union["Rational", int]) -> "Rational":
        from src.core.math import rational_arithmetic

        other = _coerce(other)
        if other is None:
            return NotImplemented
        return rational_arithmetic.divide(self, other)

    def __rtruediv__(self, other: int) -> "Rational":
        from src.core.math import rational_arithmetic

        other = _coerce(other)
        if other is None:
            return NotImplemented
        return rational_arithmetic.divide(other, self)

    def __neg__(self) -> "Rational":
        from src.core.math import rational_arithmetic

        return rational_arithmetic.negate(self)

    # Сравнение через перекрёстное умножение (знаменатели > 0, знак не меняется)
    def __lt__(self, other: "Rational") -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        return self.numerator * other.denominator < other.numerator * self.denominator

    def __le__(self, other: "Rational") -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        return self.numerator * other.denominator <= other.numerator * self.denominator

    def __gt__(self, other: "Rational") -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        return self.numerator * other.denominator > other.numerator * self.denominator

    def __ge__(self, other: "Rational") -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        return self.numerator * other.denominator >= other.numerator * self.denominator

    def __float__(self) -> float:
        from src.core.math.formatting import to_decimal

        return to_decimal(self)

    def __str__(self) -> str:
        from src.core.math.formatting import format_rational

        return format_rational(self)


def _coerce(value: object) -> Union[Rational, None]:
    """Rational как есть, int → n/1, остальное → None (NotImplemented)."""
    if isinstance(value, Rational):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Rational.of(value)
    return None
