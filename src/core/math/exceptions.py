"""
Exceptions — таксономия ошибок рационального движка

Все ошибки выбрасываются в точке обнаружения и пробрасываются вызывающему коду
без локального восстановления или retry (вычисления детерминированы).

Каждая ошибка наследует стандартное исключение Python с тем же смыслом,
поэтому код, ловящий ZeroDivisionError / OverflowError / ValueError,
продолжает работать.
"""

from typing import Final


class RationalError(Exception):
    """Базовая ошибка рационального движка."""

    code: str = "rational_error"


class DivisionByZero(RationalError, ZeroDivisionError):
    """
    Деление на ноль.

    Возникает:
    1. simplify(n, 0) — нулевой знаменатель
    2. divide(a, b) / reciprocal(b) при b.numerator == 0
    """

    code: str = "division_by_zero"


class ArithmeticOverflow(RationalError, OverflowError):
    """
    Выход промежуточного или итогового значения за пределы [INT_MIN, INT_MAX].

    Переполнение — определённая ошибка, а не undefined behaviour.
    """

    code: str = "arithmetic_overflow"


class InvalidInput(RationalError, ValueError):
    """Невалидный вход: NaN/Inf, нецелые компоненты, неразбираемая строка."""

    code: str = "invalid_input"


ERROR_CODES: Final[tuple[str, ...]] = (
    DivisionByZero.code,
    ArithmeticOverflow.code,
    InvalidInput.code,
)
