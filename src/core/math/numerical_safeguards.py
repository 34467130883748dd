"""
Numerical Safeguards — Safe Integer & Float Primitives

Модуль обеспечивает численную корректность всех операций движка:
- Проверка диапазона целых чисел (эмуляция native signed 64-bit)
- Checked-арифметика: сложение/вычитание/умножение с детекцией переполнения
- NaN/Inf проверки для float входов
- Tolerance-сравнение для восстановления дробей из десятичных

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Переполнение никогда не происходит молча (ArithmeticOverflow)
2. NaN/Inf никогда не попадают в вычисления (InvalidInput)
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

from src.core.math.exceptions import ArithmeticOverflow, InvalidInput

# =============================================================================
# ДИАПАЗОН ЦЕЛЫХ ЧИСЕЛ
# =============================================================================

# Границы native signed 64-bit integer.
# Python int неограничен, поэтому диапазон проверяется явно.
INT_BITS: Final[int] = 64
INT_MIN: Final[int] = -(2 ** (INT_BITS - 1))
INT_MAX: Final[int] = 2 ** (INT_BITS - 1) - 1


# =============================================================================
# ВАЛИДАЦИЯ ЦЕЛЫХ
# =============================================================================


def require_int(value: object, name: str) -> int:
    """
    Проверка, что значение является целым числом.

    bool формально является int в Python, но как компонент дроби это
    почти всегда ошибка вызывающего кода, поэтому отклоняется.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value как int

    Raises:
        InvalidInput: Если value не int (или bool)
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInput(f"{name} must be an integer, got {value!r}")
    return value


def is_in_int_range(value: int) -> bool:
    """True если INT_MIN <= value <= INT_MAX."""
    return INT_MIN <= value <= INT_MAX


def check_int_range(value: int, name: str) -> int:
    """
    Проверка, что целое лежит в [INT_MIN, INT_MAX].

    Args:
        value: Проверяемое значение
        name: Имя величины (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        ArithmeticOverflow: Если value вне диапазона

    Examples:
        >>> check_int_range(42, "numerator")
        42
        >>> check_int_range(INT_MAX + 1, "numerator")  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        ArithmeticOverflow: ...
    """
    if not is_in_int_range(value):
        raise ArithmeticOverflow(
            f"{name}={value} exceeds representable range [{INT_MIN}, {INT_MAX}]"
        )
    return value


# =============================================================================
# CHECKED-АРИФМЕТИКА
# =============================================================================


def checked_add(a: int, b: int, name: str = "sum") -> int:
    """a + b с проверкой диапазона."""
    return check_int_range(a + b, name)


def checked_sub(a: int, b: int, name: str = "difference") -> int:
    """a - b с проверкой диапазона."""
    return check_int_range(a - b, name)


def checked_mul(a: int, b: int, name: str = "product") -> int:
    """a * b с проверкой диапазона."""
    return check_int_range(a * b, name)


def checked_neg(a: int, name: str = "negation") -> int:
    """
    -a с проверкой диапазона.

    Единственный случай переполнения: -INT_MIN.
    """
    return check_int_range(-a, name)


# =============================================================================
# FLOAT ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def require_finite(value: float, name: str) -> float:
    """
    Проверка, что value — конечное число.

    Args:
        value: Проверяемое значение (int или float)
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value как float

    Raises:
        InvalidInput: Если value не число или NaN/Inf
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInput(f"{name} must be a number, got {value!r}")

    try:
        value = float(value)
    except OverflowError:
        # int слишком большой для float
        raise InvalidInput(f"{name} is too large to be represented as float") from None

    if not is_valid_float(value):
        raise InvalidInput(f"{name} must be finite (not NaN/Inf), got {value}")
    return value


def validate_tolerance(tolerance: float) -> float:
    """
    Валидация tolerance для восстановления дробей.

    Raises:
        InvalidInput: Если tolerance не конечный или <= 0
    """
    tolerance = require_finite(tolerance, "tolerance")
    if tolerance <= 0:
        raise InvalidInput(f"tolerance must be positive, got {tolerance}")
    return tolerance


def within_relative_tolerance(value: float, approximation: float, tolerance: float) -> bool:
    """
    Проверка |value - approximation| <= |value| * tolerance.

    Относительная толерантность: для value == 0 сходится только точное
    приближение (approximation == 0).

    Args:
        value: Исходное значение
        approximation: Приближение
        tolerance: Относительная толерантность

    Returns:
        True если приближение в пределах толерантности

    Examples:
        >>> within_relative_tolerance(0.5, 0.5, 1e-6)
        True
        >>> within_relative_tolerance(0.3333333, 1 / 3, 1e-6)
        True
        >>> within_relative_tolerance(0.0, 0.0, 1e-6)
        True
        >>> within_relative_tolerance(0.0, 1e-12, 1e-6)
        False
    """
    return abs(value - approximation) <= abs(value) * tolerance
