"""
Continued Fractions — Decimal-to-Fraction Recovery

Модуль восстанавливает дробь с малым знаменателем из float значения
методом подходящих дробей (convergents):

    h(-1) = 1, h(-2) = 0, k(-1) = 0, k(-2) = 1, b = value
    a     = floor(b)
    h(n)  = a * h(n-1) + h(n-2)
    k(n)  = a * k(n-1) + k(n-2)
    b     = 1 / (b - a)

Остановка при |value - h/k| <= |value| * tolerance.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf на входе → InvalidInput
2. b - a == 0 → немедленная остановка (следующий шаг делил бы на ноль)
3. Число итераций ограничено MAX_CONVERGENT_ITERATIONS (гарантия завершения)
4. Толерантность относительная: value == 0 сходится на первом шаге (0/1)
5. Члены, вышедшие за [INT_MIN, INT_MAX] → ArithmeticOverflow
"""

import math
from dataclasses import dataclass
from typing import Final, Iterator

from src.core.domain.rational import Rational
from src.core.logging_config import get_logger
from src.core.math.exceptions import ArithmeticOverflow, InvalidInput
from src.core.math.numerical_safeguards import (
    check_int_range,
    is_valid_float,
    require_finite,
    validate_tolerance,
    within_relative_tolerance,
)
from src.core.math.rational_arithmetic import simplify

logger = get_logger(__name__)

# =============================================================================
# ПАРАМЕТРЫ ВОССТАНОВЛЕНИЯ
# =============================================================================

# Относительная толерантность по умолчанию
DEFAULT_TOLERANCE: Final[float] = 1.0e-6

# Максимум итераций разложения (гарантия завершения)
MAX_CONVERGENT_ITERATIONS: Final[int] = 20


@dataclass(frozen=True)
class RecoveryConfig:
    """Конфигурация восстановления дроби из десятичного значения."""

    tolerance: float = DEFAULT_TOLERANCE
    max_iterations: int = MAX_CONVERGENT_ITERATIONS


# =============================================================================
# CONVERGENTS
# =============================================================================


def convergents(value: float, max_iterations: int = MAX_CONVERGENT_ITERATIONS) -> Iterator[Rational]:
    """
    Генератор подходящих дробей для value.

    Завершается после max_iterations шагов или когда дробная часть
    остатка точно равна нулю (value исчерпан).

    Args:
        value: Конечное float значение
        max_iterations: Максимум подходящих дробей (>= 1)

    Yields:
        Rational — очередная подходящая дробь h(n)/k(n)

    Raises:
        InvalidInput: value NaN/Inf или max_iterations < 1
        ArithmeticOverflow: член разложения вне [INT_MIN, INT_MAX]

    Examples:
        >>> [str(c) for c in convergents(3.14159265, 3)]
        ['3', '3 1/7', '3 15/106']
    """
    value = require_finite(value, "value")
    if isinstance(max_iterations, bool) or not isinstance(max_iterations, int) or max_iterations < 1:
        raise InvalidInput(f"max_iterations must be a positive integer, got {max_iterations!r}")

    h1, h2 = 1, 0
    k1, k2 = 0, 1
    b = value

    for _ in range(max_iterations):
        if not is_valid_float(b):
            raise ArithmeticOverflow(f"continued fraction term diverged for value={value!r}")

        a = check_int_range(math.floor(b), "continued fraction term")
        h1, h2 = check_int_range(a * h1 + h2, "convergent numerator"), h1
        k1, k2 = check_int_range(a * k1 + k2, "convergent denominator"), k1

        yield simplify(h1, k1)

        remainder = b - a
        if remainder == 0:
            return
        b = 1.0 / remainder


# =============================================================================
# DECIMAL → FRACTION
# =============================================================================


def from_decimal(
    value: float,
    tolerance: float = DEFAULT_TOLERANCE,
    max_iterations: int = MAX_CONVERGENT_ITERATIONS,
) -> Rational:
    """
    Восстановление дроби из десятичного значения.

    Возвращает первую подходящую дробь c, для которой
    |value - c| <= |value| * tolerance. Если за max_iterations шагов
    толерантность не достигнута, возвращается последняя подходящая дробь
    (наилучшее доступное приближение) и пишется warning.

    Args:
        value: Конечное float значение
        tolerance: Относительная толерантность (> 0)
        max_iterations: Максимум итераций (>= 1)

    Returns:
        Rational в каноничной форме

    Raises:
        InvalidInput: value NaN/Inf, tolerance <= 0 или не конечна
        ArithmeticOverflow: член разложения вне диапазона

    Examples:
        >>> from_decimal(0.75)
        Rational(numerator=3, denominator=4)
        >>> from_decimal(-2.5)
        Rational(numerator=-5, denominator=2)
        >>> from_decimal(0.0)
        Rational(numerator=0, denominator=1)
    """
    value = require_finite(value, "value")
    tolerance = validate_tolerance(tolerance)

    approximation = Rational.zero()
    iterations = 0

    for approximation in convergents(value, max_iterations):
        iterations += 1
        if within_relative_tolerance(
            value, approximation.numerator / approximation.denominator, tolerance
        ):
            logger.debug(
                "decimal_recovered",
                value=value,
                numerator=approximation.numerator,
                denominator=approximation.denominator,
                iterations=iterations,
            )
            return approximation

    if iterations >= max_iterations:
        logger.warning(
            "decimal_recovery_iteration_cap",
            value=value,
            tolerance=tolerance,
            max_iterations=max_iterations,
            numerator=approximation.numerator,
            denominator=approximation.denominator,
        )
    return approximation


def from_decimal_with_config(value: float, config: RecoveryConfig) -> Rational:
    """from_decimal с параметрами из RecoveryConfig."""
    return from_decimal(value, tolerance=config.tolerance, max_iterations=config.max_iterations)
