"""
Rational Arithmetic — Simplify / Add / Subtract / Multiply / Divide

Модуль реализует точную арифметику над каноничными дробями:
- simplify(n, d): сокращение через GCD + нормализация знака
- add/subtract: приведение к общему знаменателю через LCM
- multiply: перемножение числителей и знаменателей
- divide: умножение на обратную дробь

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый результат проходит через simplify (каноничная форма)
2. Знаменатель результата всегда > 0
3. Каждое промежуточное значение проверяется на диапазон (ArithmeticOverflow)
4. Входы не мутируются (Rational immutable)

ФОРМУЛЫ:
    L = lcm(d1, d2)
    n1/d1 ± n2/d2 = (n1 * (L / d1) ± n2 * (L / d2)) / L
    n1/d1 × n2/d2 = (n1 * n2) / (d1 * d2)
    n1/d1 ÷ n2/d2 = n1/d1 × d2/n2,  n2 != 0
"""

from src.core.domain.rational import Rational
from src.core.math.exceptions import DivisionByZero
from src.core.math.integer_math import gcd, lcm
from src.core.math.numerical_safeguards import (
    check_int_range,
    checked_add,
    checked_mul,
    checked_neg,
    checked_sub,
    require_int,
)

# =============================================================================
# SIMPLIFY
# =============================================================================


def simplify(numerator: int, denominator: int) -> Rational:
    """
    Сокращение дроби до каноничной формы.

    Алгоритм:
    1. g = gcd(|numerator|, denominator)
    2. numerator /= g, denominator /= g
    3. Если denominator < 0 → меняем знак обеих компонент

    gcd(0, d) = |d|, поэтому simplify(0, d) == 0/1.

    Args:
        numerator: Числитель (любого знака)
        denominator: Знаменатель (любого знака, != 0)

    Returns:
        Rational в каноничной форме

    Raises:
        DivisionByZero: denominator == 0
        ArithmeticOverflow: компоненты вне [INT_MIN, INT_MAX]
        InvalidInput: нецелые компоненты

    Examples:
        >>> simplify(2, 4)
        Rational(numerator=1, denominator=2)
        >>> simplify(3, -6)
        Rational(numerator=-1, denominator=2)
        >>> simplify(0, -5)
        Rational(numerator=0, denominator=1)
    """
    require_int(numerator, "numerator")
    require_int(denominator, "denominator")
    check_int_range(numerator, "numerator")
    check_int_range(denominator, "denominator")

    if denominator == 0:
        raise DivisionByZero(f"Division by zero: {numerator}/0")

    g = gcd(numerator, denominator)
    num = numerator // g
    den = denominator // g

    if den < 0:
        # -INT_MIN не представим: единственный путь переполнения в simplify
        num = checked_neg(num, "numerator")
        den = checked_neg(den, "denominator")

    return Rational(numerator=num, denominator=den)


# =============================================================================
# УНАРНЫЕ ОПЕРАЦИИ
# =============================================================================


def reciprocal(f: Rational) -> Rational:
    """
    Обратная дробь: d/n.

    Raises:
        DivisionByZero: f == 0
    """
    if f.numerator == 0:
        raise DivisionByZero("Division by zero: reciprocal of 0")
    return simplify(f.denominator, f.numerator)


def negate(f: Rational) -> Rational:
    """Противоположная дробь: -n/d."""
    return simplify(checked_neg(f.numerator, "numerator"), f.denominator)


# =============================================================================
# БИНАРНЫЕ ОПЕРАЦИИ
# =============================================================================


def _scale_to_common_denominator(f1: Rational, f2: Rational) -> tuple[int, int, int]:
    """
    Приведение к общему знаменателю L = lcm(d1, d2).

    Returns:
        (n1 * (L / d1), n2 * (L / d2), L)
    """
    common = lcm(f1.denominator, f2.denominator)
    scaled1 = checked_mul(f1.numerator, common // f1.denominator, "scaled numerator")
    scaled2 = checked_mul(f2.numerator, common // f2.denominator, "scaled numerator")
    return scaled1, scaled2, common


def add(f1: Rational, f2: Rational) -> Rational:
    """
    Сложение дробей через общий знаменатель.

    Examples:
        >>> add(Rational.of(1, 2), Rational.of(1, 3))
        Rational(numerator=5, denominator=6)
    """
    scaled1, scaled2, common = _scale_to_common_denominator(f1, f2)
    return simplify(checked_add(scaled1, scaled2, "numerator"), common)


def subtract(f1: Rational, f2: Rational) -> Rational:
    """
    Вычитание дробей (f1 - f2) через общий знаменатель.

    Examples:
        >>> subtract(Rational.of(3, 4), Rational.of(1, 4))
        Rational(numerator=1, denominator=2)
    """
    scaled1, scaled2, common = _scale_to_common_denominator(f1, f2)
    return simplify(checked_sub(scaled1, scaled2, "numerator"), common)


def multiply(f1: Rational, f2: Rational) -> Rational:
    """
    Умножение дробей: (n1 * n2) / (d1 * d2).

    Examples:
        >>> multiply(Rational.of(2, 3), Rational.of(3, 4))
        Rational(numerator=1, denominator=2)
    """
    numerator = checked_mul(f1.numerator, f2.numerator, "numerator")
    denominator = checked_mul(f1.denominator, f2.denominator, "denominator")
    return simplify(numerator, denominator)


def divide(f1: Rational, f2: Rational) -> Rational:
    """
    Деление дробей: f1 × reciprocal(f2).

    Raises:
        DivisionByZero: f2 == 0

    Examples:
        >>> divide(Rational.of(1, 2), Rational.of(1, 3))
        Rational(numerator=3, denominator=2)
    """
    if f2.numerator == 0:
        raise DivisionByZero("Division by zero")
    return multiply(f1, reciprocal(f2))
