"""
Formatting — Rendering & Parsing of Rationals

Представления дроби:
- целое:            3/1   → "3"
- правильная дробь:  -1/2  → "-1/2"   (знак на числителе)
- смешанное число:   -7/2  → "-3 1/2" (знак на целой части)
- неправильная дробь: 7/2  → "7/2"
- десятичное:         1/3  → "0.333333"

Разбор строк (обратное направление): "3", "7/2", "-3 1/2", "0.75".
"""

import re
from typing import Final

from src.core.domain.rational import Rational
from src.core.math.continued_fractions import DEFAULT_TOLERANCE, MAX_CONVERGENT_ITERATIONS, from_decimal
from src.core.math.exceptions import InvalidInput
from src.core.math.numerical_safeguards import check_int_range, checked_add, checked_mul
from src.core.math.rational_arithmetic import simplify

# Знаков после запятой в десятичном представлении
DECIMAL_PLACES_DEFAULT: Final[int] = 6


# =============================================================================
# RENDERING
# =============================================================================


def format_rational(f: Rational) -> str:
    """
    Отображение дроби: целое, правильная дробь или смешанное число.

    Правило знака: в смешанном числе знак ставится перед целой частью
    и относится ко всему числу ("-3 1/2" == -(3 + 1/2)).

    Examples:
        >>> format_rational(Rational.of(1, 2))
        '1/2'
        >>> format_rational(Rational.of(3))
        '3'
        >>> format_rational(Rational.of(7, 2))
        '3 1/2'
        >>> format_rational(Rational.of(-7, 2))
        '-3 1/2'
        >>> format_rational(Rational.of(-1, 2))
        '-1/2'
    """
    if f.denominator == 1:
        return str(f.numerator)

    whole, remainder = divmod(abs(f.numerator), f.denominator)
    sign = "-" if f.numerator < 0 else ""

    if whole > 0 and remainder > 0:
        return f"{sign}{whole} {remainder}/{f.denominator}"
    if remainder == 0:
        # Недостижимо для каноничной нецелой дроби
        return f"{sign}{whole}"
    return f"{f.numerator}/{f.denominator}"


def format_improper(f: Rational) -> str:
    """
    Отображение в виде неправильной дроби "n/d" ("n" для целых).

    Examples:
        >>> format_improper(Rational.of(7, 2))
        '7/2'
        >>> format_improper(Rational.of(4, 2))
        '2'
    """
    if f.denominator == 1:
        return str(f.numerator)
    return f"{f.numerator}/{f.denominator}"


def to_decimal(f: Rational) -> float:
    """Десятичное значение: numerator / denominator (float деление)."""
    return f.numerator / f.denominator


def format_decimal(f: Rational, places: int = DECIMAL_PLACES_DEFAULT) -> str:
    """
    Десятичное значение с фиксированным числом знаков.

    Raises:
        InvalidInput: places < 0

    Examples:
        >>> format_decimal(Rational.of(1, 3))
        '0.333333'
        >>> format_decimal(Rational.of(3, 2), places=2)
        '1.50'
    """
    if isinstance(places, bool) or not isinstance(places, int) or places < 0:
        raise InvalidInput(f"places must be a non-negative integer, got {places!r}")
    return f"{to_decimal(f):.{places}f}"


# =============================================================================
# PARSING
# =============================================================================

_INTEGER_RE = re.compile(r"^(?P<num>[+-]?\d+)$")
_FRACTION_RE = re.compile(r"^(?P<num>[+-]?\d+)\s*/\s*(?P<den>[+-]?\d+)$")
_MIXED_RE = re.compile(r"^(?P<sign>[+-]?)(?P<whole>\d+)\s+(?P<num>\d+)\s*/\s*(?P<den>\d+)$")
_DECIMAL_RE = re.compile(r"^[+-]?(\d+\.\d*|\.\d+|\d+(\.\d*)?[eE][+-]?\d+)$")


def parse_fraction(
    text: str,
    tolerance: float = DEFAULT_TOLERANCE,
    max_iterations: int = MAX_CONVERGENT_ITERATIONS,
) -> Rational:
    """
    Разбор строкового представления дроби.

    Поддерживаемые формы:
    - "n"         целое
    - "n/d"       дробь (знак на числителе или знаменателе)
    - "w n/d"     смешанное число, знак перед целой частью относится ко всему числу
    - "0.75"      десятичное (восстанавливается через from_decimal)

    Args:
        text: Строка для разбора
        tolerance: Толерантность для десятичной формы
        max_iterations: Максимум итераций для десятичной формы

    Returns:
        Rational в каноничной форме

    Raises:
        InvalidInput: неразбираемая строка
        DivisionByZero: нулевой знаменатель
        ArithmeticOverflow: компоненты вне диапазона

    Examples:
        >>> parse_fraction("-3 1/2")
        Rational(numerator=-7, denominator=2)
        >>> parse_fraction("6/-8")
        Rational(numerator=-3, denominator=4)
    """
    if not isinstance(text, str):
        raise InvalidInput(f"expected a string, got {text!r}")

    stripped = text.strip()

    match = _INTEGER_RE.match(stripped)
    if match:
        return simplify(int(match["num"]), 1)

    match = _FRACTION_RE.match(stripped)
    if match:
        return simplify(int(match["num"]), int(match["den"]))

    match = _MIXED_RE.match(stripped)
    if match:
        whole = check_int_range(int(match["whole"]), "whole part")
        numerator = check_int_range(int(match["num"]), "numerator")
        denominator = check_int_range(int(match["den"]), "denominator")
        if denominator != 0 and numerator >= denominator:
            raise InvalidInput(f"mixed number remainder must be a proper fraction: {text!r}")
        total = checked_add(checked_mul(whole, denominator), numerator, "numerator")
        if match["sign"] == "-":
            total = -total
        return simplify(total, denominator)

    if _DECIMAL_RE.match(stripped):
        return from_decimal(float(stripped), tolerance=tolerance, max_iterations=max_iterations)

    raise InvalidInput(f"cannot parse fraction from {text!r}")
