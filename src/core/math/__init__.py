"""
Core math modules для рационального движка

Математические примитивы и численные алгоритмы без зависимостей от domain.

Модули, работающие с Rational, импортируются напрямую, чтобы не создавать
циклического импорта с src.core.domain:
- src.core.math.rational_arithmetic  (simplify, add, subtract, multiply, divide)
- src.core.math.continued_fractions  (convergents, from_decimal)
- src.core.math.formatting           (format_rational, to_decimal, parse_fraction)
"""

# Exceptions
from src.core.math.exceptions import (
    ArithmeticOverflow,
    DivisionByZero,
    InvalidInput,
    RationalError,
)

# Integer math
from src.core.math.integer_math import gcd, lcm

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Integer range
    INT_MAX,
    INT_MIN,
    check_int_range,
    checked_add,
    checked_mul,
    checked_neg,
    checked_sub,
    is_in_int_range,
    require_int,
    # Float checks
    is_valid_float,
    require_finite,
    validate_tolerance,
    within_relative_tolerance,
)

__all__ = [
    # Exceptions
    "RationalError",
    "DivisionByZero",
    "ArithmeticOverflow",
    "InvalidInput",
    # Integer math
    "gcd",
    "lcm",
    # Numerical Safeguards — Integer range
    "INT_MAX",
    "INT_MIN",
    "check_int_range",
    "checked_add",
    "checked_mul",
    "checked_neg",
    "checked_sub",
    "is_in_int_range",
    "require_int",
    # Numerical Safeguards — Float checks
    "is_valid_float",
    "require_finite",
    "validate_tolerance",
    "within_relative_tolerance",
]
