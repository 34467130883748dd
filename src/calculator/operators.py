"""Operators — выбор арифметической операции калькулятора

Операторы в том виде, в каком их показывает калькулятор: "+", "-", "×", "÷".
Parse принимает также ASCII-алиасы, удобные для ввода с клавиатуры.
"""

from enum import Enum
from typing import Callable, Dict, Final

from src.core.domain.rational import Rational
from src.core.math import rational_arithmetic
from src.core.math.exceptions import InvalidInput


class Operator(str, Enum):
    """Арифметическая операция над двумя дробями."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"

    @classmethod
    def parse(cls, symbol: "Operator | str") -> "Operator":
        """Оператор по символу (включая ASCII-алиасы).

        Raises:
            InvalidInput: неизвестный символ
        """
        if isinstance(symbol, Operator):
            return symbol
        if isinstance(symbol, str):
            operator = OPERATOR_ALIASES.get(symbol.strip().lower())
            if operator is not None:
                return operator
        raise InvalidInput(f"Invalid operation: {symbol!r}")


OPERATOR_ALIASES: Final[Dict[str, Operator]] = {
    "+": Operator.ADD,
    "add": Operator.ADD,
    "-": Operator.SUBTRACT,
    "−": Operator.SUBTRACT,
    "sub": Operator.SUBTRACT,
    "×": Operator.MULTIPLY,
    "*": Operator.MULTIPLY,
    "x": Operator.MULTIPLY,
    "mul": Operator.MULTIPLY,
    "÷": Operator.DIVIDE,
    "/": Operator.DIVIDE,
    ":": Operator.DIVIDE,
    "div": Operator.DIVIDE,
}

_DISPATCH: Final[Dict[Operator, Callable[[Rational, Rational], Rational]]] = {
    Operator.ADD: rational_arithmetic.add,
    Operator.SUBTRACT: rational_arithmetic.subtract,
    Operator.MULTIPLY: rational_arithmetic.multiply,
    Operator.DIVIDE: rational_arithmetic.divide,
}


def calculate(left: Rational, operator: "Operator | str", right: Rational) -> Rational:
    """Применение оператора к двум дробям.

    Ошибки движка (DivisionByZero, ArithmeticOverflow) пробрасываются как есть.

    Raises:
        InvalidInput: неизвестный оператор
    """
    return _DISPATCH[Operator.parse(operator)](left, right)
