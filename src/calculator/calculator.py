"""Fraction Calculator — фасад для уровня представления

Принимает два операнда (Rational, строку или пару целых) и оператор,
вычисляет результат через рациональный движок и возвращает
CalculationOutcome с готовыми для отображения строками.

Ошибки движка (RationalError) не подавляются молча: они логируются и
превращаются в outcome с error_code, история при этом не меняется.
Любые другие исключения пробрасываются.
"""

from dataclasses import dataclass, field
from typing import Dict, Final, Optional, Union

from src.calculator.history import CalculationHistory, CalculationRecord, HISTORY_LIMIT_DEFAULT
from src.calculator.operators import Operator, calculate
from src.core.domain.rational import Rational
from src.core.logging_config import get_logger
from src.core.math.continued_fractions import RecoveryConfig, from_decimal_with_config
from src.core.math.exceptions import InvalidInput, RationalError
from src.core.math.formatting import (
    DECIMAL_PLACES_DEFAULT,
    format_decimal,
    format_improper,
    format_rational,
    parse_fraction,
    to_decimal,
)
from src.core.math.rational_arithmetic import simplify

logger = get_logger(__name__)

Operand = Union[Rational, str]


# =============================================================================
# PRESETS
# =============================================================================

# Быстрый выбор частых дробей
QUICK_FRACTIONS: Final[Dict[str, Rational]] = {
    label: simplify(numerator, denominator)
    for label, numerator, denominator in (
        ("1/2", 1, 2),
        ("1/3", 1, 3),
        ("1/4", 1, 4),
        ("2/3", 2, 3),
        ("3/4", 3, 4),
        ("1/8", 1, 8),
    )
}


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class CalculatorConfig:
    """Конфигурация калькулятора."""

    history_limit: int = HISTORY_LIMIT_DEFAULT
    decimal_places: int = DECIMAL_PLACES_DEFAULT
    recovery: RecoveryConfig = field(default_factory=RecoveryConfig)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class CalculationOutcome:
    """Результат одного вычисления."""

    ok: bool
    operator: Optional[Operator]

    # Операнды (None, если не удалось разобрать)
    left: Optional[Rational]
    right: Optional[Rational]

    # Результат (None при ошибке)
    result: Optional[Rational]
    decimal: Optional[float]

    # Строки для отображения
    display: str  # "1 1/2"
    improper: str  # "3/2"
    decimal_display: str  # "1.500000"
    expression: str  # "1/2 ÷ 1/3 = 1 1/2"

    # Ошибка
    error_code: str
    error_message: str


# =============================================================================
# CALCULATOR
# =============================================================================


class FractionCalculator:
    """Калькулятор дробей с историей вычислений."""

    def __init__(
        self,
        config: Optional[CalculatorConfig] = None,
        history: Optional[CalculationHistory] = None,
    ):
        self.config = config or CalculatorConfig()
        self.history = history if history is not None else CalculationHistory(self.config.history_limit)

    def _to_rational(self, operand: Operand) -> Rational:
        if isinstance(operand, Rational):
            return operand
        if isinstance(operand, str):
            recovery = self.config.recovery
            return parse_fraction(
                operand,
                tolerance=recovery.tolerance,
                max_iterations=recovery.max_iterations,
            )
        raise InvalidInput(f"operand must be a Rational or a string, got {operand!r}")

    def evaluate(self, left: Operand, operator: Union[Operator, str], right: Operand) -> CalculationOutcome:
        """Вычисление left <operator> right.

        Args:
            left: Левый операнд (Rational или строка "3 1/2", "7/2", "0.5")
            operator: Operator или его символ
            right: Правый операнд

        Returns:
            CalculationOutcome; при ошибке движка ok=False и error_code
        """
        parsed_operator: Optional[Operator] = None
        left_value: Optional[Rational] = None
        right_value: Optional[Rational] = None

        try:
            parsed_operator = Operator.parse(operator)
            left_value = self._to_rational(left)
            right_value = self._to_rational(right)
            result = calculate(left_value, parsed_operator, right_value)
        except RationalError as e:
            return _failure(e, parsed_operator, left_value, right_value)

        record = CalculationRecord.build(left_value, parsed_operator, right_value, result)
        self.history.append(record)

        logger.info(
            "calculation_completed",
            expression=record.expression,
            numerator=result.numerator,
            denominator=result.denominator,
        )

        return CalculationOutcome(
            ok=True,
            operator=parsed_operator,
            left=left_value,
            right=right_value,
            result=result,
            decimal=to_decimal(result),
            display=format_rational(result),
            improper=format_improper(result),
            decimal_display=format_decimal(result, self.config.decimal_places),
            expression=record.expression,
            error_code="",
            error_message="",
        )

    def evaluate_parts(
        self,
        left_numerator: int,
        left_denominator: int,
        operator: Union[Operator, str],
        right_numerator: int,
        right_denominator: int,
    ) -> CalculationOutcome:
        """Вычисление по двум парам (числитель, знаменатель).

        Пары могут быть несокращёнными; нулевой знаменатель даёт
        outcome с error_code="division_by_zero".
        """
        try:
            left = simplify(left_numerator, left_denominator)
            right = simplify(right_numerator, right_denominator)
        except RationalError as e:
            return _failure(e)
        return self.evaluate(left, operator, right)

    def recover_decimal(self, value: float) -> Rational:
        """Дробь по десятичному значению с параметрами config.recovery.

        Raises:
            InvalidInput: NaN/Inf
            ArithmeticOverflow: разложение вышло за диапазон
        """
        return from_decimal_with_config(value, self.config.recovery)


def _failure(
    error: RationalError,
    operator: Optional[Operator] = None,
    left: Optional[Rational] = None,
    right: Optional[Rational] = None,
) -> CalculationOutcome:
    logger.warning(
        "calculation_failed",
        operator=operator.value if operator else None,
        error_code=error.code,
        error=str(error),
    )
    return CalculationOutcome(
        ok=False,
        operator=operator,
        left=left,
        right=right,
        result=None,
        decimal=None,
        display="",
        improper="",
        decimal_display="",
        expression="",
        error_code=error.code,
        error_message=str(error),
    )
