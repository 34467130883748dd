"""
Тесты для FractionCalculator — сценарии калькулятора

Сценарии:
1. 1/2 + 1/3 → 5/6
2. 3/4 - 1/4 → 1/2
3. 2/3 × 3/4 → 1/2
4. 1/2 ÷ 1/3 → 3/2, отображается как "1 1/2"
5. 1/2 ÷ 0 → division_by_zero, история не меняется
6. 0.75 → 3/4
"""

import math

import pytest

from src.calculator import (
    QUICK_FRACTIONS,
    CalculationHistory,
    CalculatorConfig,
    FractionCalculator,
    Operator,
)
from src.core.domain.rational import Rational
from src.core.math.continued_fractions import RecoveryConfig
from src.core.math.exceptions import ERROR_CODES, InvalidInput
from src.core.math.numerical_safeguards import INT_MAX
from src.core.math.rational_arithmetic import simplify


@pytest.fixture
def calculator():
    return FractionCalculator()


# =============================================================================
# ТЕСТЫ: сценарии
# =============================================================================


class TestScenarios:
    """Основные сценарии."""

    def test_add(self, calculator) -> None:
        outcome = calculator.evaluate("1/2", "+", "1/3")
        assert outcome.ok
        assert outcome.result == simplify(5, 6)
        assert outcome.display == "5/6"
        assert outcome.expression == "1/2 + 1/3 = 5/6"

    def test_subtract(self, calculator) -> None:
        outcome = calculator.evaluate(simplify(3, 4), Operator.SUBTRACT, simplify(1, 4))
        assert outcome.result == simplify(1, 2)
        assert outcome.display == "1/2"

    def test_multiply(self, calculator) -> None:
        outcome = calculator.evaluate("2/3", "×", "3/4")
        assert outcome.result == simplify(1, 2)
        assert outcome.operator is Operator.MULTIPLY

    def test_divide_mixed_display(self, calculator) -> None:
        outcome = calculator.evaluate("1/2", "÷", "1/3")
        assert outcome.result == simplify(3, 2)
        assert outcome.display == "1 1/2"
        assert outcome.improper == "3/2"
        assert outcome.decimal == 1.5
        assert outcome.decimal_display == "1.500000"
        assert outcome.expression == "1/2 ÷ 1/3 = 1 1/2"

    def test_divide_by_zero(self, calculator) -> None:
        outcome = calculator.evaluate("1/2", "÷", "0")
        assert not outcome.ok
        assert outcome.error_code == "division_by_zero"
        assert outcome.result is None
        assert outcome.display == ""
        assert outcome.left == simplify(1, 2)
        assert outcome.right == Rational.zero()
        assert len(calculator.history) == 0

    def test_recover_decimal(self, calculator) -> None:
        assert calculator.recover_decimal(0.75) == simplify(3, 4)

    def test_mixed_number_operands(self, calculator) -> None:
        outcome = calculator.evaluate("-3 1/2", "+", "1/2")
        assert outcome.result == simplify(-3, 1)
        assert outcome.display == "-3"

    def test_decimal_operand(self, calculator) -> None:
        outcome = calculator.evaluate("0.25", "+", "1/4")
        assert outcome.result == simplify(1, 2)


# =============================================================================
# ТЕСТЫ: ошибки
# =============================================================================


class TestErrors:
    """Ошибки движка превращаются в outcome с error_code."""

    def test_invalid_operator(self, calculator) -> None:
        outcome = calculator.evaluate("1/2", "%", "1/3")
        assert not outcome.ok
        assert outcome.error_code == "invalid_input"
        assert "Invalid operation" in outcome.error_message
        assert outcome.operator is None

    def test_unparseable_operand(self, calculator) -> None:
        outcome = calculator.evaluate("one half", "+", "1/3")
        assert outcome.error_code == "invalid_input"
        assert outcome.left is None

    def test_unsupported_operand_type(self, calculator) -> None:
        outcome = calculator.evaluate(0.5, "+", "1/3")  # type: ignore[arg-type]
        assert outcome.error_code == "invalid_input"

    def test_overflow(self, calculator) -> None:
        outcome = calculator.evaluate(str(INT_MAX), "+", "1")
        assert outcome.error_code == "arithmetic_overflow"
        assert outcome.operator is Operator.ADD

    def test_nan_recovery_raises(self, calculator) -> None:
        with pytest.raises(InvalidInput):
            calculator.recover_decimal(math.nan)

    @pytest.mark.parametrize(
        "left, operator, right, expected",
        [
            ("1/2", "÷", "0", "division_by_zero"),
            (str(INT_MAX), "×", "2", "arithmetic_overflow"),
            ("1/2", "%", "1/3", "invalid_input"),
        ],
    )
    def test_error_codes_are_stable(self, calculator, left, operator, right, expected) -> None:
        outcome = calculator.evaluate(left, operator, right)
        assert outcome.error_code == expected
        assert outcome.error_code in ERROR_CODES

    def test_failures_not_recorded(self, calculator) -> None:
        calculator.evaluate("1/2", "+", "1/3")
        calculator.evaluate("1/2", "÷", "0")
        calculator.evaluate("x", "+", "1")
        assert len(calculator.history) == 1


# =============================================================================
# ТЕСТЫ: evaluate_parts
# =============================================================================


class TestEvaluateParts:
    """Вычисление по парам (числитель, знаменатель)."""

    def test_unreduced_parts(self, calculator) -> None:
        outcome = calculator.evaluate_parts(2, 4, "+", 2, 6)
        assert outcome.result == simplify(5, 6)
        assert outcome.expression == "1/2 + 1/3 = 5/6"

    def test_negative_denominator(self, calculator) -> None:
        outcome = calculator.evaluate_parts(1, -2, "×", 4, 1)
        assert outcome.result == simplify(-2, 1)

    def test_zero_denominator(self, calculator) -> None:
        outcome = calculator.evaluate_parts(1, 0, "+", 1, 3)
        assert not outcome.ok
        assert outcome.error_code == "division_by_zero"
        assert len(calculator.history) == 0

    def test_non_integer_parts(self, calculator) -> None:
        outcome = calculator.evaluate_parts(1.5, 2, "+", 1, 3)  # type: ignore[arg-type]
        assert outcome.error_code == "invalid_input"


# =============================================================================
# ТЕСТЫ: конфигурация и история
# =============================================================================


class TestConfiguration:
    """CalculatorConfig и история."""

    def test_defaults(self) -> None:
        config = CalculatorConfig()
        assert config.history_limit == 10
        assert config.decimal_places == 6
        assert config.recovery == RecoveryConfig()

    def test_history_limit(self) -> None:
        calculator = FractionCalculator(CalculatorConfig(history_limit=2))
        for operand in ("1", "2", "3"):
            calculator.evaluate(operand, "+", "1")

        assert [r.result.numerator for r in calculator.history.entries()] == [3, 4]

    def test_decimal_places(self) -> None:
        calculator = FractionCalculator(CalculatorConfig(decimal_places=2))
        assert calculator.evaluate("1", "÷", "3").decimal_display == "0.33"

    def test_recovery_tolerance_used_for_decimal_operands(self) -> None:
        loose = FractionCalculator(CalculatorConfig(recovery=RecoveryConfig(tolerance=1e-2)))
        assert loose.evaluate("3.1416", "+", "0").result == simplify(22, 7)

    def test_recovery_iteration_cap_used_for_decimal_operands(self) -> None:
        """max_iterations из RecoveryConfig действует и на десятичные операнды."""
        capped = FractionCalculator(CalculatorConfig(recovery=RecoveryConfig(tolerance=1e-12, max_iterations=1)))
        assert capped.recover_decimal(3.14159265) == simplify(3, 1)
        assert capped.evaluate("3.14159265", "+", "0").result == simplify(3, 1)

    def test_shared_history(self) -> None:
        history = CalculationHistory(limit=5)
        first = FractionCalculator(history=history)
        second = FractionCalculator(history=history)
        first.evaluate("1/2", "+", "1/2")
        second.evaluate("1/2", "-", "1/2")
        assert len(history) == 2

    def test_history_entry_matches_outcome(self, calculator) -> None:
        outcome = calculator.evaluate("1/2", "÷", "1/3")
        latest = calculator.history.latest()
        assert latest.result == outcome.result
        assert latest.expression == outcome.expression


class TestQuickFractions:
    """Быстрый выбор частых дробей."""

    def test_presets_canonical(self) -> None:
        for label, value in QUICK_FRACTIONS.items():
            assert f"{value.numerator}/{value.denominator}" == label

    def test_presets_usable_as_operands(self, calculator) -> None:
        outcome = calculator.evaluate(QUICK_FRACTIONS["1/4"], "+", QUICK_FRACTIONS["3/4"])
        assert outcome.result == Rational.one()
