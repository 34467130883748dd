"""Calculator — фасад рационального движка для уровня представления.

- Operator / calculate: выбор операции
- FractionCalculator: вычисление с историей и строками для отображения
- CalculationHistory: последние 10 вычислений
- cli: командная строка (fraction-calc)
"""

from .calculator import (
    QUICK_FRACTIONS,
    CalculationOutcome,
    CalculatorConfig,
    FractionCalculator,
)
from .history import HISTORY_LIMIT_DEFAULT, CalculationHistory, CalculationRecord
from .operators import Operator, calculate

__all__ = [
    "QUICK_FRACTIONS",
    "HISTORY_LIMIT_DEFAULT",
    "Operator",
    "calculate",
    "CalculatorConfig",
    "CalculationOutcome",
    "FractionCalculator",
    "CalculationHistory",
    "CalculationRecord",
]
