"""
Contract Validation Module

Модуль для валидации JSON контрактов (записи истории вычислений).
"""

from .validators import (
    CalculationRecordValidator,
    ContractValidator,
    SchemaLoader,
    validate_calculation_history,
    validate_calculation_record,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CalculationRecordValidator",
    # Functions
    "validate_calculation_record",
    "validate_calculation_history",
]
