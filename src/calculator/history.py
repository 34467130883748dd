"""Calculation History — журнал последних вычислений

История — состояние уровня представления: калькулятор добавляет в неё
запись после каждого успешного вычисления. Хранятся только последние
`limit` записей (по умолчанию 10), старые вытесняются.
"""

import json
from collections import deque
from typing import Any, Deque, Dict, Final, Iterator, List, Optional

from pydantic import BaseModel, Field

from src.calculator.operators import Operator
from src.core.contracts import validate_calculation_history
from src.core.domain.rational import Rational
from src.core.math.formatting import format_rational, to_decimal

# Сколько записей хранить по умолчанию
HISTORY_LIMIT_DEFAULT: Final[int] = 10


class CalculationRecord(BaseModel):
    """Одно завершённое вычисление.

    JSON-представление (model_dump(mode="json")) соответствует
    контракту calculation_record.json.
    """

    left: Rational = Field(..., description="Левый операнд")
    operator: Operator = Field(..., description="Оператор (+, -, ×, ÷)")
    right: Rational = Field(..., description="Правый операнд")
    result: Rational = Field(..., description="Результат в каноничной форме")
    decimal: float = Field(..., description="Десятичное значение результата")
    expression: str = Field(..., min_length=5, description="Например '1/2 + 1/3 = 5/6'")

    model_config = {"frozen": True}

    @classmethod
    def build(
        cls,
        left: Rational,
        operator: Operator,
        right: Rational,
        result: Rational,
    ) -> "CalculationRecord":
        expression = (
            f"{format_rational(left)} {operator.value} "
            f"{format_rational(right)} = {format_rational(result)}"
        )
        return cls(
            left=left,
            operator=operator,
            right=right,
            result=result,
            decimal=to_decimal(result),
            expression=expression,
        )


class CalculationHistory:
    """Ограниченный журнал вычислений (oldest → newest)."""

    def __init__(self, limit: int = HISTORY_LIMIT_DEFAULT):
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise ValueError(f"history limit must be a positive integer, got {limit!r}")
        self._limit = limit
        self._entries: Deque[CalculationRecord] = deque(maxlen=limit)

    @property
    def limit(self) -> int:
        return self._limit

    def append(self, record: CalculationRecord) -> None:
        self._entries.append(record)

    def entries(self) -> List[CalculationRecord]:
        """Записи от самой старой к самой новой."""
        return list(self._entries)

    def recent(self) -> List[CalculationRecord]:
        """Записи от самой новой к самой старой (порядок отображения)."""
        return list(reversed(self._entries))

    def latest(self) -> Optional[CalculationRecord]:
        return self._entries[-1] if self._entries else None

    def clear(self) -> None:
        self._entries.clear()

    def to_dicts(self) -> List[Dict[str, Any]]:
        """JSON-совместимые записи, проверенные по контракту.

        Raises:
            jsonschema.ValidationError: запись не соответствует контракту
        """
        records = [record.model_dump(mode="json") for record in self._entries]
        validate_calculation_history(records)
        return records

    def to_json(self) -> str:
        return json.dumps(self.to_dicts(), ensure_ascii=False)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CalculationRecord]:
        return iter(list(self._entries))
