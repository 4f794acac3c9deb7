"""
Outcome — Ожидаемый результат тестового случая

Закрытое перечисление категорий отказа Solidity (Panic) и маркер успеха.
Категории являются непрозрачными идентификаторами: кодирование в revert data
(Panic(uint256) + код) выполняется только на уровне harness.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final, Optional, Union

from combin_gen.core.domain.inputs import FixtureInput


# =============================================================================
# ENUMS
# =============================================================================


class FailureCategory(str, Enum):
    """Категория ожидаемого отказа (Solidity Panic)."""

    ASSERTION = "ASSERTION"
    ARITHMETIC = "ARITHMETIC"
    DIVISION = "DIVISION"
    ENUM_CONVERSION = "ENUM_CONVERSION"
    ENCODE_STORAGE = "ENCODE_STORAGE"
    POP = "POP"
    INDEX_OUT_OF_BOUNDS = "INDEX_OUT_OF_BOUNDS"
    MEMORY_OVERFLOW = "MEMORY_OVERFLOW"
    ZERO_INITIALIZED_VARIABLE = "ZERO_INITIALIZED_VARIABLE"


class Success(str, Enum):
    """Маркер успешного исхода (отказ не ожидается)."""

    SUCCESS = "SUCCESS"


SUCCESS: Final[Success] = Success.SUCCESS

Outcome = Union[FailureCategory, Success]


# =============================================================================
# CLASSIFIED CASE
# =============================================================================


@dataclass(frozen=True)
class ClassifiedCase:
    """Вход с ожидаемым исходом."""

    input: FixtureInput
    outcome: Outcome

    # Имя сработавшего правила (None для успеха)
    matched_rule: Optional[str] = None

    @property
    def is_failure(self) -> bool:
        return isinstance(self.outcome, FailureCategory)
