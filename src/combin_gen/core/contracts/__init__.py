"""
Contract Validation Module

Модуль для валидации JSON документов фикстур.
"""

from .validators import (
    ContractValidator,
    ReleasePTCasesValidator,
    SchemaLoader,
    validate_release_pt_cases,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ReleasePTCasesValidator",
    # Functions
    "validate_release_pt_cases",
]
