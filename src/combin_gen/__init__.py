"""combin-gen — комбинаторные фикстуры с ожидаемыми исходами.

Генерирует матрицу граничных входов для функции контракта и для каждого
входа определяет ожидаемый исход (категорию Panic или успех) по
упорядоченному набору правил.
"""

from combin_gen.classifier import RELEASE_PT_RULES, CaseClassifier, Rule, RuleSet
from combin_gen.core.domain import (
    BINARY,
    SUCCESS,
    TERNARY,
    ClassifiedCase,
    FailureCategory,
    ReleasePTInput,
)
from combin_gen.core.errors import ConfigurationError
from combin_gen.generator import combinations
from combin_gen.pipeline import build_cases, select_cases, summarize

__version__ = "0.1.0"

__all__ = [
    "BINARY",
    "TERNARY",
    "SUCCESS",
    "ClassifiedCase",
    "FailureCategory",
    "ReleasePTInput",
    "ConfigurationError",
    "combinations",
    "CaseClassifier",
    "Rule",
    "RuleSet",
    "RELEASE_PT_RULES",
    "build_cases",
    "select_cases",
    "summarize",
]
