"""Classifier — классификация входов по упорядоченным наборам правил.

- Rule / RuleSet: правила и их порядок
- CaseClassifier: первое сработавшее правило или SUCCESS
- targets: наборы правил конкретных функций контракта (_releasePT)
"""

from .classifier import CaseClassifier, ClassificationResult
from .rules import Rule, RuleSet
from .targets import (
    RELEASE_PT,
    RELEASE_PT_RULES,
    TARGETS,
    FixtureTarget,
    get_target,
)

__all__ = [
    "CaseClassifier",
    "ClassificationResult",
    "Rule",
    "RuleSet",
    "RELEASE_PT",
    "RELEASE_PT_RULES",
    "TARGETS",
    "FixtureTarget",
    "get_target",
]
