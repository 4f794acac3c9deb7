"""Rules — упорядоченные правила классификации входов.

Правило: пара (предикат, категория отказа). Правила вычисляются строго по
порядку, побеждает первое сработавшее. Если ни одно не сработало, исходом
будет SUCCESS.

Набор правил является конфигурацией: классификатор принимает любой RuleSet.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from combin_gen.core.domain.inputs import FixtureInput
from combin_gen.core.domain.outcome import FailureCategory
from combin_gen.core.errors import ConfigurationError


Predicate = Callable[[FixtureInput], bool]


@dataclass(frozen=True)
class Rule:
    """Правило: при выполнении predicate ожидается отказ outcome."""

    name: str
    predicate: Predicate
    outcome: FailureCategory

    # Человекочитаемое условие для диагностики
    description: str = ""

    def matches(self, test_input: FixtureInput) -> bool:
        return bool(self.predicate(test_input))


@dataclass(frozen=True)
class RuleSet:
    """Упорядоченный неизменяемый набор правил.

    Порядок правил значим: правила не взаимоисключающие, и при нескольких
    выполненных условиях исход определяет первое.
    """

    name: str
    rules: tuple[Rule, ...]

    def __post_init__(self):
        names = [rule.name for rule in self.rules]
        if len(set(names)) != len(names):
            raise ConfigurationError(f"Rule set {self.name!r} has duplicate rule names: {names}")

    def first_match(self, test_input: FixtureInput) -> Optional[Rule]:
        """Первое сработавшее правило или None."""
        for rule in self.rules:
            if rule.matches(test_input):
                return rule
        return None

    def reachable_categories(self) -> frozenset[FailureCategory]:
        """Категории отказа, достижимые этим набором правил."""
        return frozenset(rule.outcome for rule in self.rules)

    def __len__(self) -> int:
        return len(self.rules)
