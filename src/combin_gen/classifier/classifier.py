"""Case Classifier — определение ожидаемого исхода для входа.

Порядок проверок задаётся RuleSet:
1. Правила проверяются по порядку, без перестановок и параллелизма
2. Первое сработавшее правило определяет категорию отказа
3. Если не сработало ни одно, SUCCESS

Чистая функция (вход, набор правил) → исход, без побочных эффектов.
"""

from dataclasses import dataclass
from typing import Optional

from combin_gen.classifier.rules import RuleSet
from combin_gen.core.domain.inputs import FixtureInput
from combin_gen.core.domain.outcome import SUCCESS, ClassifiedCase, Outcome


@dataclass(frozen=True)
class ClassificationResult:
    """Результат классификации одного входа."""

    failure_expected: bool
    outcome: Outcome

    # Имя сработавшего правила ("" если отказ не ожидается)
    matched_rule: str

    # Детали
    details: str


class CaseClassifier:
    """Классификатор входов по упорядоченному набору правил."""

    def __init__(self, rule_set: RuleSet):
        """
        Args:
            rule_set: упорядоченный набор правил целевой функции
        """
        self.rule_set = rule_set

    def classify(self, test_input: FixtureInput) -> ClassificationResult:
        """Классификация входа.

        Args:
            test_input: именованный вход тестируемой функции

        Returns:
            ClassificationResult с исходом первого сработавшего правила
        """
        rule = self.rule_set.first_match(test_input)

        if rule is not None:
            condition = rule.description or rule.name
            return ClassificationResult(
                failure_expected=True,
                outcome=rule.outcome,
                matched_rule=rule.name,
                details=f"{rule.outcome.value}: {condition}",
            )

        return ClassificationResult(
            failure_expected=False,
            outcome=SUCCESS,
            matched_rule="",
            details=f"PASS: no rule in {self.rule_set.name!r} matched",
        )

    def classify_case(self, test_input: FixtureInput) -> ClassifiedCase:
        """Классификация входа с упаковкой в ClassifiedCase."""
        result = self.classify(test_input)
        matched: Optional[str] = result.matched_rule or None
        return ClassifiedCase(input=test_input, outcome=result.outcome, matched_rule=matched)
