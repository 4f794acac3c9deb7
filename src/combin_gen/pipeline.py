"""Pipeline — генерация и классификация полного набора тестовых случаев.

Generator → кортежи → from_tuple → CaseClassifier → ClassifiedCase.
Либо возвращается полный список, либо исключение; частичных результатов нет.
"""

import logging
from collections import Counter
from typing import Final, Iterable

from combin_gen.classifier.classifier import CaseClassifier
from combin_gen.classifier.rules import RuleSet
from combin_gen.core.domain.inputs import FixtureInput
from combin_gen.core.domain.outcome import SUCCESS, ClassifiedCase, FailureCategory
from combin_gen.core.errors import ConfigurationError
from combin_gen.generator.combinations import combinations

logger = logging.getLogger(__name__)

INCLUDE_ALL: Final[str] = "all"
INCLUDE_FAILURES: Final[str] = "failures"
INCLUDE_SUCCESSES: Final[str] = "successes"

INCLUDE_MODES: Final[tuple[str, ...]] = (INCLUDE_ALL, INCLUDE_FAILURES, INCLUDE_SUCCESSES)


def build_cases(
    k: int,
    values: Iterable[int],
    rule_set: RuleSet,
    input_model: type[FixtureInput],
) -> list[ClassifiedCase]:
    """Полная матрица классифицированных случаев.

    Args:
        k: арность; должна совпадать с числом полей input_model
        values: упорядоченный набор граничных значений
        rule_set: упорядоченный набор правил
        input_model: модель именованного входа

    Returns:
        Список ClassifiedCase в порядке генерации

    Raises:
        ConfigurationError: при некорректной арности или наборе значений
    """
    if k != input_model.arity():
        raise ConfigurationError(
            f"Arity {k} does not match {input_model.__name__} field count {input_model.arity()}"
        )

    classifier = CaseClassifier(rule_set)
    cases = [classifier.classify_case(input_model.from_tuple(t)) for t in combinations(k, values)]

    logger.debug(
        "Classified %d cases with rule set %r (%d failures)",
        len(cases),
        rule_set.name,
        sum(1 for c in cases if c.is_failure),
    )
    return cases


def select_cases(cases: list[ClassifiedCase], include: str = INCLUDE_ALL) -> list[ClassifiedCase]:
    """Отбор случаев по исходу с сохранением порядка.

    Raises:
        ConfigurationError: если режим отбора неизвестен
    """
    if include == INCLUDE_ALL:
        return list(cases)
    if include == INCLUDE_FAILURES:
        return [c for c in cases if c.is_failure]
    if include == INCLUDE_SUCCESSES:
        return [c for c in cases if not c.is_failure]
    raise ConfigurationError(f"Unknown include mode {include!r}, expected one of {INCLUDE_MODES}")


def summarize(cases: Iterable[ClassifiedCase]) -> dict[str, int]:
    """Число случаев по исходам.

    Ключи в фиксированном порядке: SUCCESS, затем категории отказа в порядке
    перечисления. Нулевые категории опускаются.
    """
    counts = Counter(c.outcome for c in cases)
    summary: dict[str, int] = {}
    for outcome in (SUCCESS, *FailureCategory):
        if counts[outcome]:
            summary[outcome.value] = counts[outcome]
    return summary
