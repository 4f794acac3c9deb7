"""Targets — наборы правил для конкретных функций контракта.

_releasePT (release position tokens), порядок проверок:
1. underlying == 0                            → DIVISION
2. interest != 0 и shares_per_expiry == 0     → ARITHMETIC
3. total_supply == 0                          → DIVISION
4. user_balance > total_supply                → ARITHMETIC
5. иначе                                      → SUCCESS

Правила 1 и 3 дают одну категорию, но охраняют разные поля; при
underlying == 0 и total_supply == 0 срабатывает правило 1.
"""

from dataclasses import dataclass
from typing import Final

from combin_gen.classifier.rules import Rule, RuleSet
from combin_gen.core.domain.inputs import FixtureInput, ReleasePTInput
from combin_gen.core.domain.outcome import FailureCategory
from combin_gen.core.errors import ConfigurationError


# =============================================================================
# _releasePT
# =============================================================================


def _underlying_zero(i: ReleasePTInput) -> bool:
    # Деление на стоимость базового актива
    return i.underlying == 0


def _interest_without_shares(i: ReleasePTInput) -> bool:
    # Процент нельзя списать с экспирации без shares
    return i.interest != 0 and i.shares_per_expiry == 0


def _total_supply_zero(i: ReleasePTInput) -> bool:
    return i.total_supply == 0


def _balance_exceeds_supply(i: ReleasePTInput) -> bool:
    return i.user_balance > i.total_supply


RELEASE_PT_RULES: Final[RuleSet] = RuleSet(
    name="release_pt",
    rules=(
        Rule(
            name="underlying_zero",
            predicate=_underlying_zero,
            outcome=FailureCategory.DIVISION,
            description="underlying == 0",
        ),
        Rule(
            name="interest_without_shares",
            predicate=_interest_without_shares,
            outcome=FailureCategory.ARITHMETIC,
            description="interest != 0 and shares_per_expiry == 0",
        ),
        Rule(
            name="total_supply_zero",
            predicate=_total_supply_zero,
            outcome=FailureCategory.DIVISION,
            description="total_supply == 0",
        ),
        Rule(
            name="balance_exceeds_supply",
            predicate=_balance_exceeds_supply,
            outcome=FailureCategory.ARITHMETIC,
            description="user_balance > total_supply",
        ),
    ),
)


# =============================================================================
# REGISTRY
# =============================================================================


@dataclass(frozen=True)
class FixtureTarget:
    """Функция контракта, для которой генерируются фикстуры."""

    name: str
    input_model: type[FixtureInput]
    rule_set: RuleSet

    # Путь к файлу фикстур по умолчанию
    default_output: str

    # JSON Schema документа фикстур (core/contracts/schema)
    schema_name: str


RELEASE_PT: Final[FixtureTarget] = FixtureTarget(
    name="release_pt",
    input_model=ReleasePTInput,
    rule_set=RELEASE_PT_RULES,
    default_output="../testdata/_releasePT.json",
    schema_name="release_pt_cases",
)

TARGETS: Final[dict[str, FixtureTarget]] = {
    RELEASE_PT.name: RELEASE_PT,
}


def get_target(name: str) -> FixtureTarget:
    """
    Цель генерации по имени.

    Raises:
        ConfigurationError: Если цель не зарегистрирована
    """
    try:
        return TARGETS[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown target {name!r}, expected one of {sorted(TARGETS)}"
        ) from None
