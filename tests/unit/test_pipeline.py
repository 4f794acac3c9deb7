"""
Тесты pipeline: генерация → классификация → отбор → сводка

Проверяет:
1. Полную матрицу 64 / 729 случаев
2. Распределение исходов для BINARY и TERNARY
3. Порядок случаев совпадает с порядком генерации
4. Отбор failures / successes
5. Отказ при несовпадении арности
"""

import pytest

from combin_gen.classifier import RELEASE_PT_RULES
from combin_gen.core.domain import BINARY, ONE_UNIT, SUCCESS, TERNARY, FailureCategory, ReleasePTInput
from combin_gen.core.errors import ConfigurationError
from combin_gen.generator import combinations
from combin_gen.pipeline import build_cases, select_cases, summarize

U = ONE_UNIT


@pytest.fixture(scope="module")
def binary_cases():
    return build_cases(6, BINARY, RELEASE_PT_RULES, ReleasePTInput)


@pytest.fixture(scope="module")
def ternary_cases():
    return build_cases(6, TERNARY, RELEASE_PT_RULES, ReleasePTInput)


class TestBuildCases:
    """Тесты полной матрицы"""

    def test_binary_size(self, binary_cases) -> None:
        assert len(binary_cases) == 64

    def test_ternary_size(self, ternary_cases) -> None:
        assert len(ternary_cases) == 729

    def test_order_matches_generation(self, binary_cases) -> None:
        assert [c.input.as_tuple() for c in binary_cases] == combinations(6, BINARY)

    def test_first_case_is_division(self, binary_cases) -> None:
        """(0,0,0,0,0,0) → underlying == 0"""
        assert binary_cases[0].outcome == FailureCategory.DIVISION
        assert binary_cases[0].matched_rule == "underlying_zero"

    def test_last_case_is_success(self, binary_cases) -> None:
        """(1e18, ..., 1e18) → SUCCESS"""
        assert binary_cases[-1].outcome == SUCCESS

    def test_binary_distribution(self, binary_cases) -> None:
        assert summarize(binary_cases) == {
            "SUCCESS": 12,
            "ARITHMETIC": 8,
            "DIVISION": 44,
        }

    def test_ternary_distribution(self, ternary_cases) -> None:
        assert summarize(ternary_cases) == {
            "SUCCESS": 210,
            "ARITHMETIC": 150,
            "DIVISION": 369,
        }

    def test_deterministic(self) -> None:
        first = build_cases(6, BINARY, RELEASE_PT_RULES, ReleasePTInput)
        second = build_cases(6, BINARY, RELEASE_PT_RULES, ReleasePTInput)
        assert first == second

    @pytest.mark.parametrize("k", [1, 5, 7])
    def test_arity_mismatch(self, k: int) -> None:
        """Арность должна совпадать с числом полей входа"""
        with pytest.raises(ConfigurationError, match="does not match"):
            build_cases(k, BINARY, RELEASE_PT_RULES, ReleasePTInput)

    def test_empty_boundary_set(self) -> None:
        with pytest.raises(ConfigurationError):
            build_cases(6, [], RELEASE_PT_RULES, ReleasePTInput)


class TestSelectCases:
    """Тесты отбора случаев"""

    def test_all(self, binary_cases) -> None:
        assert select_cases(binary_cases) == binary_cases

    def test_failures_only(self, binary_cases) -> None:
        failures = select_cases(binary_cases, "failures")
        assert len(failures) == 52
        assert all(c.is_failure for c in failures)

    def test_successes_only(self, binary_cases) -> None:
        successes = select_cases(binary_cases, "successes")
        assert len(successes) == 12
        assert all(c.outcome == SUCCESS for c in successes)

    def test_selection_preserves_order(self, binary_cases) -> None:
        failures = select_cases(binary_cases, "failures")
        positions = [binary_cases.index(c) for c in failures]
        assert positions == sorted(positions)

    def test_unknown_mode(self, binary_cases) -> None:
        with pytest.raises(ConfigurationError, match="include mode"):
            select_cases(binary_cases, "some")


class TestSummarize:
    """Тесты сводки"""

    def test_empty(self) -> None:
        assert summarize([]) == {}

    def test_key_order(self, binary_cases) -> None:
        assert list(summarize(binary_cases)) == ["SUCCESS", "ARITHMETIC", "DIVISION"]
