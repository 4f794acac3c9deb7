"""
Тесты доменных моделей

Проверяет:
- Граничные значения и пресеты наборов
- ReleasePTInput: явный конструктор from_tuple, порядок полей, immutability
- FixtureInput: согласованность FIELD_ORDER с полями модели
- ClassifiedCase и категории отказа
"""

from typing import ClassVar

from pydantic import ValidationError
import pytest

from combin_gen.core.domain import (
    BINARY,
    BOUNDARY_SETS,
    ONE_UNIT,
    RELEASE_PT_FIELDS,
    SUCCESS,
    TERNARY,
    TWO_UNITS,
    U128_LIMIT,
    ClassifiedCase,
    FailureCategory,
    FixtureInput,
    ReleasePTInput,
    boundary_set,
    get_boundary_set,
    validate_boundary_value,
)
from combin_gen.core.errors import ConfigurationError

U = ONE_UNIT


# =============================================================================
# BOUNDARY VALUES
# =============================================================================


class TestBoundaryValues:
    """Тесты граничных значений"""

    def test_scale_constants(self) -> None:
        assert ONE_UNIT == 10**18
        assert TWO_UNITS == 2 * 10**18

    def test_presets(self) -> None:
        assert BINARY == (0, U)
        assert TERNARY == (0, U, 2 * U)
        assert set(BOUNDARY_SETS) == {"binary", "ternary"}

    def test_get_boundary_set(self) -> None:
        assert get_boundary_set("ternary") == TERNARY

    def test_get_unknown_boundary_set(self) -> None:
        with pytest.raises(ConfigurationError, match="Unknown boundary set"):
            get_boundary_set("quaternary")

    def test_boundary_set_preserves_order(self) -> None:
        assert boundary_set([U, 0]) == (U, 0)

    def test_u128_limits(self) -> None:
        assert validate_boundary_value(0) == 0
        assert validate_boundary_value(U128_LIMIT - 1) == U128_LIMIT - 1
        with pytest.raises(ConfigurationError):
            validate_boundary_value(U128_LIMIT)
        with pytest.raises(ConfigurationError):
            validate_boundary_value(-1)

    @pytest.mark.parametrize("value", [True, 1.0, "1", None])
    def test_non_integer_rejected(self, value) -> None:
        with pytest.raises(ConfigurationError, match="integer"):
            validate_boundary_value(value)


# =============================================================================
# RELEASE PT INPUT
# =============================================================================


class TestReleasePTInput:
    """Тесты именованного входа _releasePT"""

    def test_field_order(self) -> None:
        assert ReleasePTInput.FIELD_ORDER == (
            "amount",
            "interest",
            "shares_per_expiry",
            "total_supply",
            "underlying",
            "user_balance",
        )
        assert RELEASE_PT_FIELDS == ReleasePTInput.FIELD_ORDER
        assert ReleasePTInput.arity() == 6

    def test_from_tuple_positional_assignment(self) -> None:
        """Поля заполняются строго по позиции"""
        i = ReleasePTInput.from_tuple((1, 2, 3, 4, 5, 6))
        assert i.amount == 1
        assert i.interest == 2
        assert i.shares_per_expiry == 3
        assert i.total_supply == 4
        assert i.underlying == 5
        assert i.user_balance == 6
        assert i.as_tuple() == (1, 2, 3, 4, 5, 6)

    @pytest.mark.parametrize("values", [(), (0,) * 5, (0,) * 7])
    def test_from_tuple_length_mismatch(self, values) -> None:
        """Неверная длина кортежа — отказ, без обрезки и дополнения"""
        with pytest.raises(ConfigurationError, match="expects 6 values"):
            ReleasePTInput.from_tuple(values)

    def test_from_tuple_negative_value(self) -> None:
        with pytest.raises(ConfigurationError, match="Invalid ReleasePTInput"):
            ReleasePTInput.from_tuple((0, 0, 0, 0, 0, -1))

    def test_from_tuple_above_u128(self) -> None:
        with pytest.raises(ConfigurationError):
            ReleasePTInput.from_tuple((U128_LIMIT, 0, 0, 0, 0, 0))

    def test_immutable(self) -> None:
        i = ReleasePTInput.from_tuple((U,) * 6)
        with pytest.raises(ValidationError):
            i.amount = 0

    def test_equal_inputs_hash_equal(self) -> None:
        a = ReleasePTInput.from_tuple((0, U, 0, U, 0, U))
        b = ReleasePTInput.from_tuple((0, U, 0, U, 0, U))
        assert a == b
        assert hash(a) == hash(b)


class TestFixtureInputFieldOrder:
    """FIELD_ORDER обязан совпадать с полями модели"""

    def test_mismatched_field_order_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="does not match"):

            class _Swapped(FixtureInput):
                FIELD_ORDER: ClassVar[tuple[str, ...]] = ("b", "a")

                a: int
                b: int

    def test_matching_field_order_accepted(self) -> None:
        class _Pair(FixtureInput):
            FIELD_ORDER: ClassVar[tuple[str, ...]] = ("a", "b")

            a: int
            b: int

        assert _Pair.from_tuple((1, 2)).b == 2


# =============================================================================
# OUTCOMES
# =============================================================================


class TestOutcomes:
    """Тесты категорий отказа и ClassifiedCase"""

    def test_failure_catalog(self) -> None:
        assert len(FailureCategory) == 9
        assert FailureCategory.DIVISION != FailureCategory.ARITHMETIC

    def test_success_distinct_from_failures(self) -> None:
        assert all(SUCCESS != category for category in FailureCategory)

    def test_classified_case_is_failure(self) -> None:
        i = ReleasePTInput.from_tuple((0,) * 6)
        failure = ClassifiedCase(input=i, outcome=FailureCategory.DIVISION, matched_rule="underlying_zero")
        success = ClassifiedCase(input=i, outcome=SUCCESS)
        assert failure.is_failure is True
        assert success.is_failure is False
        assert success.matched_rule is None
