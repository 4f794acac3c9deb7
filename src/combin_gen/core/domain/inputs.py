"""
Inputs — Именованные входы тестируемых функций контракта

Кортеж от генератора превращается в именованную запись только через явный
конструктор from_tuple. Порядок полей объявлен один раз (FIELD_ORDER) и
используется и для построения записи, и для сериализации фикстуры.

ReleasePTInput: входы _releasePT (release position tokens):
    amount, interest, shares_per_expiry, total_supply, underlying, user_balance
"""

from typing import ClassVar, Final, Sequence

from pydantic import BaseModel, Field, ValidationError

from combin_gen.core.domain.boundary import U128_LIMIT
from combin_gen.core.errors import ConfigurationError


# =============================================================================
# BASE MODEL
# =============================================================================


class FixtureInput(BaseModel):
    """
    Базовая модель входа фикстуры.

    Подклассы обязаны объявить FIELD_ORDER, совпадающий с порядком полей
    модели. Несовпадение обнаруживается при определении класса, а не при
    классификации.
    """

    FIELD_ORDER: ClassVar[tuple[str, ...]] = ()

    model_config = {"frozen": True}

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        declared = tuple(cls.model_fields)
        if cls.FIELD_ORDER != declared:
            raise ConfigurationError(
                f"{cls.__name__}.FIELD_ORDER {cls.FIELD_ORDER} does not match "
                f"model fields {declared}"
            )

    @classmethod
    def arity(cls) -> int:
        """Количество полей (длина входного кортежа)."""
        return len(cls.FIELD_ORDER)

    @classmethod
    def from_tuple(cls, values: Sequence[int]) -> "FixtureInput":
        """
        Построение записи из кортежа генератора.

        Args:
            values: Значения в порядке FIELD_ORDER

        Returns:
            Неизменяемая запись входа

        Raises:
            ConfigurationError: Если длина кортежа не равна числу полей или
                значение не проходит валидацию модели
        """
        if len(values) != cls.arity():
            raise ConfigurationError(
                f"{cls.__name__} expects {cls.arity()} values "
                f"{cls.FIELD_ORDER}, got {len(values)}"
            )
        try:
            return cls(**dict(zip(cls.FIELD_ORDER, values)))
        except ValidationError as e:
            raise ConfigurationError(f"Invalid {cls.__name__} values {tuple(values)}: {e}") from e

    def as_tuple(self) -> tuple[int, ...]:
        return tuple(getattr(self, name) for name in self.FIELD_ORDER)


# =============================================================================
# _releasePT
# =============================================================================

RELEASE_PT_FIELDS: Final[tuple[str, ...]] = (
    "amount",
    "interest",
    "shares_per_expiry",
    "total_supply",
    "underlying",
    "user_balance",
)


class ReleasePTInput(FixtureInput):
    """
    Входы функции _releasePT.

    Все значения uint128 в масштабе 1e18.
    """

    FIELD_ORDER: ClassVar[tuple[str, ...]] = RELEASE_PT_FIELDS

    amount: int = Field(..., ge=0, lt=U128_LIMIT, description="Количество PT к погашению")
    interest: int = Field(..., ge=0, lt=U128_LIMIT, description="Накопленный процент")
    shares_per_expiry: int = Field(
        ..., ge=0, lt=U128_LIMIT, description="Shares, выделенные на экспирацию"
    )
    total_supply: int = Field(..., ge=0, lt=U128_LIMIT, description="Общее предложение PT")
    underlying: int = Field(..., ge=0, lt=U128_LIMIT, description="Стоимость базового актива")
    user_balance: int = Field(..., ge=0, lt=U128_LIMIT, description="Баланс PT пользователя")
