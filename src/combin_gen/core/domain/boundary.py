"""
Boundary values — Граничные значения для комбинаторных фикстур

Набор репрезентативных значений (ноль, одна единица, две единицы в масштабе
1e18), которыми проверяется поведение числового поля контракта на краях.
Значения: беззнаковые 128-битные целые (uint128 на стороне контракта).

Пресеты:
- BINARY  = (0, 1e18)
- TERNARY = (0, 1e18, 2e18)
"""

from typing import Final, Iterable

from combin_gen.core.errors import ConfigurationError


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Масштаб фиксированной точки контракта (18 знаков)
ONE_UNIT: Final[int] = 10**18

ZERO: Final[int] = 0
TWO_UNITS: Final[int] = 2 * ONE_UNIT

# Верхняя граница uint128 (исключительно)
U128_LIMIT: Final[int] = 2**128


# =============================================================================
# BOUNDARY VALUE SET
# =============================================================================


def validate_boundary_value(value: int) -> int:
    """
    Проверка, что значение представимо как uint128.

    Args:
        value: Граничное значение

    Returns:
        То же значение

    Raises:
        ConfigurationError: Если значение не целое, отрицательное или >= 2**128
    """
    # bool не допускается, хотя является подклассом int
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"Boundary value must be an integer, got {value!r}")
    if value < 0 or value >= U128_LIMIT:
        raise ConfigurationError(f"Boundary value {value} is outside the uint128 range")
    return value


def boundary_set(values: Iterable[int]) -> tuple[int, ...]:
    """
    Построение упорядоченного набора граничных значений.

    Порядок значений сохраняется: он определяет порядок генерации комбинаций.

    Args:
        values: Граничные значения в нужном порядке

    Returns:
        Неизменяемый кортеж значений

    Raises:
        ConfigurationError: Если набор пуст, содержит дубликаты или
            значения вне диапазона uint128
    """
    result = tuple(validate_boundary_value(v) for v in values)
    if not result:
        raise ConfigurationError("Boundary value set must not be empty")
    if len(set(result)) != len(result):
        raise ConfigurationError(f"Boundary value set contains duplicates: {result}")
    return result


BINARY: Final[tuple[int, ...]] = boundary_set((ZERO, ONE_UNIT))
TERNARY: Final[tuple[int, ...]] = boundary_set((ZERO, ONE_UNIT, TWO_UNITS))

BOUNDARY_SETS: Final[dict[str, tuple[int, ...]]] = {
    "binary": BINARY,
    "ternary": TERNARY,
}


def get_boundary_set(name: str) -> tuple[int, ...]:
    """
    Пресет набора граничных значений по имени.

    Raises:
        ConfigurationError: Если пресет неизвестен
    """
    try:
        return BOUNDARY_SETS[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown boundary set {name!r}, expected one of {sorted(BOUNDARY_SETS)}"
        ) from None
