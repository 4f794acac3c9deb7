"""Комбинаторный генератор — декартово произведение граничных значений.

Строит все кортежи длины k из упорядоченного набора граничных значений:
- k = 1: по одному кортежу на значение, в порядке набора
- k > 1: для каждого кортежа длины k-1 (внешний цикл) и каждого значения
  (внутренний цикл) дописывается значение

Порядок детерминирован: позиция 0 меняется медленнее всех, последняя
быстрее всех. Размер результата: len(values) ** k.
"""

import logging
from typing import Iterable

from combin_gen.core.domain.boundary import boundary_set
from combin_gen.core.errors import ConfigurationError

logger = logging.getLogger(__name__)


def combinations(k: int, values: Iterable[int]) -> list[tuple[int, ...]]:
    """Все кортежи длины k над набором граничных значений.

    Args:
        k: арность (число полей), k >= 1
        values: упорядоченный набор граничных значений

    Returns:
        Список кортежей в лексикографическом порядке набора

    Raises:
        ConfigurationError: если k < 1 или набор некорректен
    """
    if isinstance(k, bool) or not isinstance(k, int) or k < 1:
        raise ConfigurationError(f"Arity must be an integer >= 1, got {k!r}")
    values = boundary_set(values)

    # acc: произведение для первых i позиций
    acc: list[tuple[int, ...]] = [(v,) for v in values]
    for _ in range(k - 1):
        acc = [prefix + (v,) for prefix in acc for v in values]

    logger.debug("Generated %d combinations (k=%d, n=%d)", len(acc), k, len(values))
    return acc
