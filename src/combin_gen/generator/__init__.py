"""Generator — комбинаторная генерация входных кортежей."""

from .combinations import combinations

__all__ = [
    "combinations",
]
