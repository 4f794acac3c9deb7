"""Ошибки ядра генератора.

ConfigurationError является единственной фатальной ошибкой ядра: некорректная
арность, пустой/дублирующийся набор граничных значений, кортеж неверной
длины при построении входа. Частичные результаты не допускаются.
"""


class ConfigurationError(ValueError):
    """Некорректная конфигурация генерации или классификации."""
