"""
Config — Конфигурация генерации, переменные окружения и логирование

Приоритет источников (от низшего к высшему):
1. Значения по умолчанию GeneratorConfig
2. YAML файл (--config)
3. Переменные окружения COMBIN_GEN_* (только для полей со значением по умолчанию)
4. Явные флаги CLI
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Final

from pydantic import BaseModel, ConfigDict, field_validator
import yaml

from combin_gen.classifier.targets import TARGETS
from combin_gen.core.domain.boundary import BOUNDARY_SETS
from combin_gen.pipeline import INCLUDE_MODES


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

LOG_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)-8s %(name)s — %(message)s"

# Переменная окружения → поле GeneratorConfig
_ENV_FIELD_MAP: Final[Dict[str, str]] = {
    "COMBIN_GEN_OUTPUT": "output_path",
    "COMBIN_GEN_INCLUDE": "include",
    "COMBIN_GEN_BOUNDARY_SET": "boundary_set",
    "COMBIN_GEN_LOG_LEVEL": "log_level",
}


# =============================================================================
# CONFIG
# =============================================================================


class GeneratorConfig(BaseModel):
    """
    Конфигурация генерации фикстур.

    Immutable модель (frozen=True); неизвестные поля запрещены.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Цель и матрица
    target: str = "release_pt"
    arity: int = 6
    boundary_set: str = "binary"

    # Отбор и вывод
    include: str = "all"
    output_path: str | None = None
    validate_output: bool = True

    # Логирование
    log_level: str = "INFO"
    log_file: str | None = None

    @field_validator("arity")
    @classmethod
    def validate_arity(cls, v: int) -> int:
        """Арность не меньше 1."""
        if v < 1:
            raise ValueError(f"arity must be >= 1, got {v}")
        return v

    @field_validator("target")
    @classmethod
    def validate_target(cls, v: str) -> str:
        """Цель должна быть зарегистрирована в TARGETS."""
        if v not in TARGETS:
            raise ValueError(f"unknown target {v!r}, expected one of {sorted(TARGETS)}")
        return v

    @field_validator("boundary_set")
    @classmethod
    def validate_boundary_set(cls, v: str) -> str:
        if v not in BOUNDARY_SETS:
            raise ValueError(
                f"unknown boundary set {v!r}, expected one of {sorted(BOUNDARY_SETS)}"
            )
        return v

    @field_validator("include")
    @classmethod
    def validate_include(cls, v: str) -> str:
        if v not in INCLUDE_MODES:
            raise ValueError(f"unknown include mode {v!r}, expected one of {list(INCLUDE_MODES)}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Уровень логирования из LOG_LEVELS (регистр не важен).

        Возвращается в верхнем регистре.
        """
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {v!r}, expected one of {list(LOG_LEVELS)}")
        return level

    def resolved_output_path(self) -> str:
        """Путь вывода; по умолчанию — путь цели."""
        if self.output_path is not None:
            return self.output_path
        return TARGETS[self.target].default_output


# =============================================================================
# YAML ФАЙЛ
# =============================================================================


def load_config_file(path: str | Path) -> Dict[str, Any]:
    """
    Загрузка YAML файла конфигурации.

    Args:
        path: Путь к файлу

    Returns:
        Содержимое файла как dict (пустой файл → {})

    Raises:
        FileNotFoundError: Если файл не найден
        ValueError: Если содержимое не является YAML mapping
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"config file not found: {path}")

    with open(file_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"config file must contain a YAML mapping, got {type(data).__name__}")
    return data


# =============================================================================
# ПЕРЕМЕННЫЕ ОКРУЖЕНИЯ
# =============================================================================


def apply_env_overrides(config: GeneratorConfig) -> GeneratorConfig:
    """
    Применение переменных окружения COMBIN_GEN_*.

    Переменная переопределяет поле только если его значение совпадает со
    значением по умолчанию; явно заданные значения сохраняются. Пустые
    переменные игнорируются.

    Args:
        config: Исходная конфигурация

    Returns:
        Новая конфигурация (или исходная, если переопределений нет)

    Raises:
        ValidationError: Если значение переменной не проходит валидацию
    """
    defaults = GeneratorConfig()
    overrides: Dict[str, Any] = {}

    for env_var, field_name in _ENV_FIELD_MAP.items():
        env_value = os.environ.get(env_var)
        if not env_value:
            continue
        if getattr(config, field_name) != getattr(defaults, field_name):
            continue
        overrides[field_name] = env_value

    if not overrides:
        return config

    # model_validate, а не model_copy: переопределения проходят валидаторы
    return GeneratorConfig.model_validate({**config.model_dump(), **overrides})


# =============================================================================
# ЛОГИРОВАНИЕ
# =============================================================================


def configure_logging(config: GeneratorConfig) -> None:
    """
    Настройка логгера combin_gen.

    Console handler и опциональный file handler. Идемпотентна: повторные
    вызовы не дублируют handlers.

    Args:
        config: Конфигурация с log_level и log_file
    """
    pkg_logger = logging.getLogger("combin_gen")
    pkg_logger.setLevel(getattr(logging, config.log_level))

    if not any(
        isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
        for h in pkg_logger.handlers
    ):
        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter(_LOG_FORMAT))
        pkg_logger.addHandler(console)

    if config.log_file is not None:
        has_file = any(
            isinstance(h, logging.FileHandler)
            and getattr(h, "baseFilename", None) == str(Path(config.log_file).resolve())
            for h in pkg_logger.handlers
        )
        if not has_file:
            file_handler = logging.FileHandler(config.log_file)
            file_handler.setFormatter(logging.Formatter(_LOG_FORMAT))
            pkg_logger.addHandler(file_handler)
