"""
Runner — Сквозная генерация фикстур

config → кортежи → классификация → отбор → валидированный JSON файл.
"""

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Dict

from combin_gen.classifier.targets import get_target
from combin_gen.core.contracts import ContractValidator
from combin_gen.core.domain.boundary import get_boundary_set
from combin_gen.harness.config import GeneratorConfig
from combin_gen.harness.fixtures import cases_to_document, write_fixture
from combin_gen.pipeline import build_cases, select_cases, summarize

logger = logging.getLogger(__name__)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class GenerationResult:
    """Результат одного запуска генерации."""

    output_path: Path
    total_cases: int
    written_cases: int
    summary: Dict[str, int]


# =============================================================================
# GENERATE
# =============================================================================


def generate(config: GeneratorConfig) -> GenerationResult:
    """
    Генерация, классификация, отбор и запись фикстур для config.target.

    Полный список случаев строится до записи; при любой ошибке файл
    не создаётся.

    Args:
        config: Конфигурация генерации

    Returns:
        GenerationResult с путём файла и счётчиками

    Raises:
        ConfigurationError: Если арность или набор значений некорректны
        ValidationError: Если документ не соответствует контракту
        OSError: Если файл не может быть записан
    """
    target = get_target(config.target)
    values = get_boundary_set(config.boundary_set)

    logger.info(
        "Generating %s fixtures: arity=%d, boundary_set=%s %s",
        target.name,
        config.arity,
        config.boundary_set,
        values,
    )

    cases = build_cases(config.arity, values, target.rule_set, target.input_model)
    selected = select_cases(cases, config.include)
    summary = summarize(selected)
    logger.info(
        "Selected %d of %d cases (%s): %s",
        len(selected),
        len(cases),
        config.include,
        summary,
    )

    validator = ContractValidator(target.schema_name) if config.validate_output else None
    path = write_fixture(cases_to_document(selected), config.resolved_output_path(), validator)

    return GenerationResult(
        output_path=path,
        total_cases=len(cases),
        written_cases=len(selected),
        summary=summary,
    )
