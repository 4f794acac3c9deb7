"""
Fixtures — Сериализация и запись документа фикстур

Документ: JSON массив, один элемент на случай:

    {"expected_error": "0x4e487b71...", "input": {"amount": ..., ...}}

Поля input идут в порядке FIELD_ORDER модели входа. Успешные случаи
содержат пустые revert data ("0x").
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from combin_gen.core.contracts import ContractValidator
from combin_gen.core.domain.outcome import ClassifiedCase
from combin_gen.harness.encoding import encode_outcome

logger = logging.getLogger(__name__)


# =============================================================================
# СЕРИАЛИЗАЦИЯ
# =============================================================================


def case_to_dict(case: ClassifiedCase) -> Dict[str, Any]:
    """Элемент документа для одного классифицированного случая."""
    return {
        "expected_error": encode_outcome(case.outcome),
        "input": {name: getattr(case.input, name) for name in case.input.FIELD_ORDER},
    }


def cases_to_document(cases: List[ClassifiedCase]) -> List[Dict[str, Any]]:
    """Документ фикстур с сохранением порядка случаев."""
    return [case_to_dict(case) for case in cases]


def render_document(document: List[Dict[str, Any]]) -> str:
    """JSON текст документа (отступ 2 пробела)."""
    return json.dumps(document, indent=2)


# =============================================================================
# ЗАПИСЬ
# =============================================================================


def write_fixture(
    document: List[Dict[str, Any]],
    output_path: str | Path,
    validator: ContractValidator | None = None,
) -> Path:
    """
    Валидация (опционально) и запись документа фикстур.

    Родительские каталоги создаются при необходимости. При ошибке валидации
    файл не создаётся.

    Args:
        document: Сериализованные случаи
        output_path: Путь к файлу
        validator: Валидатор контракта; None — без проверки

    Returns:
        Абсолютный путь записанного файла

    Raises:
        ValidationError: Если документ не соответствует схеме
        OSError: Если каталог или файл не могут быть записаны
    """
    if validator is not None:
        validator.validate(document)

    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_document(document), encoding="utf-8")

    logger.info("Wrote %d cases to %s", len(document), path)
    return path.resolve()
