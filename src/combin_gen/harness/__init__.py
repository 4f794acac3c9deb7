"""Harness — всё вне ядра: кодирование исходов, конфигурация, файлы фикстур."""

from .config import GeneratorConfig, apply_env_overrides, configure_logging, load_config_file
from .encoding import (
    EMPTY_REVERT_DATA,
    PANIC_CODES,
    PANIC_SELECTOR,
    decode_panic_hex,
    encode_outcome,
    encode_panic,
    encode_panic_hex,
)
from .fixtures import case_to_dict, cases_to_document, render_document, write_fixture
from .runner import GenerationResult, generate

__all__ = [
    "GeneratorConfig",
    "apply_env_overrides",
    "configure_logging",
    "load_config_file",
    "EMPTY_REVERT_DATA",
    "PANIC_CODES",
    "PANIC_SELECTOR",
    "decode_panic_hex",
    "encode_outcome",
    "encode_panic",
    "encode_panic_hex",
    "case_to_dict",
    "cases_to_document",
    "render_document",
    "write_fixture",
    "GenerationResult",
    "generate",
]
