"""
CLI — Точка входа генерации фикстур

main() зарегистрирована в pyproject.toml как combin-gen. Аргументы командной
строки накладываются на YAML файл конфигурации и переменные окружения
COMBIN_GEN_*, затем управление передаётся generate().

Коды выхода:
    0 — фикстуры записаны
    1 — ошибка конфигурации, контракта или ввода-вывода
"""

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

from jsonschema import ValidationError as SchemaValidationError
from pydantic import ValidationError
import yaml

from combin_gen.classifier.targets import TARGETS
from combin_gen.core.domain.boundary import BOUNDARY_SETS
from combin_gen.core.errors import ConfigurationError
from combin_gen.harness.config import (
    LOG_LEVELS,
    GeneratorConfig,
    apply_env_overrides,
    configure_logging,
    load_config_file,
)
from combin_gen.harness.runner import generate
from combin_gen.pipeline import INCLUDE_MODES

logger = logging.getLogger(__name__)


# =============================================================================
# ARGUMENTS
# =============================================================================


def _build_parser() -> argparse.ArgumentParser:
    """Парсер аргументов CLI."""
    parser = argparse.ArgumentParser(
        prog="combin-gen",
        description="Generate combinatorial test fixtures with expected outcomes.",
    )
    parser.add_argument("--config", default=None, help="Path to a YAML config file.")
    parser.add_argument("--target", choices=sorted(TARGETS), default=None)
    parser.add_argument("--output", dest="output_path", default=None, help="Output JSON file.")
    parser.add_argument("--arity", type=int, default=None, help="Number of input fields.")
    parser.add_argument("--boundary-set", choices=sorted(BOUNDARY_SETS), default=None)
    parser.add_argument("--include", choices=list(INCLUDE_MODES), default=None)
    parser.add_argument(
        "--no-validate",
        dest="validate_output",
        action="store_false",
        default=None,
        help="Skip JSON Schema validation of the output document.",
    )
    parser.add_argument("--log-level", default=None, help=f"One of {', '.join(LOG_LEVELS)}.")
    parser.add_argument("--log-file", default=None)
    return parser


def build_config(args: argparse.Namespace) -> GeneratorConfig:
    """
    Слияние файла конфигурации, окружения и флагов CLI.

    Args:
        args: Разобранные аргументы

    Returns:
        Итоговая GeneratorConfig

    Raises:
        FileNotFoundError: Если --config указывает на отсутствующий файл
        ValueError: Если файл или значение некорректны
    """
    data: Dict[str, Any] = {}
    if args.config is not None:
        data = load_config_file(args.config)

    config = apply_env_overrides(GeneratorConfig(**data))

    flags = {
        key: value
        for key, value in vars(args).items()
        if key != "config" and value is not None
    }
    if not flags:
        return config
    return GeneratorConfig.model_validate({**config.model_dump(), **flags})


# =============================================================================
# MAIN
# =============================================================================


def main(argv: Optional[List[str]] = None) -> int:
    """
    Точка входа combin-gen.

    Args:
        argv: Аргументы командной строки; None — sys.argv

    Returns:
        Код выхода: 0 при успехе, 1 при ошибке
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        config = build_config(args)
        configure_logging(config)
        result = generate(config)
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 1
    except SchemaValidationError as exc:
        print(f"Output contract violation: {exc.message}", file=sys.stderr)
        return 1
    except (ValidationError, yaml.YAMLError, ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Wrote {result.written_cases} of {result.total_cases} cases to {result.output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
