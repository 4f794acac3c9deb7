"""Общие фикстуры тестов combin-gen."""

import logging

import pytest


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """COMBIN_GEN_* из окружения не должны влиять на тесты."""
    for var in (
        "COMBIN_GEN_OUTPUT",
        "COMBIN_GEN_INCLUDE",
        "COMBIN_GEN_BOUNDARY_SET",
        "COMBIN_GEN_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Снимает handlers, добавленные configure_logging."""
    pkg_logger = logging.getLogger("combin_gen")
    handlers = list(pkg_logger.handlers)
    level = pkg_logger.level
    yield
    for handler in list(pkg_logger.handlers):
        if handler not in handlers:
            pkg_logger.removeHandler(handler)
            handler.close()
    pkg_logger.setLevel(level)
