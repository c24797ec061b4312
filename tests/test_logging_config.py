"""
Tests for the package logging setup.
"""

import logging
from typing import Iterator

import pytest

from prop_directory_api.app.core.logging_config import PACKAGE_LOGGER, setup_logging


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    logger = logging.getLogger(PACKAGE_LOGGER)
    level, handlers = logger.level, list(logger.handlers)
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)


def test_level_names_are_case_insensitive(package_logger: logging.Logger) -> None:
    assert setup_logging("warning") is package_logger
    assert package_logger.level == logging.WARNING


def test_unknown_level_falls_back_to_info(package_logger: logging.Logger) -> None:
    setup_logging("LOUD")
    assert package_logger.level == logging.INFO


def test_debug_mode_forces_debug(package_logger: logging.Logger) -> None:
    setup_logging("ERROR", debug=True)
    assert package_logger.level == logging.DEBUG


def test_log_file_is_created_once(package_logger: logging.Logger, tmp_path) -> None:
    log_file = tmp_path / "logs" / "api.log"
    setup_logging("INFO", str(log_file))
    setup_logging("INFO", str(log_file))
    file_handlers = [h for h in package_logger.handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1

    logging.getLogger(f"{PACKAGE_LOGGER}.services").info("Created firm 1 (FTMO)")
    file_handlers[0].flush()
    assert "[INFO] prop_directory_api.services: Created firm 1 (FTMO)" in log_file.read_text(
        encoding="utf-8"
    )
