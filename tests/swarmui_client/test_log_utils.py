"""
로깅 설정 단위 테스트
"""

import logging

import pytest

from swarmui_client.utils.log_utils import setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("swarmui_client")
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in saved_handlers:
        logger.addHandler(handler)
    logger.setLevel(saved_level)


def test_setup_logging_console_only(package_logger):
    logger = setup_logging(level="debug", log_file="")

    assert logger is package_logger
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.StreamHandler)


def test_setup_logging_with_file(package_logger, tmp_path):
    log_path = tmp_path / "swarmui_client.log"

    logger = setup_logging(level="INFO", log_file=str(log_path))
    logging.getLogger("swarmui_client.serializer").info("직렬화 테스트")
    for handler in logger.handlers:
        handler.flush()

    assert len(logger.handlers) == 2
    assert "직렬화 테스트" in log_path.read_text(encoding="utf-8")


def test_setup_logging_is_idempotent(package_logger):
    setup_logging(log_file="")
    logger = setup_logging(log_file="")

    assert len(logger.handlers) == 1
