import logging

import pytest

from bytekit.infra.logger import LOGGER_NAME, setup_logging


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def test_setup_logging_console_only():
    logger = setup_logging("debug")
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.StreamHandler)


def test_setup_logging_writes_file(tmp_path):
    logger = setup_logging("INFO", tmp_path / "logs")
    assert len(logger.handlers) == 2

    logging.getLogger("bytekit.libs.codec.hex").info("hello from hex")
    for handler in logger.handlers:
        handler.flush()

    text = (tmp_path / "logs" / "bytekit.log").read_text(encoding="utf-8")
    assert "hello from hex" in text


def test_setup_logging_replaces_handlers():
    setup_logging("INFO")
    logger = setup_logging("WARNING")
    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING


def test_setup_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        setup_logging("LOUD")
