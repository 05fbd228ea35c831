import logging
from logging.handlers import RotatingFileHandler

from ipv4calc.logging_config import configure_logging, setup_logging


def test_setup_logging_console_only():
    logger = setup_logging(level="INFO")
    assert logger.name == "ipv4calc"
    assert logger.level == logging.INFO
    assert logger.propagate is False
    assert len(logger.handlers) == 1
    assert logger.handlers[0].level == logging.INFO


def test_setup_logging_replaces_handlers():
    setup_logging()
    logger = setup_logging()
    assert len(logger.handlers) == 1


def test_setup_logging_file(tmp_path):
    log_file = tmp_path / "logs" / "ipv4calc.log"
    logger = setup_logging(level="WARNING", log_file=str(log_file))
    assert logger.level == logging.DEBUG
    file_handlers = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
    assert len(file_handlers) == 1

    logging.getLogger("ipv4calc.tests").debug("hello from the test")
    text = log_file.read_text()
    assert "hello from the test" in text
    assert "| DEBUG" in text


def test_configure_logging_debug():
    logger = configure_logging(debug=True)
    assert logger.level == logging.DEBUG


def test_configure_logging_with_file(tmp_path):
    log_file = tmp_path / "out.log"
    logger = configure_logging(log_file=str(log_file), level="ERROR")
    assert len(logger.handlers) == 2
    assert logger.handlers[0].level == logging.ERROR
    assert log_file.exists()
