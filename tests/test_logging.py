"""Test logging setup."""

import logging

from lyrics_proxy.utils.logging import setup_logging


def test_setup_logging_console_only():
    logger = setup_logging(level="debug")
    assert logger.name == "lyrics_proxy"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert logging.getLogger("urllib3").level == logging.WARNING


def test_setup_logging_replaces_handlers():
    setup_logging()
    logger = setup_logging()
    assert len(logger.handlers) == 1


def test_setup_logging_with_file(temp_dir):
    log_file = temp_dir / "logs" / "proxy.log"
    logger = setup_logging(log_file=log_file, verbose=True)
    logger.info("hello")
    for handler in logger.handlers:
        handler.flush()
    assert "hello" in log_file.read_text()
    for handler in logger.handlers:
        handler.close()

