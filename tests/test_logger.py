import logging
import sys

from safeseq.logger.logger import logger, setup_logger


def test_default_logger_is_configured_once():
    assert logger.name == "safeseq"
    assert logger.propagate is False
    assert len(logger.handlers) == 1
    again = setup_logger()
    assert again is logger
    assert len(again.handlers) == 1


def test_setup_logger_uses_given_level_and_format():
    custom = setup_logger(
        "safeseq.test_custom", level="debug", format_string="%(message)s"
    )
    assert custom.level == logging.DEBUG
    handler = custom.handlers[0]
    assert isinstance(handler, logging.StreamHandler)
    assert handler.stream is sys.stdout
    assert handler.formatter._fmt == "%(message)s"


def test_setup_logger_accepts_level_aliases():
    aliased = setup_logger("safeseq.test_alias", level="warn")
    assert aliased.level == logging.WARNING
