"""Package-wide logger for safeseq, configured from :mod:`safeseq.core.config`."""

import logging
import sys

from safeseq.core.config import settings

__all__ = ["logger", "setup_logger"]


def setup_logger(
    name: str = "safeseq",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Attach a stdout handler to the named logger the first time it is requested.

    Args:
        name: Dotted logger name; child loggers share the ``safeseq`` prefix
        level: Level name accepted by ``logging``, else
            ``settings.LOG_LEVEL``
        format_string: ``logging.Formatter`` pattern, else
            ``settings.LOG_FORMAT``

    Returns:
        The logger, left untouched if it already has handlers
    """
    level = level or settings.LOG_LEVEL
    format_string = format_string or settings.LOG_FORMAT

    logger = logging.getLogger(name)

    # A second call must not stack another handler
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(level.upper())
        logger.propagate = False

    return logger


logger = setup_logger()
