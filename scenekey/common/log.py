"""Project logger.

Library modules log through children of the `scenekey` logger, which
only carries a NullHandler and propagates to the host application.
The CLI calls configure_logging() to attach a stderr handler.
"""

import logging
from typing import Optional

from scenekey.common import config

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _normalize_level(raw: str) -> int:
    candidate = str(raw or config.DEFAULT_LOG_LEVEL).strip().upper()
    return {
        "CRITICAL": logging.CRITICAL,
        "ERROR": logging.ERROR,
        "WARNING": logging.WARNING,
        "INFO": logging.INFO,
        "DEBUG": logging.DEBUG,
    }.get(candidate, logging.WARNING)


logger = logging.getLogger("scenekey")
logger.addHandler(logging.NullHandler())


def _is_console_handler(handler: logging.Handler) -> bool:
    return (
        type(handler) is logging.StreamHandler
        and handler.formatter is not None
        and handler.formatter._fmt == LOG_FORMAT
    )


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach the stderr handler used by the command-line tool.
    Safe to call repeatedly; the handler is added once and its level updated.
    """
    resolved_level = _normalize_level(level if level is not None else config.get_log_level())
    logger.setLevel(resolved_level)

    stream_handler = next((h for h in logger.handlers if _is_console_handler(h)), None)
    if stream_handler is None:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(stream_handler)
    stream_handler.setLevel(resolved_level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a child logger under the scenekey namespace."""
    return logger.getChild(name)
