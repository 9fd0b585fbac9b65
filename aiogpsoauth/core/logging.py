"""Logging utilities for aiogpsoauth modules."""

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger that automatically inherits from root logger.

    Loggers propagate to the root logger so that ``basicConfig()`` in the
    embedding application is enough to see their output. When the root
    logger has no handlers yet, the logger defaults to WARNING so that the
    library stays quiet.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.propagate = True

    root_logger = logging.getLogger()
    if not root_logger.handlers and logger.level == logging.NOTSET:
        logger.setLevel(logging.WARNING)

    return logger
