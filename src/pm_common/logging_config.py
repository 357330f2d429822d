"""Logging setup for host applications embedding the wallet ledger.

The library only emits through module loggers; nothing here runs on import.
"""

import logging

from config.settings import settings

_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def setup_logging(level: str | None = None, logger_name: str = "src") -> logging.Logger:
    """Attach a single stream handler to `logger_name` and set its level.

    Calling it again replaces the handler instead of stacking duplicates.
    """
    logger = logging.getLogger(logger_name)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.setLevel((level or settings.LOG_LEVEL).upper())
    logger.propagate = False
    return logger
