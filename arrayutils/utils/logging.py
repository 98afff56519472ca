"""Package logger setup.

Only the ``arrayutils`` logger carries a handler and a level. Component
loggers (``arrayutils.scans``, ``arrayutils.transforms``) are left at
``NOTSET`` and propagate to it, so a later :func:`set_config` call changes
the effective level of all of them at once.
"""

from __future__ import annotations

import logging

from arrayutils.utils.config import LOGGER_NAME, get_config

_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _package_logger() -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT))
        logger.addHandler(handler)
        logger.setLevel(get_config().log_level)
    return logger


def get_logger(component: str | None = None) -> logging.Logger:
    package_logger = _package_logger()
    if component is None:
        return package_logger
    return package_logger.getChild(component)
