"""Logging utilities for fluentreq modules."""

import logging
from typing import Optional


PACKAGE_LOGGER = 'fluentreq'


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger in the fluentreq namespace.

    Short names are nested under the package logger ('request' becomes
    'fluentreq.request'); names already in the namespace are kept.
    The logger propagates to root and only gets a WARNING level when
    the root logger has no handlers, so basicConfig() just works.

    Args:
        name: Module name, or None for the package logger

    Returns:
        Configured logger instance
    """
    if not name:
        full_name = PACKAGE_LOGGER
    elif name == PACKAGE_LOGGER or name.startswith(f"{PACKAGE_LOGGER}."):
        full_name = name
    else:
        full_name = f"{PACKAGE_LOGGER}.{name}"

    logger = logging.getLogger(full_name)
    logger.propagate = True

    # basicConfig() not called yet
    if not logging.getLogger().handlers:
        logger.setLevel(logging.WARNING)

    return logger
