"""Logging setup shared across combiseq.

Every module asks for a child of the project logger through
:func:`get_logger`, so a single handler configured here (stdout, level from
``LOG_LEVEL``) controls the output of the whole library.
"""

import logging
import os
import sys

__all__ = ["logger", "setup_logger", "get_logger"]

PROJECT_LOGGER = "combiseq"


def setup_logger(
    name: str = PROJECT_LOGGER,
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return the project logger.

    Args:
        name: Logger name (the project root logger by default)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Falls back to
            the ``LOG_LEVEL`` environment variable, then ``INFO``.
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    level = level or os.getenv("LOG_LEVEL", "INFO")
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    # Handlers are attached once, repeated imports reuse them
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        )
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, level.upper()))
        logger.propagate = False

    return logger


def get_logger(module: str) -> logging.Logger:
    """Return a child of the project logger for ``module``.

    Args:
        module: Dotted module name, usually ``__name__``. A leading
            ``combiseq.`` prefix is stripped so records read
            ``combiseq.functional.enumerators`` rather than repeating the root.

    Returns:
        Logger whose records flow through the project handler.
    """
    if module == PROJECT_LOGGER:
        return logger
    return logger.getChild(module.removeprefix(f"{PROJECT_LOGGER}."))


logger = setup_logger()
