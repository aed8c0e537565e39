"""Logging setup for checkmark.

Modules obtain loggers through `get_logger` so everything lives under the
`checkmark` namespace. The CLI calls `configure_logging` once to route those
records to stderr through rich.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "checkmark"


def get_logger(name: str) -> logging.Logger:
    """Get a logger nested under the checkmark namespace."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Attach a rich handler to the checkmark logger and set its level.

    Safe to call more than once; the handler is only added the first time.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR).

    Returns:
        The package-level logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())

    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    return logger
