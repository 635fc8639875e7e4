"""Logging setup for ghostmux."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "ghostmux"


def configure_logging(debug: bool = False, console: Console | None = None) -> logging.Logger:
    """Attach a Rich handler to the package logger.

    Args:
        debug: Log at DEBUG level instead of INFO.
        console: Console to write to. Defaults to a stderr console.

    Returns:
        The configured package logger.
    """
    level = logging.DEBUG if debug else logging.INFO

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=debug,
        show_path=False,
        markup=False,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)

    logger.propagate = False
    return logger
