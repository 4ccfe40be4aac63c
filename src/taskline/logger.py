# SPDX-License-Identifier: MIT

import logging

from rich.console import Console
from rich.logging import RichHandler

_ROOT_LOGGER_NAME = "taskline"


def configure_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """Attach a single RichHandler writing to stderr to the package logger.

    Calling this again only changes the level.

    Args:
        level: A logging level name ("DEBUG", "INFO", ...) or number

    Returns:
        The package root logger
    """
    logger = logging.getLogger(_ROOT_LOGGER_NAME)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logger.setLevel(level)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.propagate = False

    return logger
