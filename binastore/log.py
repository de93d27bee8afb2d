from __future__ import annotations
import logging
from typing import Optional
from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "binastore"
DEFAULT_LEVEL = "WARNING"

def setup_logging(level: str = DEFAULT_LEVEL, console: Optional[Console] = None) -> logging.Logger:
    """Attach a rich handler to the package logger (once) and set its level.

    Unknown level names fall back to WARNING instead of failing the command.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = RichHandler(rich_tracebacks=True, console=console or Console(stderr=True))
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        logger.addHandler(handler)
    name = level.upper()
    if isinstance(logging.getLevelName(name), int):
        logger.setLevel(name)
    else:
        logger.setLevel(DEFAULT_LEVEL)
        logger.warning("Unknown log level %r, using %s", level, DEFAULT_LEVEL)
    return logger

def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
