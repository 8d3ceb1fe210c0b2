from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str = "WARNING", console: Console | None = None) -> None:
    """Route docsguard logs to stderr through Rich; safe to call repeatedly."""
    logger = logging.getLogger("docsguard")
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    logger.propagate = False

    # Avoid duplicate handlers if setup is called multiple times
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return module logger."""
    return logging.getLogger(name)
