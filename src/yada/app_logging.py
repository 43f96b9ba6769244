"""Logging configuration helpers."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: int = logging.INFO) -> None:
    """Configure package logging with a single Rich handler on stderr."""
    logger = logging.getLogger("yada")
    logger.setLevel(level)
    if logger.handlers:
        return
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
