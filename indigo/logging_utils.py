"""Logging setup shared by the Indigo command-line entry points."""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["DEFAULT_LOG_LEVEL", "setup_logging"]

# INDIGO_LOG_LEVEL=DEBUG / INFO / WARNING / ERROR
DEFAULT_LOG_LEVEL = os.getenv("INDIGO_LOG_LEVEL", "WARNING").upper()


def setup_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Call once at program start; records go to stderr so game output stays clean."""

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(name)s: %(message)s",
        handlers=[handler],
        force=True,
    )
