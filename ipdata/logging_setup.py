"""Logging setup using Rich on stderr."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from .config import APP_NAME, DEFAULT_LOG_LEVEL

_CONSOLE_HANDLER = f"{APP_NAME}_rich_handler"


def setup_logging(level: int = DEFAULT_LOG_LEVEL) -> None:
    """Attach a RichHandler to the root logger (idempotent).

    Calling again only updates the level.
    """
    root = logging.getLogger()

    handler = next((h for h in root.handlers if h.name == _CONSOLE_HANDLER), None)
    if handler is None:
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            markup=False,
            rich_tracebacks=True,
        )
        handler.name = _CONSOLE_HANDLER
        root.addHandler(handler)

    handler.setLevel(level)
    root.setLevel(level)
