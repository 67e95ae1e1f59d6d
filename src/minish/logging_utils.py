"""Runtime logging helpers."""

from __future__ import annotations

import sys
from logging import Handler
from typing import Literal

from loguru import logger
from rich.console import Console
from rich.logging import RichHandler

LogProfile = Literal["default", "rich"]

_DEFAULT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<6} | {name}:{function}:{line} | {message}"
_CONFIGURED: tuple[str, str] | None = None


def _build_rich_handler() -> Handler:
    return RichHandler(
        console=Console(stderr=True),
        show_level=True,
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )


def configure_logging(*, level: str = "WARNING", profile: str = "default") -> None:
    """Configure process-level logging once per level/profile pair."""
    global _CONFIGURED
    level = level.upper()
    if _CONFIGURED == (level, profile):
        return

    logger.remove()
    if profile == "rich":
        logger.add(
            _build_rich_handler(),
            level=level,
            format="{message}",
            backtrace=False,
            diagnose=False,
        )
    else:
        logger.add(
            sys.stderr,
            level=level,
            format=_DEFAULT_FORMAT,
            backtrace=False,
            diagnose=False,
        )
    _CONFIGURED = (level, profile)
