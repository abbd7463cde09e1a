from __future__ import annotations

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

from readme_index.config import LoggingConfig


def setup_logging(cfg: LoggingConfig, console: Console | None = None) -> logging.Logger:
    logger = logging.getLogger("readme_index")
    logger.setLevel(_level_from_string(cfg.level))
    logger.handlers = []
    logger.propagate = False

    if cfg.console:
        console_handler = RichHandler(
            console=console,
            rich_tracebacks=True,
            show_time=False,
            show_level=True,
            show_path=False,
        )
        console_handler.setLevel(_level_from_string(cfg.level))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(console_handler)

    return logger


def log_event(
    logger: logging.Logger | None,
    message: str,
    *,
    level: int = logging.INFO,
    **fields: Any,
) -> None:
    if logger is None:
        return
    logger.log(level, message, extra=fields)


def _level_from_string(level: str) -> int:
    return getattr(logging, level.upper(), logging.INFO)
