"""Simple logging wrapper supporting optional file logging."""

from __future__ import annotations

import logging
from pathlib import Path

PACKAGE_LOGGER = "table_rotate"

_FORMATTER = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")


def get_logger(name: str, file_path: str | None = None, level: int | str = logging.INFO) -> logging.Logger:
    """Return configured logger, attaching ``file_path`` handler if provided."""

    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(_FORMATTER)
        logger.addHandler(handler)
        if file_path:
            set_file_handler(logger, file_path)
    logger.setLevel(level)
    return logger


def set_file_handler(logger: logging.Logger, file_path: str | None) -> None:
    """Replace any file handler on ``logger`` with one writing to ``file_path``."""
    for handler in list(logger.handlers):
        if isinstance(handler, logging.FileHandler):
            logger.removeHandler(handler)
            handler.close()
    if file_path:
        Path(file_path).parent.mkdir(parents=True, exist_ok=True)
        f_handler = logging.FileHandler(file_path, encoding="utf-8")
        f_handler.setFormatter(_FORMATTER)
        logger.addHandler(f_handler)
