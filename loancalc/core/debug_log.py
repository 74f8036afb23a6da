# loancalc/core/debug_log.py
"""
Logging setup for CLI runs.

Library modules only call logging.getLogger(__name__). A run opts into a rotating
debug log with LOANCALC_DEBUG=1; without it the "loancalc" logger only passes
warnings on to whatever the host application configured.
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler

_ROOT = "loancalc"
_DEFAULT_LOG_PATH = os.path.join("logs", "loancalc_debug.log")


def debug_enabled() -> bool:
    return os.getenv("LOANCALC_DEBUG", "").strip().lower() in {"1", "true", "yes", "on"}


def configure_logging(log_path: str | None = None) -> logging.Logger:
    """Create/reuse the package logger; attach a rotating file handler when debugging is on."""
    logger = logging.getLogger(_ROOT)

    if not debug_enabled():
        logger.setLevel(logging.WARNING)
        return logger

    logger.setLevel(logging.DEBUG)

    # Avoid duplicate handlers if called twice in one process
    if any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
        return logger

    path = log_path or os.getenv("LOANCALC_LOG_PATH") or _DEFAULT_LOG_PATH
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    handler = RotatingFileHandler(path, maxBytes=1_000_000, backupCount=3, encoding="utf-8")
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="(%Y-%m-%d %H:%M:%S)",
        )
    )
    logger.addHandler(handler)
    return logger
