"""
Process-wide logging setup.
"""

from __future__ import annotations

import logging
import os

DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def log_level() -> int:
    raw = os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"
    level = logging.getLevelName(raw)
    # getLevelName returns a string for unknown names.
    return level if isinstance(level, int) else logging.INFO


def configure_logging() -> None:
    logging.basicConfig(level=log_level(), format=DEFAULT_FORMAT)
