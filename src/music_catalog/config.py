# music_catalog/config.py

"""Shared configuration and environment setup."""

from __future__ import annotations

import logging
from os import getenv

try:
    from dotenv import load_dotenv

    load_dotenv(override=True)
except ImportError:
    pass


def get_log_level() -> int:
    """Return the log level named by MUSIC_CATALOG_LOG_LEVEL, or INFO."""
    name = (getenv("MUSIC_CATALOG_LOG_LEVEL") or "").strip().upper()
    level = logging.getLevelName(name) if name else None
    if isinstance(level, int):
        return level
    return logging.INFO
