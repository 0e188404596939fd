"""Utility helpers for genlayout."""

from __future__ import annotations

import logging
import re
from datetime import date
from typing import Any, Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "genlayout"
LOG_LEVEL_ENV = "GENLAYOUT_LOG_LEVEL"

_YEAR_RE = re.compile(r"(?<!\d)(\d{4})(?!\d)")


def get_logger() -> logging.Logger:
    """Return a module-level logger configured with rich if not already."""
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = RichHandler(rich_tracebacks=True, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.setLevel(logging.INFO)
        logger.addHandler(handler)
    return logger


logger = get_logger()


def set_log_level(level: str) -> None:
    """Allow callers (e.g. CLI) to adjust logging verbosity at runtime."""

    level_value = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(level_value)


console = Console()


def parse_year(value: Any) -> Optional[int]:
    """Extract a calendar year from the loosely typed dates storage hands us.

    Accepts ``date``/``datetime`` objects, plain integers and strings such as
    ``"1940"``, ``"1965-03-02"`` or ``"1990-01-01T00:00:00.000Z"``. Anything
    without a recognisable four digit year yields ``None``.
    """

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, date):
        return value.year
    if isinstance(value, int):
        return value
    match = _YEAR_RE.search(str(value))
    if not match:
        return None
    return int(match.group(1))


def last_token(text: str) -> str:
    parts = text.split()
    return parts[-1].lower() if parts else ""
