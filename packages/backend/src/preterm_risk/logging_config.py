"""Logging configuration helpers."""

from __future__ import annotations

import logging
import sys
from typing import Final

DEFAULT_FORMAT: Final[str] = (
    "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
)


def configure_logging(level: str) -> None:
    level = level.upper()
    logging.basicConfig(
        level=level,
        format=DEFAULT_FORMAT,
        stream=sys.stdout,
    )

    logging.getLogger("preterm_risk").setLevel(level)
    for name in ("uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).setLevel(level)
