"""Static single-page form."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

STATIC_DIR = Path(__file__).parent / "static"
API_PREFIX_PLACEHOLDER = "__API_PREFIX__"


@lru_cache(maxsize=1)
def _load_template() -> str:
    return (STATIC_DIR / "index.html").read_text(encoding="utf-8")


def render_index(api_prefix: str) -> str:
    return _load_template().replace(API_PREFIX_PLACEHOLDER, api_prefix)
