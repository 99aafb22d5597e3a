"""
Application-wide configuration constants and helper utilities.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import List

DEFAULT_TITLE = "BOMBO - Key Metrics Dashboard"
DEFAULT_DATA_ROOM_URL = "https://dr.bombocommunity.xyz"
_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class SectionConfig:
    key: str
    label: str


# Ordered section definitions; keys double as page anchors
SECTIONS: List[SectionConfig] = [
    SectionConfig("hero", "Overview"),
    SectionConfig("financial", "Financials"),
    SectionConfig("engagement", "Engagement"),
]


@dataclass(frozen=True)
class Settings:
    dashboard_title: str
    data_room_url: str
    log_level: str
    show_table_downloads: bool


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


def load_settings() -> Settings:
    """Read settings from the process environment (populated by bootstrap_env)."""
    return Settings(
        dashboard_title=os.getenv("DASHBOARD_TITLE", "").strip() or DEFAULT_TITLE,
        data_room_url=os.getenv("DATA_ROOM_URL", "").strip() or DEFAULT_DATA_ROOM_URL,
        log_level=os.getenv("LOG_LEVEL", "").strip().upper() or "INFO",
        show_table_downloads=_env_flag("SHOW_TABLE_DOWNLOADS", True),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
