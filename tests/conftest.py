"""
Shared test configuration.
Puts the repository root on sys.path and pins the dashboard environment so
settings and rendered output stay deterministic.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from bombo_dashboard.config import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def base_test_env(monkeypatch: pytest.MonkeyPatch):
    """Ensure the dashboard reads known environment values during tests."""

    defaults = {
        "LOG_LEVEL": "INFO",
        "DATA_ROOM_URL": "https://dr.bombocommunity.xyz",
        "SHOW_TABLE_DOWNLOADS": "true",
    }
    for key, value in defaults.items():
        monkeypatch.setenv(key, value)
    monkeypatch.delenv("DASHBOARD_TITLE", raising=False)

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
