"""
Process-wide logging setup for the dashboard.
"""

from __future__ import annotations

import logging
from typing import Optional

from bombo_dashboard.config import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_LOGGING_CONFIGURED = False


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging once; Streamlit reruns the script on every interaction."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    if level is None:
        level = get_settings().log_level
    resolved = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger("bombo_dashboard").setLevel(resolved)
    _LOGGING_CONFIGURED = True
