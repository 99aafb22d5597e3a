from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from bombo_dashboard.config import SectionConfig, Settings


@dataclass
class PageContext:
    data: Mapping[str, Any]
    settings: Settings
    section: SectionConfig
