from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import streamlit as st

from bombo_dashboard.ui.components.formatting import (
    format_currency,
    format_number,
    format_percentage,
    format_ratio,
)

_FORMATTERS = {
    "currency": format_currency,
    "number": format_number,
    "percent": format_percentage,
    "ratio": format_ratio,
    "raw": lambda value: "" if value is None else str(value),
}


@dataclass
class KpiCard:
    label: str
    value: Optional[float] = None
    value_display: Optional[str] = None
    kind: str = "number"  # currency | number | percent | ratio | raw
    suffix: str = ""
    delta: Optional[float] = None  # percentage points
    help_text: Optional[str] = None


def _format_value(card: KpiCard) -> str:
    if card.value_display is not None:
        return card.value_display
    formatter = _FORMATTERS.get(card.kind, format_number)
    return f"{formatter(card.value)}{card.suffix}"


def _format_delta(card: KpiCard) -> Optional[str]:
    if card.delta is None:
        return None
    text = format_percentage(card.delta)
    # st.metric picks the arrow from a leading sign.
    if text[0] != "-" and text != "0.0%":
        text = f"+{text}"
    return text


def render_kpi_cards(cards: Sequence[KpiCard], columns: int = 3) -> None:
    """
    Render KPI cards in a responsive grid using Streamlit columns.
    """
    cards = list(cards)
    if not cards:
        st.info("No metrics available for this section.")
        return

    columns = max(columns, 1)
    for idx in range(0, len(cards), columns):
        row_cards = cards[idx: idx + columns]
        cols = st.columns(len(row_cards))
        for col, card in zip(cols, row_cards):
            with col:
                value = _format_value(card)
                delta = _format_delta(card)
                st.metric(label=card.label, value=value, delta=delta, delta_color="off")
                if card.help_text:
                    st.caption(card.help_text)
