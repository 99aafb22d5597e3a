"""
Layout helpers for the Streamlit application (page setup, sidebar navigation, data room links).
"""

from __future__ import annotations

from typing import Optional, Sequence

import streamlit as st

from bombo_dashboard.config import DEFAULT_TITLE, SectionConfig

DATA_ROOM_LABEL = "Go Back to DR"


def setup_page(title: str = DEFAULT_TITLE) -> None:
    """Set Streamlit page configuration and top-level styling."""
    st.set_page_config(
        page_title=title,
        layout="wide",
        page_icon=":bar_chart:",
        initial_sidebar_state="expanded",
    )
    _inject_monochrome_theme()


def sidebar_navigation(sections: Sequence[SectionConfig]) -> None:
    """List section anchors in the sidebar in page order."""
    st.sidebar.markdown("## BOMBO")
    links = "\n".join(f"- [{section.label}](#{section.key})" for section in sections)
    st.sidebar.markdown(links)


def section_header(section: SectionConfig, title: str) -> None:
    st.header(title, anchor=section.key, divider="gray")


def data_room_button(url: str, help: Optional[str] = None) -> None:
    st.link_button(DATA_ROOM_LABEL, url, help=help, type="secondary")


def _inject_monochrome_theme() -> None:
    """Black background, monospace type and grey cards to match the investor deck.

    Notes:
    - Metric cards are rendered by st.metric, so the card styling targets its test id.
    - Links in the sidebar are the section navigation; they inherit the muted grey.
    """
    st.markdown(
        """
        <style>
        .stApp, div[data-testid="stSidebar"] {
            background-color: #000000;
            font-family: ui-monospace, SFMono-Regular, Menlo, monospace;
        }
        div[data-testid="stSidebar"] {
            border-right: 1px solid #1f2937;
        }
        div[data-testid="stSidebar"] a {
            color: #9ca3af;
            text-decoration: none;
        }
        div[data-testid="stSidebar"] a:hover {
            color: #ffffff;
        }
        div[data-testid="stMetric"] {
            background-color: rgba(17, 24, 39, 0.5);
            border: 1px solid #1f2937;
            border-radius: 0.75rem;
            padding: 1.25rem;
        }
        div[data-testid="stMetricLabel"] p {
            color: #9ca3af;
            text-transform: uppercase;
            letter-spacing: 0.05em;
        }
        div[data-testid="stMetricValue"] {
            color: #ffffff;
            font-weight: 700;
        }
        </style>
        """,
        unsafe_allow_html=True,
    )
