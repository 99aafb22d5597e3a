"""
Reusable helpers for rendering data tables with consistent configuration.
"""

from __future__ import annotations

from typing import Dict, Optional

import pandas as pd
import streamlit as st

from bombo_dashboard.ui.components.formatting import (
    format_currency,
    format_currency_exact,
    format_number,
    format_percentage,
)


def format_table(
    df: pd.DataFrame,
    column_config: Optional[Dict[str, Dict[str, object]]] = None,
) -> pd.DataFrame:
    formatted_df = df.copy()
    if not column_config:
        return formatted_df
    for column, config in column_config.items():
        if column not in formatted_df.columns:
            continue
        fmt_type = config.get("type")
        if fmt_type == "currency":
            formatted_df[column] = formatted_df[column].apply(format_currency)
        elif fmt_type == "currency_exact":
            decimals = int(config.get("decimals", 0))
            formatted_df[column] = formatted_df[column].apply(
                lambda v: format_currency_exact(v, decimals=decimals)
            )
        elif fmt_type == "percent":
            formatted_df[column] = formatted_df[column].apply(format_percentage)
        elif fmt_type == "number":
            formatted_df[column] = formatted_df[column].apply(format_number)
    return formatted_df


def render_table(
    df: pd.DataFrame,
    column_config: Optional[Dict[str, Dict[str, object]]] = None,
    height: Optional[int] = None,
    show_index: bool = False,
    export_file_name: Optional[str] = None,
) -> None:
    if df.empty:
        st.info("No data to display.")
        return

    formatted_df = format_table(df, column_config)

    kwargs = {"width": "stretch", "hide_index": not show_index}
    if height is not None:
        kwargs["height"] = height
    st.dataframe(formatted_df, **kwargs)

    if export_file_name:
        csv_bytes = df.to_csv(index=show_index).encode("utf-8")
        st.download_button(
            "Download CSV",
            data=csv_bytes,
            file_name=export_file_name,
            mime="text/csv",
            key=f"download_{export_file_name}",
        )
