from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from bombo_dashboard.data.derived import projection_frame, retention_cohort_matrix
from bombo_dashboard.ui.components.charts import (
    BACKGROUND_COLOR,
    area_chart,
    bar_chart,
    dual_axis_line_chart,
    heatmap,
    line_chart,
)


def _revenue() -> pd.DataFrame:
    return pd.DataFrame({"year": ["2023", "2024"], "revenue": [1209801, 3053080]})


def test_bar_chart_uses_dark_layout() -> None:
    fig = bar_chart(_revenue(), x="year", y="revenue", title="Revenue", yaxis_tickformat="$~s")
    assert isinstance(fig, go.Figure)
    assert fig.layout.title.text == "Revenue"
    assert fig.layout.paper_bgcolor == BACKGROUND_COLOR
    assert fig.layout.yaxis.tickformat == "$~s"


def test_line_and_area_charts() -> None:
    fig = line_chart(_revenue(), x="year", y="revenue", yaxis_title="USD")
    assert fig.layout.yaxis.title.text == "USD"
    area = area_chart(_revenue(), x="year", y="revenue")
    assert all(trace.fill == "tozeroy" for trace in area.data)


def test_dual_axis_chart_puts_second_series_on_right_axis() -> None:
    fig = dual_axis_line_chart(
        projection_frame(),
        x="year",
        left="users_m",
        right="revenue_m",
        left_name="Users (M)",
        right_name="Revenue ($M)",
    )
    assert [trace.name for trace in fig.data] == ["Users (M)", "Revenue ($M)"]
    assert fig.data[1].yaxis == "y2"
    assert fig.layout.yaxis2.side == "right"


def test_heatmap_labels_cells_with_whole_percentages() -> None:
    fig = heatmap(retention_cohort_matrix("non_buyers"), title="Non-buyers")
    assert fig.data[0].type == "heatmap"
    assert fig.data[0].texttemplate == "%{z:.0f}"
    assert fig.layout.title.text == "Non-buyers"
