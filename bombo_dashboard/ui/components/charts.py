"""
Plotly chart factory functions with consistent styling for the dashboard.
"""

from __future__ import annotations

from typing import Dict, List, Optional

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st


DEFAULT_TEMPLATE = "plotly_dark"
BACKGROUND_COLOR = "#000000"
GRID_COLOR = "#1f2937"
DEFAULT_COLOR_SEQUENCE = [
    "#ffffff",  # primary series (actuals, buyers)
    "#9ca3af",  # secondary series (comparisons, non-buyers)
    "#d1d5db",
    "#6b7280",  # estimates / projections
]


def _configure_layout(
    fig: go.Figure,
    title: Optional[str] = None,
    yaxis_title: Optional[str] = None,
    yaxis_tickformat: Optional[str] = None,
    legend_title: Optional[str] = None,
    xaxis_title: Optional[str] = None,
) -> go.Figure:
    fig.update_layout(
        template=DEFAULT_TEMPLATE,
        colorway=DEFAULT_COLOR_SEQUENCE,
        paper_bgcolor=BACKGROUND_COLOR,
        plot_bgcolor=BACKGROUND_COLOR,
        font=dict(family="monospace", color="#d1d5db"),
        title=title,
        legend_title=legend_title,
        hovermode="x unified",
        margin=dict(l=40, r=20, t=60, b=40),
    )
    if yaxis_title:
        fig.update_yaxes(title=yaxis_title)
    if xaxis_title:
        fig.update_xaxes(title=xaxis_title)
    if yaxis_tickformat:
        fig.update_yaxes(tickformat=yaxis_tickformat)
    fig.update_xaxes(showgrid=False)
    fig.update_yaxes(showgrid=True, gridcolor=GRID_COLOR, zeroline=False)
    return fig


def render_plotly(fig: go.Figure) -> None:
    st.plotly_chart(fig, width="stretch", config={"displayModeBar": False})


def line_chart(
    df: pd.DataFrame,
    x: str,
    y,
    color: Optional[str] = None,
    title: Optional[str] = None,
    yaxis_title: Optional[str] = None,
    xaxis_title: Optional[str] = None,
    yaxis_tickformat: Optional[str] = None,
    markers: bool = True,
    hover_data: Optional[List[str]] = None,
    labels: Optional[Dict[str, str]] = None,
) -> go.Figure:
    fig = px.line(
        df,
        x=x,
        y=y,
        color=color,
        markers=markers,
        hover_data=hover_data,
        labels=labels,
    )
    fig = _configure_layout(fig, title, yaxis_title, yaxis_tickformat, xaxis_title=xaxis_title)
    return fig


def area_chart(
    df: pd.DataFrame,
    x: str,
    y: str,
    color: Optional[str] = None,
    title: Optional[str] = None,
    yaxis_title: Optional[str] = None,
    xaxis_title: Optional[str] = None,
    yaxis_tickformat: Optional[str] = None,
) -> go.Figure:
    # Overlapping (not stacked) areas: cumulative curves share one scale.
    fig = px.line(df, x=x, y=y, color=color)
    fig.update_traces(fill="tozeroy")
    fig = _configure_layout(fig, title, yaxis_title, yaxis_tickformat, xaxis_title=xaxis_title)
    return fig


def bar_chart(
    df: pd.DataFrame,
    x: str,
    y,
    color: Optional[str] = None,
    barmode: str = "group",
    orientation: str = "v",
    title: Optional[str] = None,
    yaxis_title: Optional[str] = None,
    yaxis_tickformat: Optional[str] = None,
    category_orders: Optional[Dict[str, List[str]]] = None,
    text_auto=False,
    labels: Optional[Dict[str, str]] = None,
) -> go.Figure:
    fig = px.bar(
        df,
        x=x,
        y=y,
        color=color,
        barmode=barmode,
        orientation=orientation,
        category_orders=category_orders,
        text_auto=text_auto,
        labels=labels,
    )
    fig = _configure_layout(fig, title, yaxis_title, yaxis_tickformat)
    if text_auto:
        fig.update_traces(textposition="outside", cliponaxis=False)
    return fig


def dual_axis_line_chart(
    df: pd.DataFrame,
    x: str,
    left: str,
    right: str,
    left_name: str,
    right_name: str,
    title: Optional[str] = None,
    left_tickformat: Optional[str] = None,
    right_tickformat: Optional[str] = None,
) -> go.Figure:
    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=df[x],
            y=df[left],
            name=left_name,
            mode="lines+markers",
            line=dict(color=DEFAULT_COLOR_SEQUENCE[1], width=2),
        )
    )
    fig.add_trace(
        go.Scatter(
            x=df[x],
            y=df[right],
            name=right_name,
            mode="lines+markers",
            yaxis="y2",
            line=dict(color=DEFAULT_COLOR_SEQUENCE[0], width=3),
        )
    )
    fig = _configure_layout(fig, title, left_name, left_tickformat)
    fig.update_layout(
        yaxis2=dict(
            title=right_name,
            overlaying="y",
            side="right",
            showgrid=False,
            tickformat=right_tickformat,
        ),
        legend=dict(orientation="h", y=-0.2),
    )
    return fig


def heatmap(
    matrix: pd.DataFrame,
    title: Optional[str] = None,
    color_scale: str = "Greys",
    text_auto: bool = True,
) -> go.Figure:
    fig = px.imshow(
        matrix,
        color_continuous_scale=color_scale,
        aspect="auto",
        zmin=0,
        zmax=100,
    )
    fig = _configure_layout(fig, title)
    fig.update_yaxes(showgrid=False)
    if text_auto:
        fig.update_traces(texttemplate="%{z:.0f}", textfont_size=11)
    return fig
