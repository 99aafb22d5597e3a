from __future__ import annotations

import logging
from typing import List

import pandas as pd
import streamlit as st

from bombo_dashboard.data.derived import (
    customer_economics,
    financial_evolution_frame,
    financial_summary_table,
    growth_milestones,
    ltv_cac_analysis,
    monthly_revenue_comparison,
    projection_frame,
    unit_economics_frame,
    yoy_growth_summary,
)
from bombo_dashboard.ui.components.charts import (
    bar_chart,
    dual_axis_line_chart,
    line_chart,
    render_plotly,
)
from bombo_dashboard.ui.components.formatting import (
    format_currency,
    format_currency_exact,
    format_percentage,
    format_ratio,
)
from bombo_dashboard.ui.components.kpi import KpiCard, render_kpi_cards
from bombo_dashboard.ui.components.tables import render_table
from bombo_dashboard.ui.layout import section_header
from bombo_dashboard.ui.pages.context import PageContext

logger = logging.getLogger(__name__)

TITLE = "Financial Performance"


def _signed_pct(value) -> str:
    if value is None or pd.isna(value):
        return "n/a"
    return f"{value:+.0f}%"


def _plain(value, decimals: int = 2) -> str:
    if value is None or pd.isna(value):
        return "n/a"
    return f"{value:,.{decimals}f}"


def _evolution_long(frame: pd.DataFrame, actual_col: str, estimated_col: str, name: str) -> pd.DataFrame:
    actual = frame[["year", actual_col]].rename(columns={actual_col: "value"})
    actual["series"] = f"{name} (Actual)"
    estimated = frame[["year", estimated_col]].rename(columns={estimated_col: "value"}).dropna()
    estimated["series"] = f"{name} (Estimated)"
    return pd.concat([actual, estimated], ignore_index=True)


def _monthly_long(comparison: pd.DataFrame) -> pd.DataFrame:
    previous = comparison[["month", "revenue_2024"]].rename(columns={"revenue_2024": "revenue"})
    previous["series"] = "2024 Actual"
    current = comparison[["month", "revenue_2025", "is_estimated"]].rename(columns={"revenue_2025": "revenue"})
    current["series"] = current["is_estimated"].map({True: "2025 Projected", False: "2025 Actual"})
    return pd.concat([previous, current.drop(columns=["is_estimated"])], ignore_index=True)


def summary_cards(context: PageContext) -> List[KpiCard]:
    metrics = context.data["metrics"]
    return [
        KpiCard(
            label="Total Revenue (All-Time)",
            value=metrics["total_revenue"],
            kind="currency",
            help_text="Since launch",
        ),
        KpiCard(
            label="Total GTV",
            value=metrics["total_gtv"],
            kind="currency",
            help_text="Since launch",
        ),
        KpiCard(
            label="2025 YTD (Aug)",
            value=metrics["revenue_2025_ytd"],
            kind="currency",
            help_text=f"Projected: {format_currency(metrics['revenue_2025_projected'])}",
        ),
        KpiCard(
            label="Contribution Margin",
            value=metrics["contribution_margin"],
            kind="percent",
            delta=metrics["contribution_margin"] - metrics["industry_margin"],
            help_text=f"Industry: {format_percentage(metrics['industry_margin'])}",
        ),
    ]


def customer_economics_table(context: PageContext) -> pd.DataFrame:
    economics = customer_economics(context.data)
    rows = [
        ("Total Purchases", f"{economics.total_purchases:,}"),
        ("Average GMV per User (All Users)", format_currency_exact(economics.avg_gmv_per_user)),
        ("Average GMV (Per Purchaser)", format_currency_exact(economics.avg_gmv_per_purchaser)),
        ("Gross ARPU (Per Purchaser)", format_currency_exact(economics.gross_arpu_per_purchaser, decimals=2)),
        ("Average Tickets Per Purchaser", _plain(economics.tickets_per_purchaser)),
        ("Average Revenue Per Ticket", format_currency_exact(economics.revenue_per_ticket, decimals=2)),
    ]
    return pd.DataFrame(rows, columns=["Metric", "Value"])


def ltv_cac_table(context: PageContext) -> pd.DataFrame:
    analysis = ltv_cac_analysis(context.data)
    rows = [("Lifetime Value (LTV)", format_currency_exact(analysis.ltv, decimals=2))]
    for _, cost in analysis.marketing_costs.iterrows():
        rows.append((f"Marketing Team + Costs {cost['year']}", format_currency_exact(cost["amount"])))
    rows.extend(
        [
            ("Total CAC", format_currency_exact(analysis.total_cac)),
            ("CAC Per User", format_currency_exact(analysis.cac_per_user, decimals=2)),
            ("LTV:CAC Ratio", format_ratio(analysis.ltv_cac_ratio)),
        ]
    )
    return pd.DataFrame(rows, columns=["Metric", "Value"])


def unit_economics_table(context: PageContext) -> pd.DataFrame:
    """BOMBO against industry benchmarks, each value formatted by its unit."""
    frame = unit_economics_frame(context.data)
    renderers = {
        "$": lambda value: format_currency_exact(value, decimals=2 if value < 10 else 0),
        "x": format_ratio,
        "%": format_percentage,
    }
    rows = []
    for _, row in frame.iterrows():
        render_value = renderers[row["unit"]]
        rows.append((row["metric"], render_value(row["bombo"]), render_value(row["industry"])))
    return pd.DataFrame(rows, columns=["Metric", "BOMBO", "Industry"])


def _render_summary_table(context: PageContext) -> None:
    st.markdown("### Financial Summary")
    table = financial_summary_table(context.data)
    money_columns = [col for col in table.columns if col != "Metric"]
    render_table(
        table,
        column_config={col: {"type": "currency_exact"} for col in money_columns},
        export_file_name="financial_performance.csv" if context.settings.show_table_downloads else None,
    )
    margin = context.data["metrics"]["contribution_margin"]
    st.caption(
        f"Contribution Margin: {format_percentage(margin)} · COGS: {format_percentage(100 - margin)}"
    )


def _render_evolution_charts(context: PageContext) -> None:
    metrics = context.data["metrics"]
    evolution = financial_evolution_frame(context.data)
    gtv_col, revenue_col = st.columns(2)
    with gtv_col:
        fig = bar_chart(
            _evolution_long(evolution, "gtv", "gtv_estimated", "GTV"),
            x="year",
            y="value",
            color="series",
            title="GTV Evolution (2023-2025)",
            yaxis_title="GTV (USD)",
            yaxis_tickformat="$~s",
        )
        render_plotly(fig)
        st.caption(f"2025 Projected: {format_currency(metrics['gtv_2025_projected'])}")
    with revenue_col:
        fig = bar_chart(
            _evolution_long(evolution, "revenue", "revenue_estimated", "Revenue"),
            x="year",
            y="value",
            color="series",
            title="Revenue Evolution (2023-2025)",
            yaxis_title="Revenue (USD)",
            yaxis_tickformat="$~s",
        )
        render_plotly(fig)
        st.caption(f"2025 Projected: {format_currency(metrics['revenue_2025_projected'])}")


def _render_monthly_comparison(context: PageContext) -> None:
    st.markdown("### Monthly Revenue Comparison: 2024 vs 2025")
    summary = yoy_growth_summary(context.data)

    st.metric(
        label=f"Year-over-Year Growth ({summary.period_label})",
        value=_signed_pct(summary.overall_growth),
    )
    month_cols = st.columns(max(len(summary.months), 1))
    for col, (_, row) in zip(month_cols, summary.months.iterrows()):
        with col:
            st.markdown(f"**{row['month']}**  \n{_signed_pct(row['yoy_growth'])}")

    highlight = ", ".join(summary.triple_digit_months)
    st.markdown(
        f"**{summary.positive_months} out of {summary.total_months} months** showed positive growth, "
        f"with **{len(summary.triple_digit_months)} months exceeding 100%** growth"
        + (f" ({highlight})" if highlight else "")
    )

    fig = bar_chart(
        _monthly_long(monthly_revenue_comparison(context.data)),
        x="month",
        y="revenue",
        color="series",
        title=None,
        yaxis_title="Revenue (USD)",
        yaxis_tickformat="$~s",
    )
    # Projected 2025 months share the 2025 slot instead of opening a third bar group.
    for name in ("2025 Actual", "2025 Projected"):
        fig.update_traces(offsetgroup="2025", selector=dict(name=name))
    render_plotly(fig)


def _render_unit_economics(context: PageContext) -> None:
    economics_col, ltv_col = st.columns(2)
    with economics_col:
        st.markdown("### Customer Economics")
        render_table(customer_economics_table(context))
    with ltv_col:
        st.markdown("### LTV & CAC Analysis")
        render_table(ltv_cac_table(context))
    st.markdown("### Unit Economics vs Industry")
    render_table(unit_economics_table(context))


def _render_growth(context: PageContext) -> None:
    trajectory_col, projection_col = st.columns(2)
    with trajectory_col:
        st.markdown("### Growth Trajectory")
        for item in growth_milestones(context.data):
            st.markdown(f"**{item['year']}** · `{item['milestone']}`  \n#### {item['metric']}")
            st.caption(item["description"])
    with projection_col:
        st.markdown("### Growth Projections")
        projections = projection_frame(context.data)
        fig = dual_axis_line_chart(
            projections,
            x="year",
            left="users_m",
            right="revenue_m",
            left_name="Users (M)",
            right_name="Revenue ($M)",
            title="Users & Revenue Growth",
            left_tickformat=".1f",
            right_tickformat="$.1f",
        )
        render_plotly(fig)
        fig = line_chart(
            projections,
            x="year",
            y="gtv_m",
            title="GTV Growth",
            yaxis_title="GTV ($M)",
            yaxis_tickformat="$.0f",
        )
        fig.update_traces(line=dict(dash="dash"))
        render_plotly(fig)


def render(context: PageContext) -> None:
    section_header(context.section, TITLE)
    render_kpi_cards(summary_cards(context), columns=4)
    _render_summary_table(context)
    _render_evolution_charts(context)
    _render_monthly_comparison(context)
    _render_unit_economics(context)
    _render_growth(context)
    logger.debug("Rendered financial section")
