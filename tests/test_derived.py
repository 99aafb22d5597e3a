# Derived views and aggregations computed from the static metrics table.

from __future__ import annotations

import math

import pandas as pd
import pytest

from bombo_dashboard.data.derived import (
    comment_breakdown,
    cumulative_retention_frame,
    customer_economics,
    dau_time_series_frame,
    eventual_retention,
    financial_evolution_frame,
    financial_summary_table,
    growth_milestones,
    ltv_cac_analysis,
    mau_frame,
    monthly_revenue_comparison,
    ninety_day_churn,
    projection_frame,
    retention_at_day,
    retention_cohort_matrix,
    session_duration_frame,
    stickiness_frame,
    unit_economics_frame,
    yoy_growth_summary,
)
from bombo_dashboard.ui.components.formatting import format_percentage


def test_financial_evolution_marks_only_current_year_estimates() -> None:
    frame = financial_evolution_frame()
    assert frame["year"].tolist() == ["2023", "2024", "2025 YTD"]
    estimated = frame.set_index("year")["gtv_estimated"]
    assert estimated["2025 YTD"] == 51_000_000
    assert estimated[["2023", "2024"]].isna().all()
    assert frame.loc[0, "margin"] == pytest.approx(1209801 / 9665152 * 100)


def test_financial_summary_totals() -> None:
    table = financial_summary_table()
    assert table.columns.tolist() == ["Metric", "2023", "2024", "2025 YTD", "Total"]
    row = table.set_index("Metric").loc["Gross Transaction Value (GTV)"]
    assert row["Total"] == 70045672
    revenue = table.set_index("Metric").loc["Revenue"]
    assert revenue["2025 YTD"] == 2_200_000
    assert revenue["Total"] == 1209801 + 3053080 + 2200000


def test_monthly_comparison_flags_projected_months() -> None:
    comparison = monthly_revenue_comparison()
    assert len(comparison) == 12
    assert comparison.loc[comparison["is_estimated"], "month"].tolist() == ["Sep", "Oct", "Nov", "Dec"]
    jan = comparison.set_index("month").loc["Jan"]
    assert jan["yoy_growth"] == pytest.approx((392767 / 168350 - 1) * 100)


def test_yoy_summary_over_actual_months() -> None:
    summary = yoy_growth_summary()
    assert round(summary.overall_growth) == 67
    assert summary.total_months == 8
    assert summary.positive_months == 6
    assert summary.triple_digit_months == ["Feb", "Jul", "Jan"]
    assert summary.period_label == "Jan-Aug"


def test_customer_economics() -> None:
    economics = customer_economics()
    assert economics.total_purchases == 221704
    assert economics.avg_gmv_per_user == pytest.approx(87.39, abs=0.01)
    assert economics.avg_gmv_per_purchaser == pytest.approx(315.94, abs=0.01)
    assert economics.gross_arpu_per_purchaser == pytest.approx(42.19, abs=0.01)
    assert economics.tickets_per_purchaser == pytest.approx(5.76, abs=0.01)
    assert economics.revenue_per_ticket == pytest.approx(7.32, abs=0.01)


def test_customer_economics_without_purchasers() -> None:
    data = {"metrics": {"total_purchasers": 0, "total_gtv": 10, "total_users": 0, "total_revenue": 1, "tickets_sold": 0}}
    economics = customer_economics(data)
    assert economics.avg_gmv_per_user is None
    assert economics.avg_gmv_per_purchaser is None
    assert economics.revenue_per_ticket is None


def test_ltv_cac_analysis() -> None:
    analysis = ltv_cac_analysis()
    assert analysis.marketing_costs["year"].tolist() == ["2023", "2024", "2025 YTD"]
    assert analysis.total_cac == 60600 + 100000 + 60908
    assert analysis.cac_per_user == pytest.approx(0.276, abs=0.001)
    assert analysis.ltv == 7.08
    assert analysis.ltv_cac_ratio == 25.3


def test_unit_economics_against_industry() -> None:
    frame = unit_economics_frame().set_index("metric")
    assert frame.loc["CAC", "industry"] == 70
    assert frame.loc["LTV:CAC", "unit"] == "x"


def test_projection_frame_in_millions() -> None:
    frame = projection_frame()
    assert frame["year"].tolist() == ["2025", "2026", "2027"]
    assert frame["users_m"].tolist() == pytest.approx([1.2, 2.5, 4.0])
    assert frame["revenue_m"].iloc[-1] == pytest.approx(37.5)


def test_growth_milestones_use_currency_formatter() -> None:
    milestones = growth_milestones()
    assert [item["metric"] for item in milestones] == [
        "$9.7M GTV",
        "$26.4M GTV",
        "$33.9M GTV",
        "$51.0M GTV",
    ]
    assert milestones[0]["milestone"] == "Launch"


def test_ninety_day_churn() -> None:
    assert ninety_day_churn() == pytest.approx(20.8)
    assert format_percentage(ninety_day_churn()) == "20.8%"


def test_cumulative_retention_by_segment() -> None:
    frame = cumulative_retention_frame()
    assert set(frame["segment"]) == {"Buyers", "Non-buyers"}
    assert retention_at_day("Buyers", 30) == pytest.approx(85.92)
    assert retention_at_day("Non-buyers", 30) == pytest.approx(60.87)
    assert retention_at_day("Buyers", 31) == pytest.approx(85.92)
    assert retention_at_day("Buyers", -1) is None
    assert retention_at_day("Unknown", 30) is None
    assert eventual_retention("Buyers") == 96
    assert eventual_retention("Non-buyers") == 74
    assert eventual_retention("Unknown") is None


def test_dau_series_is_indexed_by_sample() -> None:
    frame = dau_time_series_frame()
    assert frame["sample"].iloc[0] == 1
    assert frame["sample"].is_monotonic_increasing
    assert frame["value"].max() == 95000


def test_engagement_frames() -> None:
    assert len(mau_frame()) == 12
    sessions = session_duration_frame()
    assert sessions["duration"].iloc[-1] == 12.4
    assert stickiness_frame()["label"].tolist() == ["1 day", "2 days", "3 days"]


def test_comment_breakdown_shares() -> None:
    frame = comment_breakdown().set_index("channel")
    assert frame["share"].sum() == pytest.approx(100)
    assert format_percentage(frame.loc["Comments on events", "share"]) == "82.7%"


def test_retention_cohort_matrix_leaves_future_months_empty() -> None:
    matrix = retention_cohort_matrix("buyers")
    assert matrix.shape == (13, 13)
    assert matrix.loc["Jan 2024", "m12"] == 52
    assert math.isnan(matrix.loc["Jan 2025", "m1"])
    assert isinstance(matrix, pd.DataFrame)


def test_supplied_table_is_used_even_when_empty() -> None:
    with pytest.raises(KeyError):
        financial_evolution_frame({})
    with pytest.raises(KeyError):
        ninety_day_churn({})


def test_supplied_table_replaces_default() -> None:
    data = {"metrics": {"overall_retention_90_day": 60}}
    assert ninety_day_churn(data) == 40
