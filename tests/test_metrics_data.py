# The static metrics table is built once and must be read-only for every consumer.

from __future__ import annotations

import pytest

from bombo_dashboard.data.metrics import bombo_data, get_dashboard_data


def test_accessor_returns_the_shared_table() -> None:
    assert get_dashboard_data() is bombo_data
    assert get_dashboard_data() is get_dashboard_data()


def test_top_level_sections_present() -> None:
    for key in (
        "metrics",
        "user_growth",
        "financial_evolution",
        "marketing_costs",
        "growth_milestones",
        "cumulative_return_data",
        "engagement",
        "session_duration_evolution",
        "dau_evolution",
        "mau_evolution",
        "investment_highlights",
        "monthly_revenue",
        "projections",
        "retention_cohorts",
        "engagement_metrics",
    ):
        assert key in bombo_data


def test_headline_metrics() -> None:
    metrics = bombo_data["metrics"]
    assert metrics["total_users"] == 801492
    assert metrics["total_gtv"] == 70045672
    assert metrics["total_revenue"] == 9352983
    assert metrics["ltv_cac_ratio"] == 25.3
    assert metrics["cac"] == 0.28


def test_nested_mappings_reject_assignment() -> None:
    with pytest.raises(TypeError):
        bombo_data["metrics"]["total_users"] = 0  # type: ignore[index]
    with pytest.raises(TypeError):
        bombo_data["new_section"] = {}  # type: ignore[index]
    with pytest.raises(TypeError):
        bombo_data["engagement_metrics"]["mau_stats"]["peak"] = 1  # type: ignore[index]


def test_sequences_are_tuples() -> None:
    assert isinstance(bombo_data["financial_evolution"], tuple)
    with pytest.raises(AttributeError):
        bombo_data["projections"].append({})  # type: ignore[attr-defined]
    with pytest.raises(TypeError):
        bombo_data["financial_evolution"][0]["gtv"] = 0  # type: ignore[index]


def test_gtv_by_year_adds_up_to_total() -> None:
    yearly = sum(item["gtv"] for item in bombo_data["financial_evolution"])
    assert yearly == bombo_data["metrics"]["total_gtv"]


def test_cohort_rows_are_padded_to_thirteen_months() -> None:
    for segment in ("buyers", "non_buyers"):
        for row in bombo_data["retention_cohorts"][segment]:
            assert [key for key in row if key != "month"] == [f"m{idx}" for idx in range(13)]
            assert row["m0"] == 100
