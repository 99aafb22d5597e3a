"""
Derived views over the static metrics table.

Each helper returns a fresh DataFrame or a small dataclass, so callers can
reshape the result freely without touching ``bombo_data``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional

import numpy as np
import pandas as pd

from bombo_dashboard.data.metrics import get_dashboard_data
from bombo_dashboard.ui.components.formatting import format_currency

ESTIMATED_YEAR = "2025 YTD"


def _table(data: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
    return data if data is not None else get_dashboard_data()


def _records(rows) -> List[dict]:
    return [dict(row) for row in rows]


def _ratio(numerator: Optional[float], denominator: Optional[float]) -> Optional[float]:
    if numerator is None or denominator in (None, 0):
        return None
    return float(numerator) / float(denominator)


def _pct_change(current: Optional[float], previous: Optional[float]) -> Optional[float]:
    ratio = _ratio(current, previous)
    if ratio is None:
        return None
    return (ratio - 1) * 100


def financial_evolution_frame(data: Optional[Mapping[str, Any]] = None) -> pd.DataFrame:
    data = _table(data)
    metrics = data["metrics"]
    rows = []
    for item in data["financial_evolution"]:
        estimated = item["year"] == ESTIMATED_YEAR
        rows.append(
            {
                "year": item["year"],
                "gtv": item["gtv"],
                "revenue": item["revenue"],
                "net_service_charge": item["net_service_charge"],
                "available_service": item["available_service"],
                "gtv_estimated": metrics["gtv_2025_projected"] if estimated else np.nan,
                "revenue_estimated": metrics["revenue_2025_projected"] if estimated else np.nan,
            }
        )
    frame = pd.DataFrame(rows)
    frame["margin"] = np.where(frame["gtv"] > 0, frame["revenue"] / frame["gtv"] * 100, np.nan)
    return frame


def financial_summary_table(data: Optional[Mapping[str, Any]] = None) -> pd.DataFrame:
    """Metric x year matrix with a Total column, as shown in the financial table."""
    frame = financial_evolution_frame(data)
    labels = {
        "gtv": "Gross Transaction Value (GTV)",
        "revenue": "Revenue",
        "net_service_charge": "Net Service Charge",
        "available_service": "Available Service Charge",
    }
    table = frame.set_index("year")[list(labels)].T
    table["Total"] = table.sum(axis=1)
    table.index = [labels[key] for key in table.index]
    table.index.name = "Metric"
    table.columns.name = None
    return table.reset_index()


def monthly_revenue_comparison(data: Optional[Mapping[str, Any]] = None) -> pd.DataFrame:
    data = _table(data)
    previous = pd.DataFrame(_records(data["monthly_revenue"][2024]))
    current = pd.DataFrame(_records(data["monthly_revenue"][2025]))
    merged = previous[["month", "revenue"]].rename(columns={"revenue": "revenue_2024"}).merge(
        current.rename(columns={"revenue": "revenue_2025"}),
        on="month",
        how="left",
        sort=False,
    )
    merged["is_estimated"] = ~merged["actual"].fillna(False).astype(bool)
    merged["yoy_growth"] = [
        _pct_change(cur, prev) for cur, prev in zip(merged["revenue_2025"], merged["revenue_2024"])
    ]
    return merged.drop(columns=["actual"])


@dataclass(frozen=True)
class YoyGrowthSummary:
    overall_growth: Optional[float]
    months: pd.DataFrame
    positive_months: int
    total_months: int
    triple_digit_months: List[str]

    @property
    def period_label(self) -> str:
        if self.months.empty:
            return ""
        return f"{self.months['month'].iloc[0]}-{self.months['month'].iloc[-1]}"


def yoy_growth_summary(data: Optional[Mapping[str, Any]] = None) -> YoyGrowthSummary:
    """Year-over-year growth for the months of 2025 that have actual revenue."""
    comparison = monthly_revenue_comparison(data)
    actual = comparison[~comparison["is_estimated"]].reset_index(drop=True)
    overall = _pct_change(actual["revenue_2025"].sum(), actual["revenue_2024"].sum()) if not actual.empty else None
    growth = pd.to_numeric(actual["yoy_growth"], errors="coerce")
    above_100 = actual.loc[growth > 100].assign(growth=growth[growth > 100])
    above_100 = above_100.sort_values("growth", ascending=False)
    return YoyGrowthSummary(
        overall_growth=overall,
        months=actual[["month", "yoy_growth"]],
        positive_months=int((growth > 0).sum()),
        total_months=len(actual),
        triple_digit_months=above_100["month"].tolist(),
    )


@dataclass(frozen=True)
class CustomerEconomics:
    total_purchases: int
    avg_gmv_per_user: Optional[float]
    avg_gmv_per_purchaser: Optional[float]
    gross_arpu_per_purchaser: Optional[float]
    tickets_per_purchaser: Optional[float]
    revenue_per_ticket: Optional[float]


def customer_economics(data: Optional[Mapping[str, Any]] = None) -> CustomerEconomics:
    metrics = _table(data)["metrics"]
    purchasers = metrics["total_purchasers"]
    return CustomerEconomics(
        total_purchases=purchasers,
        avg_gmv_per_user=_ratio(metrics["total_gtv"], metrics["total_users"]),
        avg_gmv_per_purchaser=_ratio(metrics["total_gtv"], purchasers),
        gross_arpu_per_purchaser=_ratio(metrics["total_revenue"], purchasers),
        tickets_per_purchaser=_ratio(metrics["tickets_sold"], purchasers),
        revenue_per_ticket=_ratio(metrics["total_revenue"], metrics["tickets_sold"]),
    )


@dataclass(frozen=True)
class LtvCacAnalysis:
    marketing_costs: pd.DataFrame
    total_cac: float
    cac_per_user: Optional[float]
    ltv: float
    ltv_cac_ratio: float


def ltv_cac_analysis(data: Optional[Mapping[str, Any]] = None) -> LtvCacAnalysis:
    data = _table(data)
    metrics = data["metrics"]
    costs = pd.DataFrame(_records(data["marketing_costs"]))
    total = float(costs["amount"].sum()) if not costs.empty else 0.0
    return LtvCacAnalysis(
        marketing_costs=costs,
        total_cac=total,
        cac_per_user=_ratio(total, metrics["total_users"]),
        ltv=metrics["ltv"],
        ltv_cac_ratio=metrics["ltv_cac_ratio"],
    )


def unit_economics_frame(data: Optional[Mapping[str, Any]] = None) -> pd.DataFrame:
    metrics = _table(data)["metrics"]
    return pd.DataFrame(
        [
            {"metric": "CAC", "bombo": metrics["cac"], "industry": metrics["industry_cac"], "unit": "$"},
            {"metric": "LTV", "bombo": metrics["ltv"], "industry": metrics["industry_ltv"], "unit": "$"},
            {
                "metric": "LTV:CAC",
                "bombo": metrics["ltv_cac_ratio"],
                "industry": metrics["industry_ltv_cac_ratio"],
                "unit": "x",
            },
            {
                "metric": "Margin",
                "bombo": metrics["contribution_margin"],
                "industry": metrics["industry_margin"],
                "unit": "%",
            },
        ]
    )


def projection_frame(data: Optional[Mapping[str, Any]] = None) -> pd.DataFrame:
    """Projection years with users, GTV and revenue expressed in millions."""
    frame = pd.DataFrame(_records(_table(data)["projections"]))
    for column in ("users", "gtv", "revenue"):
        frame[f"{column}_m"] = frame[column] / 1_000_000
    frame["year"] = frame["year"].astype(str)
    return frame


def growth_milestones(data: Optional[Mapping[str, Any]] = None) -> List[dict]:
    milestones = []
    for item in _table(data)["growth_milestones"]:
        entry = dict(item)
        entry["metric"] = f"{format_currency(item['gtv'])} GTV"
        milestones.append(entry)
    return milestones


def ninety_day_churn(data: Optional[Mapping[str, Any]] = None) -> float:
    metrics = _table(data)["metrics"]
    return 100 - metrics["overall_retention_90_day"]


def cumulative_retention_frame(data: Optional[Mapping[str, Any]] = None) -> pd.DataFrame:
    """Long-format cumulative return rates with a ``segment`` column."""
    cumulative = _table(data)["engagement_metrics"]["cumulative_retention"]
    frames = []
    for key, label in (("buyers", "Buyers"), ("non_buyers", "Non-buyers")):
        segment = pd.DataFrame(_records(cumulative[key]))
        segment["segment"] = label
        frames.append(segment)
    return pd.concat(frames, ignore_index=True)


def retention_at_day(segment: str, day: int, data: Optional[Mapping[str, Any]] = None) -> Optional[float]:
    """Cumulative retention for ``segment`` at the latest point on or before ``day``."""
    frame = cumulative_retention_frame(data)
    rows = frame[(frame["segment"] == segment) & (frame["days"] <= day)]
    if rows.empty:
        return None
    return float(rows.sort_values("days")["retention"].iloc[-1])


def eventual_retention(segment: str, data: Optional[Mapping[str, Any]] = None) -> Optional[float]:
    frame = cumulative_retention_frame(data)
    rows = frame[frame["segment"] == segment]
    if rows.empty:
        return None
    return float(rows["retention"].max())


def dau_time_series_frame(data: Optional[Mapping[str, Any]] = None) -> pd.DataFrame:
    # Labels repeat after September ("Oct", "Oct", ...), so plot against the sample index.
    series = _table(data)["engagement_metrics"]["daily_active_users"]["time_series"]
    frame = pd.DataFrame(_records(series))
    frame.insert(0, "sample", np.arange(1, len(frame) + 1))
    return frame


def mau_frame(data: Optional[Mapping[str, Any]] = None) -> pd.DataFrame:
    return pd.DataFrame(_records(_table(data)["engagement_metrics"]["monthly_active_users"]))


def session_duration_frame(data: Optional[Mapping[str, Any]] = None) -> pd.DataFrame:
    return pd.DataFrame(_records(_table(data)["session_duration_evolution"]))


def stickiness_frame(data: Optional[Mapping[str, Any]] = None) -> pd.DataFrame:
    frame = pd.DataFrame(_records(_table(data)["engagement_metrics"]["stickiness"]))
    frame["label"] = frame["days"].map(lambda days: f"{days} day" if days == 1 else f"{days} days")
    return frame


def comment_breakdown(data: Optional[Mapping[str, Any]] = None) -> pd.DataFrame:
    social = _table(data)["engagement_metrics"]["social_metrics"]
    frame = pd.DataFrame(
        [
            {"channel": "Comments on events", "comments": social["comments_on_events"]},
            {"channel": "Comments on bios", "comments": social["comments_on_bios"]},
            {"channel": "Comments on videos", "comments": social["comments_on_videos"]},
        ]
    )
    total = frame["comments"].sum()
    frame["share"] = frame["comments"] / total * 100 if total > 0 else np.nan
    return frame


def retention_cohort_matrix(segment: str, data: Optional[Mapping[str, Any]] = None) -> pd.DataFrame:
    """Cohort month x months-since-first-use matrix (NaN where not yet observed)."""
    cohorts = _table(data)["retention_cohorts"][segment]
    frame = pd.DataFrame(_records(cohorts)).set_index("month")
    return frame.apply(pd.to_numeric, errors="coerce")
