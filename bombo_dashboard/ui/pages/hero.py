from __future__ import annotations

import logging
from typing import List

import streamlit as st

from bombo_dashboard.data.derived import ninety_day_churn
from bombo_dashboard.ui.components.kpi import KpiCard, render_kpi_cards
from bombo_dashboard.ui.layout import section_header
from bombo_dashboard.ui.pages.context import PageContext

logger = logging.getLogger(__name__)

HEADLINE = "Bombo's Key Metrics Dashboard"


def key_metric_cards(context: PageContext) -> List[KpiCard]:
    metrics = context.data["metrics"]
    return [
        KpiCard(label="Total Users", value=metrics["total_users"], kind="number", suffix="+"),
        KpiCard(label="Gross Transaction Value", value=metrics["total_gtv"], kind="currency", suffix="+"),
        KpiCard(label="LTV:CAC Ratio", value=metrics["ltv_cac_ratio"], kind="ratio"),
    ]


def quick_stat_cards(context: PageContext) -> List[KpiCard]:
    metrics = context.data["metrics"]
    return [
        KpiCard(label="CAC", value=metrics["cac"], kind="currency"),
        KpiCard(label="Peak MAU", value=metrics["peak_mau"], kind="number"),
        KpiCard(label="Tickets Sold", value=metrics["tickets_sold"], kind="number"),
        KpiCard(label="90-Day Churn", value=ninety_day_churn(context.data), kind="percent"),
    ]


def render(context: PageContext) -> None:
    section_header(context.section, HEADLINE)
    render_kpi_cards(key_metric_cards(context), columns=3)
    st.markdown("#### Quick Stats")
    render_kpi_cards(quick_stat_cards(context), columns=4)
    logger.debug("Rendered hero section")
