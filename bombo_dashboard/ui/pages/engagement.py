from __future__ import annotations

import logging
from typing import List

import streamlit as st

from bombo_dashboard.data.derived import (
    comment_breakdown,
    cumulative_retention_frame,
    dau_time_series_frame,
    eventual_retention,
    mau_frame,
    retention_at_day,
    retention_cohort_matrix,
    session_duration_frame,
    stickiness_frame,
)
from bombo_dashboard.ui.components.charts import (
    area_chart,
    bar_chart,
    heatmap,
    line_chart,
    render_plotly,
)
from bombo_dashboard.ui.components.formatting import (
    format_compact,
    format_minutes,
    format_number,
    format_percentage,
)
from bombo_dashboard.ui.components.kpi import KpiCard, render_kpi_cards
from bombo_dashboard.ui.layout import section_header
from bombo_dashboard.ui.pages.context import PageContext

logger = logging.getLogger(__name__)

TITLE = "Bombo Metrics Overview"
ROADMAP = [
    "News feed implementation scheduled for Q1 2026, which will fundamentally transform user "
    "engagement patterns on the platform.",
    "Expected **50x+ increase in user interactions** within the first 6 months post-implementation, "
    "based on industry benchmarks and user behavior analysis.",
]


def _pct(value) -> str:
    # Whole-number rates read as "80%", fractional ones keep their precision.
    if value is None:
        return format_percentage(None)
    if float(value).is_integer():
        return f"{int(value)}%"
    return f"{value:g}%"


def highlights_markdown(context: PageContext) -> str:
    metrics = context.data["metrics"]
    mau_stats = context.data["engagement_metrics"]["mau_stats"]
    peak_dau = context.data["engagement_metrics"]["daily_active_users"]["peak"]
    return "\n\n".join(
        [
            f"Bombo reached **{format_number(peak_dau).lower()}+ DAU** and "
            f"**{format_number(mau_stats['peak']).lower()}+ MAU**, representing significant growth "
            "acceleration. The August 2024 to August 2025 analysis shows retention metrics have "
            "strengthened.",
            "When segmenting between buyers and non-buyers, retention in 2025 shows remarkable improvement:",
            f"- **Buyers:** {_pct(metrics['buyers_monthly_retention'])} retention the following month "
            f"(up from {_pct(metrics['buyers_monthly_retention_prev'])})\n"
            f"- **Non-buyers:** {_pct(metrics['non_buyers_monthly_retention'])} retention the following month "
            f"(up from {_pct(metrics['non_buyers_monthly_retention_prev'])})",
            "Cumulative return rate tracks how many users return at least once after their first use: "
            f"{_pct(metrics['all_users_return_30_days'])} of all users return within the first 30 days "
            f"(up from {_pct(metrics['all_users_return_30_days_prev'])}).",
            f"- **Buyers:** {_pct(metrics['buyers_eventual_return'])} return within 5 months, and "
            f"{_pct(metrics['buyers_return_30_days'])} do so within the first 30 days\n"
            f"- **Non-buyers:** {_pct(metrics['non_buyers_eventual_return'])} return, and "
            f"{_pct(metrics['non_buyers_return_30_days'])} come back within the first 30 days",
        ]
    )


def active_user_cards(context: PageContext) -> List[KpiCard]:
    dau = context.data["engagement_metrics"]["daily_active_users"]
    mau = context.data["engagement_metrics"]["mau_stats"]
    return [
        KpiCard(label="Median DAU", value=dau["median"]),
        KpiCard(label="Mean DAU", value=dau["mean"]),
        KpiCard(label="Peak DAU", value=dau["peak"]),
        KpiCard(label="Peak MAU", value=mau["peak"], help_text=mau["peak_month"]),
        KpiCard(label="Average MAU", value=mau["average"]),
        KpiCard(label="Median MAU", value=mau["median"]),
    ]


def _render_active_users(context: PageContext) -> None:
    st.markdown("### User Interaction")
    render_kpi_cards(active_user_cards(context), columns=3)

    dau_col, mau_col = st.columns(2)
    with dau_col:
        fig = line_chart(
            dau_time_series_frame(context.data),
            x="sample",
            y="value",
            title="Daily Active Users (September 2024 - August 2025)",
            yaxis_title="Users",
            yaxis_tickformat="~s",
            markers=False,
            hover_data=["date"],
        )
        fig.update_xaxes(showticklabels=False, title=None)
        render_plotly(fig)
    with mau_col:
        fig = bar_chart(
            mau_frame(context.data),
            x="month",
            y="value",
            title="Monthly Active Users",
            yaxis_title="Users",
            yaxis_tickformat="~s",
        )
        render_plotly(fig)


def _render_retention(context: PageContext) -> None:
    st.markdown("### User retention per cohort - Buyers vs Non-Buyers")
    fig = area_chart(
        cumulative_retention_frame(context.data),
        x="days",
        y="retention",
        color="segment",
        yaxis_title="Cumulative %",
        xaxis_title="Days",
    )
    render_plotly(fig)

    cols = st.columns(2)
    for col, segment in zip(cols, ("Buyers", "Non-buyers")):
        with col:
            st.metric(
                label=f"{segment}: eventually return",
                value=_pct(eventual_retention(segment, context.data)),
            )
            st.caption(
                f"{_pct(retention_at_day(segment, 30, context.data))} re-engage within first 30 days"
            )

    with st.expander("Monthly cohort retention"):
        buyers_col, non_buyers_col = st.columns(2)
        with buyers_col:
            render_plotly(heatmap(retention_cohort_matrix("buyers", context.data), title="Buyers"))
        with non_buyers_col:
            render_plotly(heatmap(retention_cohort_matrix("non_buyers", context.data), title="Non-buyers"))


def _render_sessions(context: PageContext) -> None:
    st.markdown("### Average Session Duration")
    st.caption("How long users stay for news, tickets & community · April 2024 - August 2025")
    sessions = session_duration_frame(context.data)
    fig = line_chart(
        sessions,
        x="month",
        y="duration",
        yaxis_title="Duration (minutes)",
    )
    render_plotly(fig)

    if not sessions.empty:
        peak = sessions.loc[sessions["duration"].idxmax()]
        first = sessions.iloc[0]
        last = sessions.iloc[-1]
        cards = [
            KpiCard(label=first["month"], value_display=format_minutes(first["duration"])),
            KpiCard(label=f"Peak ({peak['month']})", value_display=format_minutes(peak["duration"])),
            KpiCard(label=last["month"], value_display=format_minutes(last["duration"])),
            KpiCard(
                label="Growth",
                value_display=f"+{_pct(context.data['metrics']['session_growth_yoy'])}",
            ),
        ]
        render_kpi_cards(cards, columns=4)


def _render_stickiness(context: PageContext) -> None:
    st.markdown("### Frequency of Visits: Stickiness")
    st.write(
        "Stickiness measures **habit formation**: the more frequently users open Bombo, the deeper their "
        "engagement and the higher their likelihood to convert into loyal buyers. It is a leading "
        "indicator of **long-term retention and monetization potential**."
    )
    fig = bar_chart(
        stickiness_frame(context.data),
        x="label",
        y="percentage",
        yaxis_title="Percentage",
        yaxis_tickformat=".1f",
        text_auto=".2f",
        labels={"label": "Days Active"},
    )
    render_plotly(fig)


def _render_social(context: PageContext) -> None:
    social = context.data["engagement_metrics"]["social_metrics"]
    st.markdown("### Content Creation & Social Media")
    render_kpi_cards(
        [
            KpiCard(
                label="Daily messages",
                value_display=format_compact(social["daily_messages"]),
                help_text="Average across the whole app",
            ),
            KpiCard(label="Messages per chat", value_display=f"{social['messages_per_chat']:g}"),
            KpiCard(label="Average chat time", value_display=format_minutes(social["avg_chat_duration"])),
        ],
        columns=3,
    )

    breakdown = comment_breakdown(context.data)
    st.caption(f"Amount of comments (January to today) · Average: {social['daily_comments']} comments per day")
    render_kpi_cards(
        [
            KpiCard(
                label=row["channel"],
                value_display=format_compact(row["comments"]),
                help_text=f"{format_percentage(row['share'])} of total",
            )
            for _, row in breakdown.iterrows()
        ],
        columns=3,
    )


def _render_reach(context: PageContext) -> None:
    engagement = context.data["engagement_metrics"]
    news, push, events = engagement["news_feed"], engagement["push_notifications"], engagement["events"]
    push_seconds = push["avg_time_spent"] * 60
    render_kpi_cards(
        [
            KpiCard(
                label="Access to News Feed",
                value_display=format_number(news["total_users"]),
                help_text=f"Total users entered News Section over the last {news['period']}",
            ),
            KpiCard(
                label="Push Notifications",
                value_display=format_compact(push["total_users"]),
                help_text=f"People accessed notifications, {push['period']}",
            ),
            KpiCard(
                label="Average time on notifications",
                value_display=f"{push['avg_time_spent']:g} minutes",
                help_text=f"({push_seconds:.1f} seconds)",
            ),
        ],
        columns=3,
    )
    st.markdown("### Evolution of access to events")
    render_kpi_cards(
        [
            KpiCard(
                label="Event views / entries",
                value_display=format_compact(events["total_views"]),
                help_text="In 11 months",
            ),
            KpiCard(
                label="Unique users",
                value_display=format_compact(events["unique_users"]),
                help_text="Activity registered within the events section",
            ),
            KpiCard(
                label="Interactions per user",
                value=events["avg_interactions_per_user"],
                kind="raw",
                help_text="Showing high engagement",
            ),
        ],
        columns=3,
    )


def render(context: PageContext) -> None:
    section_header(context.section, TITLE)
    st.caption("**Disclaimer:** Active Users = 1 log in a day")
    st.markdown("### Highlights")
    st.markdown(highlights_markdown(context))

    _render_active_users(context)
    _render_retention(context)
    _render_sessions(context)
    _render_stickiness(context)
    _render_social(context)
    _render_reach(context)

    st.markdown("### Future Product Roadmap")
    st.markdown("\n".join(f"- {item}" for item in ROADMAP))
    logger.debug("Rendered engagement section")
