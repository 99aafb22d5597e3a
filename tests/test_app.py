# End-to-end render of the Streamlit script.

from __future__ import annotations

from pathlib import Path

from streamlit.testing.v1 import AppTest

APP_PATH = Path(__file__).resolve().parent.parent / "app.py"


def _run() -> AppTest:
    at = AppTest.from_file(str(APP_PATH), default_timeout=60)
    at.run()
    return at


def test_app_renders_without_exception() -> None:
    at = _run()
    assert not at.exception


def test_sections_render_in_order() -> None:
    at = _run()
    assert [header.value for header in at.header] == [
        "Bombo's Key Metrics Dashboard",
        "Financial Performance",
        "Bombo Metrics Overview",
    ]


def test_hero_metrics_displayed() -> None:
    at = _run()
    values = {metric.label: metric.value for metric in at.metric}
    assert values["Total Users"] == "801K+"
    assert values["Gross Transaction Value"] == "$70.0M+"
    assert values["LTV:CAC Ratio"] == "25.3x"
    assert values["90-Day Churn"] == "20.8%"
    assert values["Year-over-Year Growth (Jan-Aug)"] == "+67%"
