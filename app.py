import bombo_dashboard.bootstrap_env  # must be first to set env/secrets
import logging

import streamlit as st

from bombo_dashboard.config import SECTIONS, get_settings
from bombo_dashboard.data.metrics import get_dashboard_data
from bombo_dashboard.logging_config import configure_logging
from bombo_dashboard.ui.layout import data_room_button, setup_page, sidebar_navigation
from bombo_dashboard.ui.pages import engagement, financial, hero
from bombo_dashboard.ui.pages.context import PageContext

logger = logging.getLogger("bombo_dashboard.app")

SECTION_RENDERERS = {
    "hero": hero.render,
    "financial": financial.render,
    "engagement": engagement.render,
}


def main() -> None:
    configure_logging()
    settings = get_settings()
    logger.debug("Starting dashboard render: %s", settings.dashboard_title)
    setup_page(settings.dashboard_title)
    sidebar_navigation(SECTIONS)
    data_room_button(settings.data_room_url)

    data = get_dashboard_data()
    for section in SECTIONS:
        renderer = SECTION_RENDERERS.get(section.key)
        if renderer is None:
            logger.warning("No renderer registered for section %s", section.key)
            continue
        renderer(PageContext(data=data, settings=settings, section=section))

    st.divider()
    data_room_button(settings.data_room_url, help="Return to the BOMBO data room")
    logger.debug("Rendered %d sections", len(SECTIONS))


if __name__ == "__main__":
    main()
