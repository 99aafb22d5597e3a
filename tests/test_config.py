from __future__ import annotations

import logging

import pytest

from bombo_dashboard import bootstrap_env, logging_config
from bombo_dashboard.config import (
    DEFAULT_DATA_ROOM_URL,
    DEFAULT_TITLE,
    SECTIONS,
    get_settings,
    load_settings,
)


def test_sections_follow_page_order() -> None:
    assert [section.key for section in SECTIONS] == ["hero", "financial", "engagement"]
    assert [section.label for section in SECTIONS] == ["Overview", "Financials", "Engagement"]


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("DATA_ROOM_URL", "LOG_LEVEL", "SHOW_TABLE_DOWNLOADS"):
        monkeypatch.delenv(key, raising=False)
    settings = load_settings()
    assert settings.dashboard_title == DEFAULT_TITLE
    assert settings.data_room_url == DEFAULT_DATA_ROOM_URL
    assert settings.log_level == "INFO"
    assert settings.show_table_downloads is True


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DASHBOARD_TITLE", "BOMBO Board Pack")
    monkeypatch.setenv("DATA_ROOM_URL", "https://example.com/dr")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("SHOW_TABLE_DOWNLOADS", "no")
    settings = load_settings()
    assert settings.dashboard_title == "BOMBO Board Pack"
    assert settings.data_room_url == "https://example.com/dr"
    assert settings.log_level == "DEBUG"
    assert settings.show_table_downloads is False


def test_blank_values_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATA_ROOM_URL", "   ")
    monkeypatch.setenv("SHOW_TABLE_DOWNLOADS", "")
    settings = load_settings()
    assert settings.data_room_url == DEFAULT_DATA_ROOM_URL
    assert settings.show_table_downloads is True


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


def test_secret_keys_are_flattened() -> None:
    assert bootstrap_env._sanitize_key("data-room.url") == "DATA_ROOM_URL"
    flattened = list(bootstrap_env._flatten_secrets("app", {"title": "BOMBO", "links": {"dr": 1}}))
    assert flattened == [("APP_TITLE", "BOMBO"), ("APP_LINKS_DR", "1")]


def test_ensure_env_without_secrets_file() -> None:
    # No secrets.toml in the test environment; bootstrapping must still succeed.
    bootstrap_env.ensure_env()


def test_configure_logging_sets_package_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(logging_config, "_LOGGING_CONFIGURED", False)
    package_logger = logging.getLogger("bombo_dashboard")
    monkeypatch.setattr(package_logger, "level", package_logger.level)
    logging_config.configure_logging("DEBUG")
    assert package_logger.level == logging.DEBUG

    # Later calls are no-ops once configured.
    logging_config.configure_logging("ERROR")
    assert package_logger.level == logging.DEBUG
