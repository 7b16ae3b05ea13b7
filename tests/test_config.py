from __future__ import annotations

from shop.core import config as core_config


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("APP_ENV", "PROD")
    monkeypatch.setenv("DATABASE_URL", " sqlite:///x.db ")
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example/, https://b.example")
    monkeypatch.setenv("SQL_ECHO", "yes")
    core_config.get_settings.cache_clear()
    try:
        settings = core_config.get_settings()
    finally:
        core_config.get_settings.cache_clear()

    assert settings.app_env == "prod"
    assert settings.database_url == "sqlite:///x.db"
    assert settings.cors_origins == ("https://a.example", "https://b.example")
    assert settings.sql_echo is True


def test_configure_logging_installs_one_handler():
    import logging

    from shop.core import logging_config

    root = logging.getLogger()
    before = len(root.handlers)
    try:
        logging_config.configure_logging("debug")
        logging_config.configure_logging("warning")

        assert root.handlers.count(logging_config._handler) == 1
        assert len(root.handlers) <= before + 1
        assert root.level == logging.WARNING
    finally:
        root.removeHandler(logging_config._handler)
