"""Settings — environment overrides and URL normalization."""

from replication_order.config import Settings, get_settings


def test_defaults_use_in_memory_sqlite(monkeypatch):
    monkeypatch.delenv("REPLICATION_ORDER_DATABASE_URL", raising=False)
    settings = Settings(_env_file=None)
    assert settings.database_url == "sqlite+aiosqlite:///:memory:"
    assert settings.strict_references is False
    assert settings.tag_separator == ", "


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("REPLICATION_ORDER_STRICT_REFERENCES", "true")
    monkeypatch.setenv("REPLICATION_ORDER_LOG_FORMAT", "text")
    settings = get_settings()
    assert settings.strict_references is True
    assert settings.log_format == "text"


def test_plain_sqlite_url_gets_async_driver():
    settings = Settings(database_url="sqlite:///:memory:")
    assert settings.database_url == "sqlite+aiosqlite:///:memory:"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
