"""Tests for Settings: URL normalization, presence checks and secret collection."""

from hanami.config import DIAGNOSTIC_VARIABLES, Settings


def test_postgres_urls_get_async_driver():
    settings = Settings(
        database_url="postgresql://u:p@db/hanami",
        database_service_url="postgres://svc:q@db/hanami",
    )
    assert settings.database_url.startswith("postgresql+asyncpg://")
    assert settings.database_service_url.startswith("postgresql+asyncpg://")


def test_elevated_url_falls_back_to_standard():
    settings = Settings(database_url="sqlite+aiosqlite:///:memory:")
    assert settings.elevated_database_url == "sqlite+aiosqlite:///:memory:"


def test_elevated_url_prefers_service_url():
    settings = Settings(
        database_url="sqlite+aiosqlite:///a.db",
        database_service_url="sqlite+aiosqlite:///b.db",
    )
    assert settings.elevated_database_url == "sqlite+aiosqlite:///b.db"


def test_default_values_do_not_count_as_configured(monkeypatch):
    for variable in DIAGNOSTIC_VARIABLES:
        monkeypatch.delenv(variable, raising=False)
    settings = Settings(_env_file=None)
    assert not any(settings.is_configured(v) for v in DIAGNOSTIC_VARIABLES)


def test_empty_value_does_not_count_as_configured():
    settings = Settings(supabase_anon_key="", ingress_secret="s3cret-value")
    assert not settings.is_configured("SUPABASE_ANON_KEY")
    assert settings.is_configured("INGRESS_SECRET")


def test_secret_values_include_url_passwords():
    settings = Settings(
        database_url="postgresql://hanami:dbpassword@db/hanami",
        supabase_service_role_key="service-role-key",
    )
    secrets = settings.secret_values()
    assert "dbpassword" in secrets
    assert "service-role-key" in secrets
    assert settings.database_url in secrets
