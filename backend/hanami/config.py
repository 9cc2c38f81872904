"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache), single instance per process
    - A missing optional variable never raises; it reads as None
    - secret_values() lists every value that must never reach a response or a log

Design Decisions:
    - Two database URLs: DATABASE_URL (standard role, row-level security applies)
      and DATABASE_SERVICE_URL (service role); the latter falls back to the former
    - Defaults provided for all non-secret settings: works out-of-the-box with docker-compose
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

# Names reported by the configuration diagnostic endpoint, mapped to Settings fields.
DIAGNOSTIC_VARIABLES: dict[str, str] = {
    "DATABASE_URL": "database_url",
    "DATABASE_SERVICE_URL": "database_service_url",
    "SUPABASE_URL": "supabase_url",
    "SUPABASE_ANON_KEY": "supabase_anon_key",
    "SUPABASE_SERVICE_ROLE_KEY": "supabase_service_role_key",
    "N8N_INGRESS_WEBHOOK_URL": "n8n_ingress_webhook_url",
    "INGRESS_SECRET": "ingress_secret",
    "BASE_URL": "base_url",
}


def _to_async_driver(v):
    """Hosting providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
    if isinstance(v, str) and v.startswith("postgresql://"):
        return v.replace("postgresql://", "postgresql+asyncpg://", 1)
    if isinstance(v, str) and v.startswith("postgres://"):
        return v.replace("postgres://", "postgresql+asyncpg://", 1)
    return v


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore",
    )

    # Database: standard tier
    database_url: str = (
        "postgresql+asyncpg://hanami:hanami@db:5432/hanami"
    )
    # Database: elevated tier (service role)
    database_service_url: str | None = None

    @field_validator("database_url", "database_service_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v):
        return _to_async_driver(v)

    database_pool_size: int = 10
    database_max_overflow: int = 10

    # Hosted data service credentials
    supabase_url: str | None = None
    supabase_anon_key: str | None = None
    supabase_service_role_key: str | None = None

    # Messaging integration
    n8n_ingress_webhook_url: str | None = None
    ingress_secret: str | None = None

    # Link generation
    base_url: str | None = None

    # API
    cors_origins: list[str] = ["http://localhost:3000"]
    expose_error_details: bool = False

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def elevated_database_url(self) -> str:
        return self.database_service_url or self.database_url

    def is_configured(self, variable: str) -> bool:
        """True when the named environment variable supplied a non-empty value."""
        field_name = DIAGNOSTIC_VARIABLES[variable]
        if field_name not in self.model_fields_set:
            return False
        return bool(getattr(self, field_name))

    def secret_values(self) -> list[str]:
        """Every configured value that must be masked, including URL passwords."""
        secrets = [
            self.supabase_anon_key,
            self.supabase_service_role_key,
            self.ingress_secret,
            self.n8n_ingress_webhook_url,
        ]
        for url in (self.database_url, self.database_service_url):
            if not url:
                continue
            secrets.append(url)
            try:
                secrets.append(make_url(url).password)
            except ArgumentError:
                continue  # unparseable URL: already masked as a whole
        return [s for s in secrets if s]


@lru_cache
def get_settings() -> Settings:
    return Settings()
