# faqaas/config.py
import os
from functools import lru_cache

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from faqaas.errors import ConfigError

# Sentinel values that switch off a guard for local development
NO_ADMIN_PASSWORD_REQUIRED = "no-admin-password-required"
NO_API_KEY_REQUIRED = "no-api-key-required"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), ".env"),
        extra="ignore",
        frozen=True,
    )

    # App Config
    APP_NAME: str = "FAQ as a Service"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"

    # Database (PostgreSQL in production, SQLite works for local runs)
    DATABASE_URL: str

    # Secrets, all read once at startup
    JWT_KEY: str
    ADMIN_PASSWORD: str  # bcrypt hash, see scripts/hash_password.py
    API_KEY: str

    # Comma-separated list, the first entry is the default locale
    SUPPORTED_LOCALES: str

    # Local development only: no HTTPS redirect, no Secure cookie
    HTTP_ALLOWED: bool = False

    @field_validator("DATABASE_URL", "JWT_KEY", "ADMIN_PASSWORD", "API_KEY", "SUPPORTED_LOCALES")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value

    @field_validator("DATABASE_URL")
    @classmethod
    def _normalize_database_url(cls, value: str) -> str:
        # Heroku style URLs are rejected by SQLAlchemy 1.4+
        if value.startswith("postgres://"):
            return "postgresql://" + value[len("postgres://"):]
        return value

    @property
    def admin_password_required(self) -> bool:
        return self.ADMIN_PASSWORD != NO_ADMIN_PASSWORD_REQUIRED

    @property
    def api_key_required(self) -> bool:
        return self.API_KEY != NO_API_KEY_REQUIRED


def load_settings(**overrides) -> Settings:
    """Reads the settings from the environment, failing fast on missing values."""
    try:
        return Settings(**overrides)
    except ValidationError as e:
        missing = ", ".join(str(err["loc"][0]) for err in e.errors() if err.get("loc"))
        raise ConfigError(f"Invalid or missing configuration: {missing}") from e


@lru_cache
def get_settings() -> Settings:
    return load_settings()
