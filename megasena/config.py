"""Environment-based configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal

from sqlalchemy.engine import URL


def resolve_database_url() -> str:
    """Resolve DB connection string.

    Priority:
      1) DATABASE_URL (explicit)
      2) Build from PG* env vars (common Postgres convention)
      3) Fallback to local sqlite
    """

    explicit = os.getenv("DATABASE_URL")
    if explicit:
        return explicit

    host = os.getenv("PGHOST")
    user = os.getenv("PGUSER")
    database = os.getenv("PGDATABASE")
    port_raw = os.getenv("PGPORT")

    if host and user and database:
        try:
            port = int(port_raw) if port_raw else 5432
        except ValueError:
            port = 5432

        sslmode = os.getenv("PGSSLMODE", "prefer")
        url = URL.create(
            drivername="postgresql+psycopg2",
            username=user,
            password=os.getenv("PGPASSWORD"),
            host=host,
            port=port,
            database=database,
            query={"sslmode": sslmode} if sslmode else {},
        )
        return url.render_as_string(hide_password=False)

    return "sqlite:///./megasena.db"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class BaseConfig:
    """Base configuration shared by all environments."""

    APP_ENV: str = os.getenv("APP_ENV", "development")
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = os.getenv("LOG_FORMAT", "%(asctime)s %(levelname)s %(name)s %(message)s")
    TESTING: bool = False
    # Spreadsheet uploads
    MAX_CONTENT_LENGTH: int = _env_int("MAX_UPLOAD_BYTES", 16 * 1024 * 1024)

    DATABASE_URL: str = resolve_database_url()

    # Closure pool bounds; C(12, 6) = 924 bets.
    CLOSURE_MIN_POOL: int = _env_int("CLOSURE_MIN_POOL", 6)
    CLOSURE_MAX_POOL: int = _env_int("CLOSURE_MAX_POOL", 12)

    MAX_GENERATED_BETS: int = _env_int("MAX_GENERATED_BETS", 50)
    DEFAULT_MIN_HITS: int = _env_int("DEFAULT_MIN_HITS", 4)
    BET_PRICE: Decimal = Decimal(os.getenv("BET_PRICE", "5.00"))

    # AI-assisted bet generation
    GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY", "")
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
    GEMINI_BASE_URL: str = os.getenv(
        "GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta"
    )
    GEMINI_TIMEOUT_SECONDS: int = _env_int("GEMINI_TIMEOUT_SECONDS", 30)


@dataclass(frozen=True)
class DevelopmentConfig(BaseConfig):
    """Development configuration."""

    DEBUG: bool = True


@dataclass(frozen=True)
class ProductionConfig(BaseConfig):
    """Production configuration."""

    DEBUG: bool = False


@dataclass(frozen=True)
class TestingConfig(BaseConfig):
    """Test configuration (in-process SQLite, no AI key)."""

    DEBUG: bool = False
    TESTING: bool = True
    DATABASE_URL: str = "sqlite://"
    GEMINI_API_KEY: str = ""


def get_config() -> type[BaseConfig]:
    """Resolve configuration class based on APP_ENV."""

    env = os.getenv("APP_ENV", "development").lower().strip()
    if env == "production":
        return ProductionConfig
    if env == "testing":
        return TestingConfig
    return DevelopmentConfig
