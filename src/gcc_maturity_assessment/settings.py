"""Service settings loaded from the environment.

All configuration uses the GCC_MATURITY_ env prefix, e.g.
``GCC_MATURITY_DATABASE_URL=postgresql+asyncpg://...``.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for gcc-maturity-assessment.

    Environment variable prefix: GCC_MATURITY_
    """

    service_name: str = "gcc-maturity-assessment"
    version: str = "0.1.0"

    # Database
    database_url: str = "sqlite+aiosqlite:///./gcc_maturity.db"
    database_echo: bool = False

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    # Seed the question bank and resource library into empty tables on startup
    seed_reference_data: bool = True

    model_config = SettingsConfigDict(env_prefix="GCC_MATURITY_")


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide Settings instance."""
    return Settings()
