"""Runtime configuration."""

import logging
from functools import lru_cache

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BACKEND_URL = "http://localhost:8000"


class Settings(BaseSettings):
    """Dashboard settings, read from HEALTH_DASHBOARD_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="HEALTH_DASHBOARD_", extra="ignore")

    backend_url: str = DEFAULT_BACKEND_URL
    api_prefix: str = "/api"

    # Session defaults for the identity/context store
    user_id: str = "demo-user-1"
    city: str = "Jakarta"
    latitude: float = -6.200000
    longitude: float = 106.816666

    log_level: str = "WARNING"


@lru_cache
def get_settings() -> Settings:
    """Resolve settings once per process."""
    load_dotenv()
    return Settings()


def configure_logging(level: str | int) -> None:
    """Configure root logging for CLI runs."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("health_dashboard").setLevel(level)
