"""Application configuration."""

from os import getenv

from pydantic import BaseModel


class Settings(BaseModel):
    """Runtime settings for the application."""

    app_name: str = "nunu-log API"
    app_env: str = getenv("APP_ENV", "dev")
    debug: bool = getenv("DEBUG", "0") == "1"
    database_url: str = getenv("DATABASE_URL", "sqlite:///./nunu_log.db")
    api_token: str = getenv("NUNU_LOG_API_TOKEN", "")
    default_tz_offset: int = int(getenv("DEFAULT_TZ_OFFSET", "0"))
    max_tz_offset_minutes: int = 24 * 60


settings: Settings = Settings()
