"""Runtime settings for the report runner and logging."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = "INFO"
    currency: str = "GHS"
    timezone: str = "Africa/Accra"
    dashboard_range: str = "7d"
    report_range: str = "30d"

    model_config = SettingsConfigDict(env_prefix="SHOPDASH_", env_file=".env", extra="ignore")


settings = Settings()
