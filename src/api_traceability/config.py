"""Runtime settings, read from TRACEABILITY_* environment variables."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for loading specs, logging and coverage reporting."""

    model_config = SettingsConfigDict(env_prefix="TRACEABILITY_", extra="ignore")

    log_level: str = "INFO"
    log_json: bool = False
    fetch_timeout: float = Field(default=10.0, gt=0)
    include_tests: bool = True
    # Component status thresholds, in percent
    healthy_threshold: float = Field(default=80.0, ge=0, le=100)
    warning_threshold: float = Field(default=60.0, ge=0, le=100)


@lru_cache
def get_settings() -> Settings:
    return Settings()
