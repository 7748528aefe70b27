"""Engine configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings loaded from ``BLUEPRINT_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="BLUEPRINT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "Blueprint Engine"
    app_version: str = "2.0.0"
    log_level: str = "INFO"

    # Room detection
    min_room_area: float = Field(default=1.0, ge=0)
    max_cycle_length: int = Field(default=50, ge=3)


@lru_cache
def get_settings() -> Settings:
    return Settings()
