"""Application configuration loaded from environment variables."""
import os
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # Database paths
    data_path: str = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

    @property
    def mood_db_path(self) -> str:
        return os.path.join(self.data_path, "moods.db")

    # API configuration
    api_host: str = "127.0.0.1"
    api_port: int = 8083
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    # Analytics
    trend_weeks: int = 7

    # Error tracking webhook for configuration errors (disabled when unset)
    error_report_url: Optional[str] = None

    class Config:
        env_prefix = "MOOD_"


@lru_cache
def get_settings() -> Settings:
    return Settings()
