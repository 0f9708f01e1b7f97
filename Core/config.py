"""
PocketCoach Configuration
Load environment variables and define core settings.
"""
from typing import Literal, Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    # App
    APP_NAME: str = "PocketCoach"
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Exercise catalog (JSON). Falls back to the built-in catalog when unset.
    CATALOG_PATH: Optional[str] = None

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# ============================================================
# Example .env file (create this in your project root):
# ============================================================
"""
DEBUG=true
LOG_LEVEL=DEBUG
CATALOG_PATH=./exercises.json
"""
