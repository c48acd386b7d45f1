"""
Configuration settings using Pydantic
"""
from functools import lru_cache
from typing import Optional
from pathlib import Path
from pydantic_settings import BaseSettings

# Get the project root directory
ROOT_DIR = Path(__file__).resolve().parent.parent.parent
ENV_FILE = ROOT_DIR / ".env"


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # App
    APP_NAME: str = "Smart Row Highlighter"
    DEBUG: bool = False

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # monday.com board API
    MONDAY_API_URL: str = "https://api.monday.com/v2"
    MONDAY_API_TOKEN: Optional[str] = None
    MONDAY_API_VERSION: str = "2024-10"
    MONDAY_ITEMS_LIMIT: int = 500  # items_page cap per board
    MONDAY_TIMEOUT_SECONDS: float = 30.0

    # Rules
    RULES_EXPORT_VERSION: str = "1.0"
    RULES_STORAGE_PREFIX: str = "srh_rules_"
    DEFAULT_COLOR_ID: str = "yellow"

    class Config:
        env_file = str(ENV_FILE)
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
