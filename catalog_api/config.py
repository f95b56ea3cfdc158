"""Application configuration using Pydantic settings."""

from typing import Literal

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings

# Load .env file into os.environ before settings are read
load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    database_url: str = "sqlite:///./catalog.db"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    debug: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Answer 404 for missing records instead of 200 + null / unconditional success
    strict_not_found: bool = False

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        """Accept level names in any case, e.g. LOG_LEVEL=debug."""
        return value.upper() if isinstance(value, str) else value


settings = Settings()


def get_settings() -> Settings:
    """Dependency that provides the process-wide settings."""
    return settings
