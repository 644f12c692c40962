"""
Application configuration.
Settings are read from environment variables (and an optional .env file).
"""
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(case_sensitive=True, extra="ignore")

    APP_NAME: str = "Staff Directory API"
    APP_DESCRIPTION: str = (
        "API for managing employees, departments, areas and managers"
    )

    # MongoDB
    MONGO_URL: str = "mongodb://localhost:27017"
    DB_NAME: str = "staff_directory"

    # HTTP
    API_PREFIX: str = "/api/v1"
    DOCS_URL: str = "/api-docs"
    CORS_ORIGINS: List[str] = ["*"]
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"
    LOG_FILE: Optional[str] = None

    # Refuse to delete an area that is still named by a department
    AREA_DELETE_GUARD: bool = False

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Only json and text formatters exist."""
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("LOG_FORMAT must be 'json' or 'text'")
        return v


settings = Settings()
