"""
Application settings and configuration management using Pydantic BaseSettings.
"""

from pathlib import Path
from typing import Optional
from enum import Enum

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_BASE_URL = "https://cloud-kitchen-backend-5dnj.onrender.com/api"


class Environment(str, Enum):
    """Environment enumeration"""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class ApiConfig(BaseSettings):
    """Backend API configuration."""
    base_url: str = Field(default=DEFAULT_API_BASE_URL)
    request_timeout: Optional[float] = Field(default=None, gt=0)

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("API base URL must start with http:// or https://")
        return v.rstrip("/")

    model_config = SettingsConfigDict(env_prefix="API_", extra="ignore")


class SessionConfig(BaseSettings):
    """Client-side session settings."""
    storage_path: str = Field(default="~/.kitchen_tracker/local_storage.json")
    token_key: str = Field(default="auth_token")
    allowed_email_domain: str = Field(default="gmail.com")
    resend_cooldown_seconds: int = Field(default=60, ge=0)

    @property
    def absolute_storage_path(self) -> Path:
        """Get absolute path to the local storage file."""
        return Path(self.storage_path).expanduser().resolve()

    model_config = SettingsConfigDict(env_prefix="SESSION_", extra="ignore")


class AppConfig(BaseSettings):
    """Application configuration settings."""
    environment: Environment = Field(default=Environment.DEVELOPMENT)
    log_level: str = Field(default="INFO")
    log_file: Optional[str] = Field(default=None)
    page_title: str = Field(default="Expense Tracker")
    page_icon: str = Field(default="🧾")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    model_config = SettingsConfigDict(env_prefix="APP_", extra="ignore")


def _load_env_file() -> None:
    """Load environment variables from .env file."""
    env_file = Path(".env")
    if env_file.exists():
        from dotenv import load_dotenv
        load_dotenv(env_file)


class Settings(BaseSettings):
    """Centralized application settings manager using Pydantic BaseSettings."""

    api: ApiConfig = Field(default_factory=ApiConfig)
    session: SessionConfig = Field(default_factory=SessionConfig)
    app: AppConfig = Field(default_factory=AppConfig)

    def __init__(self, **kwargs):
        _load_env_file()
        super().__init__(**kwargs)

    def endpoint(self, path: str) -> str:
        """Join a backend path onto the configured base URL."""
        return f"{self.api.base_url}/{path.lstrip('/')}"

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        extra="ignore",
    )
