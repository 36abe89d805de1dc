"""
Centralized configuration management using Pydantic Settings.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator
from typing import Optional, List, Union
from pathlib import Path
import os


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Application
    app_name: str = "Task Service"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = Field(default="development", validation_alias="APP_ENV")

    # Database
    # Default to a local SQLite DB if DATABASE_URL is not provided
    database_url: str = Field(
        default=f"sqlite:///{Path(__file__).resolve().parent.parent.parent}/database.db",
        validation_alias="DATABASE_URL",
    )
    pool_size: int = 5
    max_overflow: int = 10
    pool_pre_ping: bool = True

    # CORS
    cors_origins: Union[str, List[str]] = Field(
        default_factory=lambda: ["http://localhost:3000"],
        validation_alias="CORS_ORIGINS"
    )
    cors_allow_credentials: bool = True
    cors_allow_methods: List[str] = Field(default_factory=lambda: ["*"])
    cors_allow_headers: List[str] = Field(default_factory=lambda: ["*"])

    # Logging
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_format: str = Field(default="json", validation_alias="LOG_FORMAT")  # json or text
    log_file: Optional[str] = Field(default=None, validation_alias="LOG_FILE")

    @field_validator("cors_origins", mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, str):
            if not v:  # Handle empty string
                return ["http://localhost:3000"]
            return [origin.strip() for origin in v.split(",")]
        elif v is None:
            return ["http://localhost:3000"]
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v):
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v):
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def is_testing(self) -> bool:
        return self.environment == "testing"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )


# Singleton instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the settings singleton instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    """Reload settings from environment (useful for testing)."""
    global _settings
    _settings = Settings()
    return _settings


# Environment-specific configuration loading
def load_environment_config(env: str = None) -> Settings:
    """Load environment-specific configuration."""
    if env:
        os.environ["APP_ENV"] = env
        settings = reload_settings()
    else:
        settings = get_settings()

    # Apply environment-specific overrides
    if settings.is_production:
        settings.debug = False
        settings.log_level = "WARNING"
    elif settings.is_development:
        settings.debug = True
        settings.log_level = "DEBUG"
    elif settings.is_testing:
        settings.debug = True
        settings.log_level = "INFO"
        settings.database_url = "sqlite:///./test.db"

    return settings
