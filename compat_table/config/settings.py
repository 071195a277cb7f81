"""
Application Settings
===================

Application settings and environment configuration using Pydantic Settings.
Supports development, testing, and production environments.
"""

import json
from typing import Dict, Optional, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from compat_table.models.schemas import DEFAULT_BROWSERS, TableLabels


class Settings(BaseSettings):
    """Main application settings with environment variable support."""

    # Application Configuration
    app_name: str = Field(default="Compat Table", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: str = Field(
        default="development", description="Environment: development, testing, production"
    )
    debug: bool = Field(default=False, description="Debug mode")
    log_level: str = Field(default="INFO", description="Logging level")

    # Localization Configuration
    locale: str = Field(default="en-US", description="Locale used as first URL path segment")
    labels: TableLabels = Field(default_factory=TableLabels, description="Localized table labels")

    # Table Configuration
    browsers: Dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_BROWSERS),
        description="Ordered browser identifier to display name catalog",
    )
    label_column_width: int = Field(
        default=30, ge=1, le=99, description="Width of the row label column in percent"
    )

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        allowed = {"development", "testing", "production"}
        if v not in allowed:
            raise ValueError(f"Environment must be one of: {allowed}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of: {allowed}")
        return v.upper()

    @field_validator("browsers", mode="before")
    @classmethod
    def parse_browsers(cls, v: Union[str, Dict[str, str]]) -> Dict[str, str]:
        """Parse the browser catalog from a JSON object string or mapping."""
        if isinstance(v, str):
            v = json.loads(v)
        if not v:
            raise ValueError("Browser catalog must contain at least one browser")
        return v

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="COMPAT_TABLE_",
        env_nested_delimiter="__",
    )


# Global settings instance - will be initialized when needed
settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global settings
    if settings is None:
        settings = Settings()
    return settings


def reload_settings() -> Settings:
    """Reload settings from environment."""
    global settings
    settings = Settings()
    return settings
