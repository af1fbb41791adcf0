"""Configuration management for schemadiff.

Settings come from environment variables prefixed with ``SCHEMADIFF_`` and
can be overridden by command-line options.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DiffSettings(BaseSettings):
    """Runtime configuration for the schemadiff command-line interface."""

    model_config = SettingsConfigDict(env_prefix="SCHEMADIFF_", case_sensitive=False)

    # Environment
    environment: Literal["development", "testing", "production"] = Field(
        default="development", description="Application environment"
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Log level")
    json_logs: bool = Field(default=False, description="Enable JSON formatted logs")

    # Output
    output_format: Literal["table", "json"] = Field(
        default="table", description="Report output format"
    )

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == "production"


def get_settings() -> DiffSettings:
    """Load settings from the current environment."""
    return DiffSettings()
