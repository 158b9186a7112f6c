"""Application settings using Pydantic Settings."""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    server_name: str = Field(
        default="inventory-manager",
        description="MCP server name",
    )
    server_version: str = Field(
        default="1.0.0",
        description="MCP server version",
    )
    transport: Literal["stdio", "http", "sse"] = Field(
        default="stdio",
        description="MCP transport: stdio, http (streamable HTTP) or sse",
    )
    host: str = Field(
        default="127.0.0.1",
        description="Bind host for http/sse transports",
    )
    port: int = Field(
        default=8000,
        description="Bind port for http/sse transports",
    )

    # Data configuration
    data_file: Path | None = Field(
        default=None,
        description="JSON records file with currentInventory and optimalInventory objects",
    )
    sample_data_products_count: int = Field(
        default=0,
        ge=0,
        description="Number of generated sample products when no data file is set (0 uses built-in records)",
    )

    # Logging configuration
    log_level: str = Field(
        default="INFO",
        description="Root log level",
    )

    # LangFuse observability configuration
    langfuse_enabled: bool = Field(
        default=False,
        description="Enable LangFuse tracing",
    )
    langfuse_public_key: str | None = Field(
        default=None,
        description="LangFuse public key",
    )
    langfuse_secret_key: str | None = Field(
        default=None,
        description="LangFuse secret key",
    )
    langfuse_host: str = Field(
        default="https://cloud.langfuse.com",
        description="LangFuse host URL",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the log level name."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of {', '.join(LOG_LEVELS)}")
        return level

    def validate_required_credentials(self) -> None:
        """Disable tracing when it is enabled without credentials."""
        if self.langfuse_enabled:
            if not self.langfuse_public_key or not self.langfuse_secret_key:
                logger.warning("LangFuse is enabled but credentials are missing. Disabling LangFuse tracing.")
                self.langfuse_enabled = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    settings = Settings()
    settings.validate_required_credentials()
    return settings
