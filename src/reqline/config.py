"""
Configuration management for reqline.

Uses Pydantic Settings for environment variable loading and validation.
Supports .env files and REQLINE_ prefixed environment variables.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from reqline.commands.registry import DEFAULT_NAMESPACE


class ReqlineSettings(BaseSettings):
    """Main configuration class for reqline."""

    model_config = SettingsConfigDict(
        env_prefix="REQLINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    workspace_root: Path = Field(
        default_factory=lambda: Path.home() / ".reqline",
        description="Root directory for reqline state and logs",
    )

    default_address: str = Field(
        default="http://0.0.0.0/", description="Address of the first request in a session"
    )

    namespace: str = Field(
        default=DEFAULT_NAMESPACE, description="Command namespace used by the console"
    )

    plain_output: bool = Field(
        default=False, description="Print without styling"
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Logging level")
    log_file: Optional[Path] = Field(None, description="Log file path")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return value

    @property
    def logs_dir(self) -> Path:
        """Directory for storing log files."""
        return self.workspace_root / "logs"

    def resolved_log_file(self) -> Path:
        """Log file to use: the configured one, or one in the logs directory."""
        return self.log_file or self.logs_dir / "reqline_console.log"


@lru_cache(maxsize=1)
def get_settings() -> ReqlineSettings:
    return ReqlineSettings()
