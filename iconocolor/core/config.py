import logging
import sys
from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Process-level settings, read from ICONOCOLOR_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ICONOCOLOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Minimum level written to stderr")
    log_format: str = Field(
        default="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        description="logging format string"
    )

    # Engine
    root_cache_ttl: float = Field(default=5.0, ge=0, description="Root folder listing cache lifetime in seconds")
    memoize: bool = Field(default=True, description="Memoize resolved base colors and opacities")

    # Vault layout
    settings_file: str = Field(default="data.json", description="Plugin settings file name")
    plugin_dir: str = Field(default=".obsidian/plugins/iconocolor", description="Plugin directory inside the vault")
    ignored_dirs: str = Field(
        default=".obsidian,.git,.trash",
        description="Comma-separated directory names skipped when scanning a vault"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {v!r}")
        return level

    def get_ignored_dirs_list(self) -> List[str]:
        """Directory names the vault scanner skips, in configured order."""
        return [name.strip() for name in self.ignored_dirs.split(",") if name.strip()]

    def setup_logging(self) -> None:
        """Route iconocolor logging to stderr at the configured level."""
        logging.basicConfig(
            level=logging.getLevelName(self.log_level),
            format=self.log_format,
            stream=sys.stderr,
            force=True,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process settings, read once per process."""
    return Settings()
