"""Configuration management for the static usage graph."""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .graph import UsageGraph

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Settings loaded from STATIC_USAGE_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="STATIC_USAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    announce_duplicates: bool = Field(
        default=True,
        description="Log every add call, including ones that re-add a known edge",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, level: str) -> str:
        """Accept any case of a standard level name and store it upper-cased."""
        name = level.strip().upper()
        if name not in LOG_LEVELS:
            raise ValueError(
                f"Unknown log level {level!r}, expected one of {', '.join(LOG_LEVELS)}"
            )
        return name

    def create_graph(self) -> UsageGraph:
        """Create an empty usage graph for one analysis pass."""
        return UsageGraph(announce_duplicates=self.announce_duplicates)


def setup_logging(level: str) -> None:
    """Send package log records, including edge announcements, to stderr.

    Args:
        level: One of LOG_LEVELS
    """
    logging.basicConfig(
        level=logging.getLevelName(level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
