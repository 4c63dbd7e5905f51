"""
Runtime settings for formstate.

Settings come from environment variables (optionally loaded from a .env
file). The reducer itself is pure and takes no settings; these only
control how the package logs.
"""

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env
load_dotenv()

DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class Settings(BaseModel):
    """Environment-derived settings."""

    log_level: str = Field(
        default="WARNING",
        description="Level name applied by configure_logging()",
    )
    log_format: str = Field(
        default=DEFAULT_LOG_FORMAT,
        description="Format string passed to logging.basicConfig",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: '{value}'")
        return level


def get_settings() -> Settings:
    """Build Settings from the current environment."""
    return Settings(
        log_level=os.getenv("FORMSTATE_LOG_LEVEL", "WARNING"),
        log_format=os.getenv("FORMSTATE_LOG_FORMAT", DEFAULT_LOG_FORMAT),
    )


def configure_logging(settings: Settings | None = None) -> None:
    """Configure root logging from settings (or the environment)."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format=settings.log_format,
    )
