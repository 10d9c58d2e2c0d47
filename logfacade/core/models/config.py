"""
Configuration models.

Provides Pydantic models for logfacade configuration with validation.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import ConfigDict, Field, field_validator

from ..levels import Level, LevelName
from .base import LogFacadeBaseModel

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


class ConfigBaseModel(LogFacadeBaseModel):
    """Base model for config sections with relaxed strict mode for TOML loading."""

    model_config = ConfigDict(
        strict=False,  # Allow coercion from TOML/env types
        validate_assignment=True,
        extra="ignore",  # Ignore unknown fields in config files
        populate_by_name=True,
        revalidate_instances="never",
    )


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section for the stdlib backend."""

    name: str = "logfacade"
    level: LevelName = "info"
    console: bool = True
    file: bool = False
    file_path: Path = Field(default_factory=lambda: Path.home() / ".logfacade" / "logfacade.log")
    max_bytes: int = Field(default=10 * 1024 * 1024, gt=0)  # 10MB
    backup_count: int = Field(default=3, ge=0)
    format: str = DEFAULT_FORMAT
    datefmt: str = DEFAULT_DATEFMT

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        """Accept any spelling Level.parse understands, store the canonical name."""
        if isinstance(v, (str, int)) and not isinstance(v, bool):
            return Level.parse(v).method_name
        return v

    @property
    def threshold(self) -> Level:
        """Configured level as a Level value."""
        return Level.parse(self.level)
