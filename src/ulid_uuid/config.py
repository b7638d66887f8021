"""
Configuration management for ulid-uuid.

Loads settings from ulid-uuid.toml files and ULID_UUID_* environment
variables using Pydantic.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Literal, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

CONFIG_FILENAME = "ulid-uuid.toml"


class OutputConfig(BaseModel):
    """Output configuration."""

    trailing_newline: bool = Field(
        default=True, description="Append a newline after the converted value"
    )


class LogConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING", description="Root log level"
    )
    format: str = Field(
        default="%(levelname)s %(name)s: %(message)s",
        description="Log record format",
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, value: Any) -> Any:
        """Accept level names in any case."""
        if isinstance(value, str):
            return value.upper()
        return value


class Config(BaseSettings):
    """Main configuration for ulid-uuid."""

    model_config = SettingsConfigDict(
        env_prefix="ULID_UUID_",
        env_nested_delimiter="__",
    )

    output: OutputConfig = Field(default_factory=OutputConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def from_toml(cls, path: Path | str) -> Config:
        """Load configuration from a TOML file.

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If the file is not valid TOML or has invalid values
        """
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in {config_path}: {e}") from e

        try:
            return cls(**data)
        except ValidationError as e:
            raise ValueError(f"Invalid settings in {config_path}: {e}") from e

    @classmethod
    def find_and_load(cls, start_dir: Optional[Path] = None) -> Config:
        """Load the nearest ulid-uuid.toml at or above start_dir (default: cwd).

        Raises:
            FileNotFoundError: If no directory up to the root has one
            ValueError: If the file found is invalid
        """
        start = Path(start_dir or Path.cwd()).resolve()

        for directory in (start, *start.parents):
            config_path = directory / CONFIG_FILENAME
            if config_path.exists():
                return cls.from_toml(config_path)

        raise FileNotFoundError(f"No {CONFIG_FILENAME} found in {start} or its parents")
