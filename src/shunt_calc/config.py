"""
Configuration management for shunt-calc.

Handles loading configuration from environment variables, `.env` and YAML
files, and provides defaults that reproduce the legacy evaluator.
"""

import logging
import sys
from pathlib import Path
from typing import Any, Literal

import structlog
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from shunt_calc.models import EvaluationMode


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="SHUNT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application settings
    app_name: str = "shunt-calc"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    # Evaluation settings
    mode: EvaluationMode = EvaluationMode.LEGACY
    single_operand_shortcut: bool = True  # Return the lone operand when an operator arrives

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


# Global settings instance
settings = Settings()


def load_yaml_config(path: Path) -> dict[str, Any]:
    """
    Load settings overrides from a YAML file.

    A missing or empty file yields no overrides. Any other top-level
    document than a mapping raises ValueError.
    """
    import yaml

    if not path.exists():
        return {}

    with open(path) as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(
            f"Configuration file {path} must contain a mapping, got {type(data).__name__}"
        )
    return data


def load_settings(path: Path | None = None, **overrides: Any) -> Settings:
    """
    Build settings from the environment, an optional YAML file and
    explicit overrides, in increasing order of priority.
    """
    values: dict[str, Any] = {}
    if path is not None:
        values.update(load_yaml_config(path))
    values.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**values)


def _stderr_logger(*args: Any) -> structlog.PrintLogger:
    # Looked up per logger so a replaced sys.stderr is picked up
    return structlog.PrintLogger(sys.stderr)


def configure_logging(level: str = "WARNING") -> None:
    """Route structlog output through a level-filtered console logger."""
    level_number = logging.getLevelName(level.upper())
    if not isinstance(level_number, int):
        raise ValueError(f"Unknown log level: {level!r}")

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            level_number
        ),
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )
