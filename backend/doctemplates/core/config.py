"""
DocTemplates: Configuration
Loads .env automatically, then reads all settings from environment variables.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from doctemplates.errors import ConfigurationError

_env_path = Path(__file__).resolve().parent.parent.parent / ".env"
load_dotenv(_env_path)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class AppConfig:
    """Top-level application configuration."""
    log_level: str
    logo_url: str
    clone_count: int
    timestamp_format: str


def _load_config() -> AppConfig:
    return AppConfig(
        log_level=os.getenv("DOCTEMPLATES_LOG_LEVEL", "INFO").upper(),
        logo_url=os.getenv("DOCTEMPLATES_LOGO_URL", "https://company.com/logo.png"),
        clone_count=int(os.getenv("DOCTEMPLATES_CLONE_COUNT", "5")),
        timestamp_format=os.getenv("DOCTEMPLATES_TIMESTAMP_FORMAT", "%d/%m/%Y %H:%M:%S"),
    )


def _validate_config(cfg: AppConfig) -> None:
    """Fail fast on values the factory and CLI cannot work with."""
    errors: list[str] = []
    if cfg.log_level not in VALID_LOG_LEVELS:
        errors.append(f"DOCTEMPLATES_LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}")
    if not cfg.logo_url:
        errors.append("DOCTEMPLATES_LOGO_URL must not be empty")
    if cfg.clone_count < 1:
        errors.append("DOCTEMPLATES_CLONE_COUNT must be at least 1")
    if not cfg.timestamp_format:
        errors.append("DOCTEMPLATES_TIMESTAMP_FORMAT must not be empty")
    if errors:
        raise ConfigurationError(errors)


settings = _load_config()
_validate_config(settings)
