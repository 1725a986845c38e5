"""Application configuration.

Configuration is loaded from environment variables. For local use, you can provide a
`.env` file and set `ORGPLAN_ENV_FILE` to point to it.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_HORIZON_DAYS = 30


class Settings(BaseSettings):
    """orgplan settings.

    All fields are environment-configurable. Prefix is `ORGPLAN_`.
    """

    model_config = SettingsConfigDict(
        env_prefix="ORGPLAN_",
        env_file=None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO")

    # Generator
    horizon_days: int = Field(default=DEFAULT_HORIZON_DAYS, ge=1, le=366)
    start_format: str = Field(default="%Y-%m-%d %H:%M:%S")

    # Rendering
    validate_intervals: bool = Field(default=True)


def load_settings() -> Settings:
    """Load settings from env.

    Returns:
        Settings: Parsed settings.
    """

    env_file_override = os.getenv("ORGPLAN_ENV_FILE")
    if env_file_override:
        return Settings(_env_file=Path(env_file_override))

    default_env = Path.cwd() / ".env"
    if default_env.exists():
        return Settings(_env_file=default_env)

    return Settings()
