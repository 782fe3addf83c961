"""Environment settings using Pydantic Settings."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RuntimeSettings(BaseSettings):
    """Process-level settings read from the environment or a .env file."""

    log_level: str = Field(default="INFO", alias="CHAOS_LOG_LEVEL")
    log_format: Literal["console", "json"] = Field(default="console", alias="CHAOS_LOG_FORMAT")
    output_dir: str = Field(default="out", alias="CHAOS_OUTPUT_DIR")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


def get_settings() -> RuntimeSettings:
    """Read settings from the current environment."""
    return RuntimeSettings()
