from __future__ import annotations

from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.constants import DEFAULT_CONFIG_PATH

# Load .env once, early
load_dotenv()


class Settings(BaseSettings):
    """Process settings (env or .env, REPOPULL_ prefix)."""

    model_config = SettingsConfigDict(env_prefix="REPOPULL_", env_file=None, extra="ignore")

    config_path: Path = Field(default_factory=lambda: DEFAULT_CONFIG_PATH)
    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = Field(default="WARNING")
    ff_only: bool = Field(default=True)
    git_executable: str = Field(default="git")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value):
        return value.upper() if isinstance(value, str) else value


def get_settings() -> Settings:
    return Settings()
