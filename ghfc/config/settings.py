from __future__ import annotations

import os

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.constants import API_BASE

# Load .env once, early
load_dotenv()


class Settings(BaseSettings):
    """Application config (env or .env); names follow the Actions runner variables."""

    model_config = SettingsConfigDict(env_prefix="", env_file=None, extra="ignore")

    github_token: str | None = Field(default_factory=lambda: os.getenv("GITHUB_TOKEN"))
    github_api_url: str = Field(default=API_BASE)
    github_repository: str | None = None
    github_pull_request_number: str | None = None
    github_output: str | None = None
    github_env: str | None = None
    glob_patterns: str | None = None


def get_settings() -> Settings:
    return Settings()
