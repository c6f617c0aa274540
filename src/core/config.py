"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking them
  into the CLI layer.
- Lets adapters (HTTP client, dispatcher) read settings consistently.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.errors import MissingProjectsError

APP_NAME = "jenkins-builder"
APP_VERSION = "0.1.0"

PROJECTS_ENV_VAR = "PROJECTS"


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / APP_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def read_projects_env(environ: Mapping[str, str] | None = None) -> str:
    """Returns the raw `PROJECTS` value.

    An empty string is a valid (empty) project list; only an unset variable
    is an error.
    """

    environ = os.environ if environ is None else environ
    value = environ.get(PROJECTS_ENV_VAR)
    if value is None:
        raise MissingProjectsError(f"{PROJECTS_ENV_VAR} is not set in the environment!")
    return value


class AppSettings(BaseSettings):
    """Runtime configuration for the builder.

    Flags given on the command line win over these values; these only cover
    knobs that do not deserve a dedicated flag.
    """

    model_config = SettingsConfigDict(
        env_prefix="JENKINS_BUILDER_",
        extra="ignore",
        case_sensitive=False,
        # Order: project first (dev), then the per-user config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Timeout per request (seconds). Matches the httpx default.",
    )
    user_agent: str = Field(
        default=f"{APP_NAME}/{APP_VERSION}",
        min_length=1,
        description="User-Agent sent to Jenkins.",
    )
    strict_status: bool = Field(
        default=False,
        description=(
            "Treat HTTP statuses >= 400 as dispatch failures. When disabled, any "
            "completed request counts as a successful dispatch."
        ),
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level for diagnostics on stderr.",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value!r}")
        return level
