"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without polluting the CLI.
- Lets adapters (file/HTTP persistence) read config consistently.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Per-user config directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "solid-d2"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "solid-d2"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "solid-d2"
    return Path.home() / ".config" / "solid-d2"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typing + validation at the edge (env vars) without logic in the Core.
    - One configuration contract for CLI and adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="SOLID_D2_",
        extra="ignore",
        case_sensitive=False,
        # Order: project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    journal_path: Path = Field(
        default=Path("journal.txt"),
        description="Where the Single Responsibility demo saves the journal (relative to cwd).",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout per request (seconds) when loading from a URL.",
    )
    user_agent: str = Field(
        default="solid-d2/0.1 (+https://local)",
        min_length=1,
        description="User-Agent for URL loads.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Root log level (DEBUG, INFO, WARNING, ERROR).",
    )
    show_banner: bool = Field(
        default=True,
        description="Print the banner before running a command.",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {value!r}")
        return level
