import os
from typing import Literal
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """
    Application configuration settings using Pydantic Settings.
    Reads from environment variables and provides type safety and validation.
    """

    # ─────────────────────────────────────────────────────────────────────────────
    # Version
    # ─────────────────────────────────────────────────────────────────────────────
    VERSION: str = "0.12.0"
    # Also update pyproject.toml (version)

    # ─────────────────────────────────────────────────────────────────────────────
    # Refresh
    # ─────────────────────────────────────────────────────────────────────────────
    REFRESH_INTERVAL: float = Field(default=1.0, gt=0, description="Seconds between redraws")

    # ─────────────────────────────────────────────────────────────────────────────
    # Hostname Resolution
    # ─────────────────────────────────────────────────────────────────────────────
    RESOLVE_HOSTNAMES: bool = True
    DNS_TIMEOUT: float = Field(default=2.0, gt=0)
    DNS_WORKERS: int = Field(default=4, ge=1)

    # ─────────────────────────────────────────────────────────────────────────────
    # Demo Traffic
    # ─────────────────────────────────────────────────────────────────────────────
    DEMO_SCENARIO: Literal["steady", "burst", "idle"] = "steady"

    # ─────────────────────────────────────────────────────────────────────────────
    # UI Layout
    # ─────────────────────────────────────────────────────────────────────────────
    UI_THEME: str = "orange"
    UI_HEIGHT_BREAKPOINT: int = Field(default=30, ge=1)
    UI_WIDTH_BREAKPOINT: int = Field(default=120, ge=1)
    UI_WIDE_BREAKPOINT: int = Field(default=150, ge=1)

    # ─────────────────────────────────────────────────────────────────────────────
    # Logging
    # ─────────────────────────────────────────────────────────────────────────────
    LOG_DIR: str = Field(default=os.path.expanduser("~/.bandview"))
    LOG_FILE: str = Field(default_factory=lambda: os.path.join(os.path.expanduser("~/.bandview"), "bandview.log"))
    LOG_LEVEL: str = "INFO"
    LOG_TRUNCATE_ON_START: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )
