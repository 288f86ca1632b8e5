"""
Application configuration.

Values come from `Settings` (environment variables and an optional .env file)
and are re-exported here as module constants.
"""

from .settings_model import Settings
from .ui_theme import Theme, get_theme

settings = Settings()

VERSION = settings.VERSION

# ─────────────────────────────────────────────────────────────────────────────
# Refresh
# ─────────────────────────────────────────────────────────────────────────────

REFRESH_INTERVAL = settings.REFRESH_INTERVAL

# ─────────────────────────────────────────────────────────────────────────────
# Hostname Resolution
# ─────────────────────────────────────────────────────────────────────────────

RESOLVE_HOSTNAMES = settings.RESOLVE_HOSTNAMES
DNS_TIMEOUT = settings.DNS_TIMEOUT
DNS_WORKERS = settings.DNS_WORKERS

# ─────────────────────────────────────────────────────────────────────────────
# Demo Traffic
# ─────────────────────────────────────────────────────────────────────────────

DEMO_SCENARIO = settings.DEMO_SCENARIO

# ─────────────────────────────────────────────────────────────────────────────
# UI Layout
# ─────────────────────────────────────────────────────────────────────────────

UI_THEME = settings.UI_THEME
UI_HEIGHT_BREAKPOINT = settings.UI_HEIGHT_BREAKPOINT
UI_WIDTH_BREAKPOINT = settings.UI_WIDTH_BREAKPOINT
UI_WIDE_BREAKPOINT = settings.UI_WIDE_BREAKPOINT

# ─────────────────────────────────────────────────────────────────────────────
# Logging
# ─────────────────────────────────────────────────────────────────────────────

LOG_DIR = settings.LOG_DIR
LOG_FILE = settings.LOG_FILE
LOG_LEVEL = settings.LOG_LEVEL
LOG_TRUNCATE_ON_START = settings.LOG_TRUNCATE_ON_START

__all__ = [
    "Settings",
    "Theme",
    "get_theme",
    "settings",
    "VERSION",
    "REFRESH_INTERVAL",
    "RESOLVE_HOSTNAMES",
    "DNS_TIMEOUT",
    "DNS_WORKERS",
    "DEMO_SCENARIO",
    "UI_THEME",
    "UI_HEIGHT_BREAKPOINT",
    "UI_WIDTH_BREAKPOINT",
    "UI_WIDE_BREAKPOINT",
    "LOG_DIR",
    "LOG_FILE",
    "LOG_LEVEL",
    "LOG_TRUNCATE_ON_START",
]
