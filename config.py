"""Global configuration for CTF Notice."""

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()


class ConfigError(Exception):
    """Raised when required configuration is missing or invalid."""


# Slack
SLACK_WEBHOOK_URL = os.getenv("SLACK_WEBHOOK_URL", "")
SLACK_SIGNING_SECRET = os.getenv("SLACK_SIGNING_SECRET", "")

# CTFtime polling window (days ahead of now)
DAYS_AHEAD = int(os.getenv("DAYS_AHEAD", "30"))

# Timeout (seconds) for every outbound HTTP call
HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "10"))

# Document store: "file", "supabase" or "memory"
STORE_BACKEND = os.getenv("STORE_BACKEND", "file").lower()
DATA_DIR = Path(os.getenv("DATA_DIR", "data"))

# Supabase (only for STORE_BACKEND=supabase)
SUPABASE_URL = os.getenv("SUPABASE_URL")
SUPABASE_KEY = os.getenv("SUPABASE_KEY")
SUPABASE_TABLE = os.getenv("SUPABASE_TABLE", "kv_store")

# Times are shown to users in this zone
DISPLAY_TIMEZONE = os.getenv("DISPLAY_TIMEZONE", "Asia/Tokyo")

# Command API
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8787"))

# Logging
LOG_DIR = Path(os.getenv("LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_DIR.mkdir(parents=True, exist_ok=True)


def validate_config() -> None:
    """Check that the settings needed to run are present and sane.

    Raises:
        ConfigError: If a setting is missing or invalid
    """
    if not SLACK_WEBHOOK_URL:
        raise ConfigError("SLACK_WEBHOOK_URL is required")
    if not SLACK_WEBHOOK_URL.startswith("https://hooks.slack.com/"):
        raise ConfigError("Invalid SLACK_WEBHOOK_URL format")
    if DAYS_AHEAD <= 0:
        raise ConfigError("DAYS_AHEAD must be a positive number of days")
    if STORE_BACKEND not in ("file", "supabase", "memory"):
        raise ConfigError(f"Unknown STORE_BACKEND: {STORE_BACKEND}")
    if STORE_BACKEND == "supabase" and not (SUPABASE_URL and SUPABASE_KEY):
        raise ConfigError("SUPABASE_URL and SUPABASE_KEY are required for the supabase store")
