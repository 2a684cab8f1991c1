"""Watchlist domain configuration."""

import os
from datetime import timedelta, timezone

# Document key for the watchlist
WATCHLIST_KEY = "watchlist"

# Dates typed without a zone are read as JST
DEFAULT_INPUT_TZ = timezone(timedelta(hours=9))

# Prefix for ids of manually added events
CUSTOM_ID_PREFIX = "custom-"

# Reminder check runs at this minute of every hour
REMINDER_CRON_MINUTE = int(os.getenv("REMINDER_CRON_MINUTE", "0"))

# Slash command name shown in help and usage replies
SLASH_COMMAND = os.getenv("SLASH_COMMAND", "/ctf")
