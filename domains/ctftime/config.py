"""CTFtime domain configuration."""

import os

API_URL = os.getenv("CTFTIME_API_URL", "https://ctftime.org/api/v1")
SITE_URL = "https://ctftime.org"

# CTFtime rejects requests without a User-Agent
USER_AGENT = os.getenv("CTFTIME_USER_AGENT", "CTFNotice Bot/1.0")

# The events endpoint refuses larger pages
MAX_EVENTS_LIMIT = 100

# Matches https://ctftime.org/event/12345 (and /event/12345/tasks/ etc.)
EVENT_URL_PATTERN = r"ctftime\.org/event/(\d+)"
