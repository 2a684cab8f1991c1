"""Parse slash-command arguments: event references and start times."""

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from dateutil.parser import isoparse

from domains.ctftime.config import EVENT_URL_PATTERN
from .config import DEFAULT_INPUT_TZ

_ISO_RE = re.compile(r'^\d{4}-\d{2}-\d{2}T')
_DATE_RE = re.compile(r'^\d{4}-\d{2}-\d{2}$')
_TIME_RE = re.compile(r'^\d{1,2}:\d{2}$')


@dataclass
class ParsedAdd:
    """Arguments of an ``add`` command."""
    start: datetime
    title: str


class UsageError(ValueError):
    """Raised when command arguments cannot be parsed."""


def extract_event_id(value: str) -> Optional[int]:
    """Get a CTFtime event ID from a bare number or an event URL.

    Examples:
    - "12345"
    - "https://ctftime.org/event/12345"
    - "ctftime.org/event/12345/tasks/"

    Returns:
        Event ID, or None if value is neither
    """
    match = re.search(EVENT_URL_PATTERN, value)
    if match:
        return int(match.group(1))

    if value.isascii() and value.isdigit():
        return int(value)
    return None


def parse_datetime(value: str) -> Optional[datetime]:
    """Parse a start time into an aware UTC datetime.

    Accepts ISO 8601 (``2026-03-15T10:00``, optionally with seconds and an
    offset or ``Z``) and ``2026-03-15 10:00``. Values without zone
    information are read in UTC+9.

    Returns:
        UTC datetime, or None if the value is not a recognised format
    """
    value = value.strip()

    if _ISO_RE.match(value):
        try:
            parsed = isoparse(value)
        except ValueError:
            return None
    else:
        parts = value.split()
        if len(parts) != 2 or not _DATE_RE.match(parts[0]) or not _TIME_RE.match(parts[1]):
            return None
        try:
            parsed = datetime.strptime(f"{parts[0]} {parts[1]}", "%Y-%m-%d %H:%M")
        except ValueError:
            return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=DEFAULT_INPUT_TZ)
    return parsed.astimezone(timezone.utc)


def parse_add_args(args: list[str]) -> ParsedAdd:
    """Split ``add`` arguments into start time and title.

    Args:
        args: Tokens after the subcommand, e.g.
            ["2026-03-15T10:00", "My", "CTF"] or
            ["2026-03-15", "10:00", "My", "CTF"]

    Raises:
        UsageError: With a user-facing message if the arguments are invalid
    """
    if not args:
        raise UsageError("missing start time and title")

    if "T" in args[0]:
        raw_start = args[0]
        title_tokens = args[1:]
    elif _DATE_RE.match(args[0]) and len(args) > 1 and _TIME_RE.match(args[1]):
        raw_start = f"{args[0]} {args[1]}"
        title_tokens = args[2:]
    else:
        raise UsageError(f"invalid date format: {' '.join(args[:2])}")

    start = parse_datetime(raw_start)
    if start is None:
        raise UsageError(f"cannot parse date: {raw_start}")

    title = " ".join(title_tokens).strip()
    if not title:
        raise UsageError("a title is required")

    return ParsedAdd(start=start, title=title)
