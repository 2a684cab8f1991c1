"""Slack mrkdwn rendering for CTFtime events and watchlist entries."""

from datetime import datetime
from zoneinfo import ZoneInfo

from dateutil.parser import isoparse

import config
from domains.watchlist.engine import ReminderKind
from domains.watchlist.models import CatalogEntry, CustomEntry, WatchEntry

REMINDER_HEADINGS = {
    ReminderKind.TWENTY_FOUR_HOUR: ("📢", "starts in 24 hours"),
    ReminderKind.ONE_HOUR: ("🚨", "starts within the hour"),
}


def display_tz() -> ZoneInfo:
    return ZoneInfo(config.DISPLAY_TIMEZONE)


def format_datetime(value: datetime) -> str:
    """Format an instant as ``YYYY/MM/DD HH:MM`` in the display timezone."""
    return value.astimezone(display_tz()).strftime("%Y/%m/%d %H:%M")


def format_duration(event: dict) -> str:
    """Format the event's duration, e.g. ``2d 0h`` or ``36h``."""
    duration = event.get("duration") or {}
    days = duration.get("days", 0) or 0
    hours = duration.get("hours", 0) or 0
    if days > 0:
        return f"{days}d {hours % 24}h"
    return f"{hours}h"


def format_event_for_slack(event: dict) -> str:
    """Render a CTFtime event as a mrkdwn block."""
    start = isoparse(event["start"])
    lines = [f"*<{event['ctftime_url']}|{event['title']}>*"]

    if event.get("finish"):
        lines.append(f"📅 {format_datetime(start)} 〜 {format_datetime(isoparse(event['finish']))}")
    else:
        lines.append(f"📅 {format_datetime(start)}")

    if event.get("duration"):
        lines.append(f"⏱️ {format_duration(event)}")

    weight = float(event.get("weight") or 0)
    lines.append(f"🏷️ {event.get('format') or 'Unknown'} | Weight: {weight:.2f}")

    restrictions = event.get("restrictions")
    if restrictions and restrictions != "Open":
        lines.append(f"🔒 {restrictions}")

    organizers = event.get("organizers") or []
    if organizers:
        lines.append(f"👥 {', '.join(o['name'] for o in organizers)}")

    if event.get("url"):
        lines.append(f"🔗 <{event['url']}|Official site>")

    return "\n".join(lines)


def format_custom_entry(entry: CustomEntry) -> str:
    """Render a manually added entry from its stored fields."""
    lines = [
        f"*{entry.title}* 🔖",
        f"📅 {format_datetime(entry.start)}",
    ]
    if entry.url:
        lines.append(f"🔗 <{entry.url}|Link>")
    if entry.description:
        lines.append(f"📝 {entry.description}")
    return "\n".join(lines)


def format_entry_details(entry: WatchEntry, event: dict | None = None) -> str:
    """Detail text for a reminder.

    Custom entries render from stored fields; catalog entries render from a
    freshly fetched event, falling back to the stored start time.
    """
    if isinstance(entry, CustomEntry):
        return format_custom_entry(entry)
    if isinstance(entry, CatalogEntry):
        if event:
            return format_event_for_slack(event)
        return f"📅 {format_datetime(entry.start)}"
    raise TypeError(f"Unknown watchlist entry type: {type(entry).__name__}")


def format_reminder(entry: WatchEntry, kind: ReminderKind, event: dict | None = None) -> str:
    """Full reminder message text."""
    emoji, when = REMINDER_HEADINGS[kind]
    return (
        f"{emoji} *CTF Reminder*\n\n"
        f"*{entry.title}* {when}!\n\n"
        f"{format_entry_details(entry, event)}"
    )
