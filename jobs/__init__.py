"""Scheduled jobs: watchlist reminders and new-event announcements."""

from .reminder_check import check_reminders, register_reminder_check
from .new_event_check import check_for_new_events, diff_new_ids, register_new_event_check

__all__ = [
    "check_reminders",
    "register_reminder_check",
    "check_for_new_events",
    "diff_new_ids",
    "register_new_event_check",
]
