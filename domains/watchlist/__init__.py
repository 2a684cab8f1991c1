"""Watchlist of CTF events with 24h / 1h start reminders.

Entries persist as one JSON document; reminder decisions are pure functions
in engine.py.
"""

from .models import WatchEntry, CatalogEntry, CustomEntry
from .engine import evaluate, has_changes, Reminder, ReminderKind
from .store import WatchlistStore

__all__ = [
    "WatchEntry",
    "CatalogEntry",
    "CustomEntry",
    "evaluate",
    "has_changes",
    "Reminder",
    "ReminderKind",
    "WatchlistStore",
]
