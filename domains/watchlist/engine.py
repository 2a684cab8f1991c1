"""Reminder decisions over a watchlist snapshot.

Pure functions: no I/O and no clock reads. The caller passes ``now`` and
persists whatever comes back.

Windows are wider than their nominal marks so that a trigger that runs late
or skips a tick still fires each reminder once:

- 24h reminder: 1 < hours_until <= 25
- 1h reminder:  0 < hours_until <= 2

An entry is purged once its start is at least 24 hours in the past.
"""

from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from enum import Enum

from .models import WatchEntry

PURGE_AFTER = timedelta(hours=24)


class ReminderKind(Enum):
    """Reminder classes, each sent at most once per entry."""
    TWENTY_FOUR_HOUR = "24h"
    ONE_HOUR = "1h"


@dataclass(frozen=True)
class Reminder:
    """A reminder to send, carrying the entry as it is after the flag flip."""
    entry: WatchEntry
    kind: ReminderKind


def _in_24h_window(hours_until: float) -> bool:
    return 1 < hours_until <= 25


def _in_1h_window(hours_until: float) -> bool:
    return 0 < hours_until <= 2


def evaluate(entries: list[WatchEntry], now: datetime) -> tuple[list[WatchEntry], list[Reminder]]:
    """Decide which reminders fire and which entries survive.

    Args:
        entries: Current watchlist
        now: Evaluation instant (timezone-aware)

    Returns:
        Tuple of (next entries, reminders in input order)
    """
    next_entries = []
    reminders = []
    cutoff = now - PURGE_AFTER

    for entry in entries:
        hours_until = entry.hours_until(now)
        kinds = []

        if not entry.reminded_24h and _in_24h_window(hours_until):
            kinds.append(ReminderKind.TWENTY_FOUR_HOUR)
            entry = replace(entry, reminded_24h=True)

        if not entry.reminded_1h and _in_1h_window(hours_until):
            kinds.append(ReminderKind.ONE_HOUR)
            entry = replace(entry, reminded_1h=True)

        reminders.extend(Reminder(entry, kind) for kind in kinds)

        if entry.start <= cutoff:
            continue
        next_entries.append(entry)

    return next_entries, reminders


def has_changes(before: list[WatchEntry], after: list[WatchEntry]) -> bool:
    """True if evaluate() flipped a flag or purged an entry."""
    return before != after
