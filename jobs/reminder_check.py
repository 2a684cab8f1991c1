"""Watchlist reminder check.

Runs hourly. Each run loads the watchlist, decides which 24h / 1h reminders
fire, saves the updated flags and only then posts the reminders to Slack.

Saving first marks reminders as claimed: a crash after the save loses at
most the in-flight messages and never repeats one, and a failed save sends
nothing so the next run retries from scratch. A failed post is logged and
not retried; the flag stays set.
"""

from datetime import datetime, timezone

import httpx

from domains.ctftime.client import CatalogError, fetch_event
from domains.ctftime.formatting import format_reminder
from domains.slack.sender import NotificationError, send_slack_message
from domains.storage import StoreError
from domains.watchlist.config import REMINDER_CRON_MINUTE
from domains.watchlist.engine import Reminder, evaluate, has_changes
from domains.watchlist.models import CatalogEntry
from domains.watchlist.store import WatchlistStore
from logger import logger


async def _reminder_text(reminder: Reminder) -> str:
    """Render a reminder, re-fetching catalog events for fresh details."""
    if isinstance(reminder.entry, CatalogEntry):
        event = await fetch_event(reminder.entry.id)
        if event:
            try:
                return format_reminder(reminder.entry, reminder.kind, event)
            except (AttributeError, KeyError, TypeError, ValueError) as e:
                logger.warning(f"CTFtime event {reminder.entry.id} has malformed details, using stored fields: {e}")
    return format_reminder(reminder.entry, reminder.kind)


async def dispatch_reminders(reminders: list[Reminder]) -> int:
    """Post each reminder; a failure is logged and does not stop the rest.

    Returns:
        Number of reminders delivered
    """
    delivered = 0
    for reminder in reminders:
        try:
            text = await _reminder_text(reminder)
            await send_slack_message(text)
            delivered += 1
            logger.info(f"Sent {reminder.kind.value} reminder for {reminder.entry.id}: {reminder.entry.title}")
        except (NotificationError, CatalogError, httpx.HTTPError) as e:
            logger.error(f"Failed to send {reminder.kind.value} reminder for {reminder.entry.id}: {e}")
    return delivered


async def check_reminders(now: datetime = None, store: WatchlistStore = None) -> list[Reminder]:
    """Run one reminder tick.

    Args:
        now: Evaluation time (defaults to now in UTC)
        store: Watchlist store (defaults to the configured backend)

    Returns:
        Reminders that were due on this tick

    Raises:
        StoreError: If the watchlist cannot be loaded or saved (nothing is sent)
    """
    now = now or datetime.now(timezone.utc)
    store = store or WatchlistStore()

    entries = await store.load()
    next_entries, reminders = evaluate(entries, now)

    if has_changes(entries, next_entries):
        purged = len(entries) - len(next_entries)
        await store.save(next_entries)
        logger.info(f"Watchlist updated: {len(reminders)} reminder(s) claimed, {purged} purged")

    if reminders:
        delivered = await dispatch_reminders(reminders)
        logger.info(f"Reminder check: delivered {delivered}/{len(reminders)}")
    else:
        logger.debug(f"Reminder check: nothing due ({len(next_entries)} watched)")

    return reminders


async def scheduled_reminder_check():
    """Scheduler entry point; logs instead of raising so the job stays registered."""
    try:
        await check_reminders()
    except StoreError as e:
        logger.error(f"Reminder check aborted, will retry next tick: {e}")


def register_reminder_check(scheduler):
    """Register the reminder check job with the scheduler."""
    scheduler.add_job(
        scheduled_reminder_check,
        'cron',
        minute=REMINDER_CRON_MINUTE,  # Every hour
        timezone="UTC",
        id="watchlist_reminder_check",
        max_instances=1,
        coalesce=True
    )
    logger.info(f"Registered watchlist reminder check job (hourly at :{REMINDER_CRON_MINUTE:02d})")
