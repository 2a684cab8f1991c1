"""New CTFtime event announcements.

Fetches upcoming events, announces the ones not seen before in a single
Slack message and records their ids. If fetching or posting fails nothing
is recorded, so the same events are announced on the next run.
"""

import os
from datetime import datetime, timezone

import config
from domains.ctftime.client import CatalogError, fetch_upcoming_events
from domains.new_events.store import SeenEventStore
from domains.slack.sender import NotificationError, notify_new_events
from domains.storage import StoreError
from logger import logger

# Daily at this UTC hour
NEW_EVENTS_CRON_HOUR = int(os.getenv("NEW_EVENTS_CRON_HOUR", "0"))


def diff_new_ids(fetched: set[int], seen: set[int]) -> set[int]:
    """Ids in fetched that have not been announced yet."""
    return set(fetched) - set(seen)


async def check_for_new_events(
    days_ahead: int = None,
    now: datetime = None,
    store: SeenEventStore = None
) -> list[dict]:
    """Announce newly published events.

    Args:
        days_ahead: Look-ahead window in days (defaults to DAYS_AHEAD)
        now: Window start (defaults to now in UTC)
        store: Seen-events store (defaults to the configured backend)

    Returns:
        Events announced on this run

    Raises:
        CatalogError: If CTFtime cannot be queried
        NotificationError: If the announcement is not delivered
        StoreError: If the seen set cannot be loaded or saved
    """
    days_ahead = days_ahead or config.DAYS_AHEAD
    now = now or datetime.now(timezone.utc)
    store = store or SeenEventStore()

    logger.info(f"Checking for new CTF events ({days_ahead} days ahead)...")
    events = await fetch_upcoming_events(days_ahead, now=now)

    seen = await store.load()
    new_ids = diff_new_ids({e["id"] for e in events}, seen.event_ids)
    new_events = [e for e in events if e["id"] in new_ids]

    if new_events:
        logger.info(f"Found {len(new_events)} new event(s)")
        await notify_new_events(new_events, now=now)
    else:
        logger.info("No new events found")

    seen.event_ids |= new_ids
    seen.last_checked = now
    await store.save(seen)
    logger.info(f"Seen-event set now holds {len(seen.event_ids)} id(s)")

    return new_events


async def scheduled_new_event_check():
    """Scheduler entry point; logs instead of raising so the job stays registered."""
    try:
        await check_for_new_events()
    except (CatalogError, NotificationError, StoreError) as e:
        logger.error(f"New event check failed, will retry next run: {e}")


def register_new_event_check(scheduler):
    """Register the new event check job with the scheduler."""
    scheduler.add_job(
        scheduled_new_event_check,
        'cron',
        hour=NEW_EVENTS_CRON_HOUR,
        minute=0,
        timezone="UTC",
        id="ctftime_new_events",
        max_instances=1,
        coalesce=True
    )
    logger.info(f"Registered new CTF event check job (daily at {NEW_EVENTS_CRON_HOUR:02d}:00 UTC)")
