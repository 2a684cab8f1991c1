"""Slash-command handler for the watchlist.

Each subcommand does one store read and at most one store write. There is
no concurrency check between the read and the write, so two commands racing
on the watchlist can lose one update (last-writer-wins).
"""

import uuid
from datetime import datetime, timezone

from domains.ctftime.client import fetch_event
from domains.ctftime.formatting import format_datetime
from logger import logger
from .config import CUSTOM_ID_PREFIX, SLASH_COMMAND
from .models import CustomEntry, WatchEntry, entry_from_catalog_event
from .parser import UsageError, extract_event_id, parse_add_args
from .store import WatchlistStore

DATE_FORMATS_HINT = "`2026-03-15T10:00` or `2026-03-15 10:00`"


def _help_text(command: str) -> str:
    return (
        "*CTFNotice commands*\n\n"
        f"`{command} add <start> <title>` - Add a custom event by hand\n"
        f"  e.g. `{command} add 2026-03-15T10:00 My Event`\n\n"
        f"`{command} watch <event_id or url>` - Add a CTFtime event to the watchlist\n"
        f"`{command} unwatch <event_id>` - Remove an event from the watchlist\n"
        f"`{command} list` - Show the watchlist\n"
        f"`{command} help` - Show this help"
    )


async def handle_command(
    text: str,
    command: str = SLASH_COMMAND,
    now: datetime = None,
    store: WatchlistStore = None
) -> str:
    """Handle one slash command.

    Args:
        text: Free text after the command name, e.g. "watch 12345"
        command: Command name as invoked (used in help and usage replies)
        now: Current time (defaults to now in UTC)
        store: Watchlist store (defaults to the configured backend)

    Returns:
        Reply text

    Raises:
        StoreError: If the watchlist cannot be read or written
    """
    now = now or datetime.now(timezone.utc)
    args = (text or "").split()
    subcommand = args[0].lower() if args else ""

    if subcommand == "watch" and len(args) > 1:
        return await watch(args[1], now, store or WatchlistStore(), command)

    if subcommand == "unwatch" and len(args) > 1:
        return await unwatch(args[1], store or WatchlistStore())

    if subcommand == "add":
        return await add(args[1:], now, store or WatchlistStore(), command)

    if subcommand == "list":
        return await list_entries(now, store or WatchlistStore(), command)

    return _help_text(command)


async def watch(identifier: str, now: datetime, store: WatchlistStore, command: str = SLASH_COMMAND) -> str:
    """Add a CTFtime event to the watchlist by id or URL."""
    event_id = extract_event_id(identifier)
    if event_id is None:
        return (
            "❌ Give a CTFtime event ID or URL\n"
            f"e.g. `{command} watch 12345` or `{command} watch https://ctftime.org/event/12345`"
        )

    event = await fetch_event(event_id)
    if not event:
        return f"❌ Event ID {event_id} not found"

    try:
        entry = entry_from_catalog_event(event, added_at=now)
    except (KeyError, TypeError, ValueError) as e:
        logger.warning(f"CTFtime event {event_id} has unusable data: {e}")
        return f"❌ Event ID {event_id} has no usable start time"

    entries = await store.load()
    if any(e.id == event_id for e in entries):
        return f"⚠️ *{entry.title}* is already on the watchlist"

    entries.append(entry)
    await store.save(entries)

    logger.info(f"Watching CTFtime event {event_id}: {entry.title}")
    return f"✅ Added *{entry.title}* to the watchlist\n📅 {format_datetime(entry.start)}"


async def unwatch(identifier: str, store: WatchlistStore) -> str:
    """Remove the first entry whose id matches identifier."""
    event_id = extract_event_id(identifier)
    target = event_id if event_id is not None else identifier

    entries = await store.load()
    for index, entry in enumerate(entries):
        if entry.id == target:
            removed = entries.pop(index)
            await store.save(entries)
            logger.info(f"Unwatched {removed.id}: {removed.title}")
            return f"🗑️ Removed *{removed.title}* from the watchlist"

    return f"⚠️ Event ID {target} is not on the watchlist"


def _new_custom_id(entries: list[WatchEntry]) -> str:
    taken = {e.id for e in entries}
    while True:
        candidate = f"{CUSTOM_ID_PREFIX}{uuid.uuid4().hex[:8]}"
        if candidate not in taken:
            return candidate


async def add(args: list[str], now: datetime, store: WatchlistStore, command: str = SLASH_COMMAND) -> str:
    """Add a custom event: ``add <start> <title...>``."""
    try:
        parsed = parse_add_args(args)
    except UsageError as e:
        return (
            f"❌ Invalid arguments: {e}\n"
            f"Usage: `{command} add <start> <title>` with start as {DATE_FORMATS_HINT}"
        )

    entries = await store.load()
    entry = CustomEntry(
        id=_new_custom_id(entries),
        title=parsed.title,
        start=parsed.start,
        added_at=now,
    )
    entries.append(entry)
    await store.save(entries)

    logger.info(f"Added custom event {entry.id}: {entry.title}")
    return (
        f"✅ Added *{entry.title}* to the watchlist 🔖\n"
        f"📅 {format_datetime(entry.start)}\n"
        f"ID: `{entry.id}`"
    )


def entry_status(hours_until: float) -> str:
    """Status badge: past, imminent (under 24h) or scheduled."""
    if hours_until < 0:
        return "🔴 Ended"
    if hours_until < 24:
        return "🟡 Soon"
    return "🟢"


async def list_entries(now: datetime, store: WatchlistStore, command: str = SLASH_COMMAND) -> str:
    """Render the watchlist sorted by start time. Read-only."""
    entries = await store.load()
    if not entries:
        return (
            "📋 The watchlist is empty\n"
            f"Add events with `{command} watch <event_id>` or `{command} add <start> <title>`"
        )

    lines = []
    for i, entry in enumerate(sorted(entries, key=lambda e: e.start), start=1):
        hours_until = entry.hours_until(now)
        badge = " 🔖" if entry.is_custom else ""
        details = f"in {int(hours_until)}h" if hours_until > 0 else "started"
        lines.append(
            f"{i}. {entry_status(hours_until)} *{entry.title}*{badge}\n"
            f"   📅 {format_datetime(entry.start)} ({details})"
        )

    return f"📋 *Watchlist ({len(entries)})*\n\n" + "\n\n".join(lines)
