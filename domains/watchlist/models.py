"""Watchlist entry types and their JSON document form.

An entry is either a CatalogEntry (an event on CTFtime, keyed by its integer
id) or a CustomEntry (entered by hand, keyed by a generated string id).
Entries are frozen; state changes produce new instances.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Union

from dateutil.parser import isoparse


@dataclass(frozen=True)
class WatchEntry:
    """Fields shared by every watched event."""
    id: Union[int, str]
    title: str
    start: datetime
    finish: datetime | None = None
    url: str | None = None
    reminded_24h: bool = False
    reminded_1h: bool = False
    added_at: datetime | None = None

    @property
    def is_custom(self) -> bool:
        return isinstance(self, CustomEntry)

    def hours_until(self, now: datetime) -> float:
        """Hours from now until the event starts (negative once started)."""
        return (self.start - now).total_seconds() / 3600


@dataclass(frozen=True)
class CatalogEntry(WatchEntry):
    """An event fetched from CTFtime."""


@dataclass(frozen=True)
class CustomEntry(WatchEntry):
    """A manually added event that CTFtime does not know about."""
    description: str | None = None


def _to_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _parse_instant(value) -> datetime | None:
    if value in (None, ""):
        return None
    return _to_utc(isoparse(value))


def _format_instant(value: datetime | None) -> str | None:
    if value is None:
        return None
    return _to_utc(value).isoformat().replace("+00:00", "Z")


def entry_from_catalog_event(event: dict, added_at: datetime) -> CatalogEntry:
    """Build a new, not-yet-reminded entry from a CTFtime event dict.

    Raises:
        TypeError: If event is not a dict
        KeyError: If id, title or start is missing
        ValueError: If start is empty or cannot be parsed
    """
    if not isinstance(event, dict):
        raise TypeError(f"expected an event object, got {type(event).__name__}")

    start = _parse_instant(event["start"])
    if start is None:
        raise ValueError("start is empty")

    return CatalogEntry(
        id=int(event["id"]),
        title=str(event["title"]),
        start=start,
        finish=_parse_instant(event.get("finish")),
        url=event.get("ctftime_url") or event.get("url") or None,
        added_at=_to_utc(added_at),
    )


def entry_from_dict(data: dict) -> WatchEntry:
    """Decode one persisted entry.

    Raises:
        KeyError: If eventId, title or start is missing
        ValueError: If a timestamp cannot be parsed
    """
    common = {
        "title": data["title"],
        "start": _parse_instant(data["start"]),
        "finish": _parse_instant(data.get("finish")),
        "url": data.get("url") or None,
        "reminded_24h": bool(data.get("reminded24h", False)),
        "reminded_1h": bool(data.get("reminded1h", False)),
        "added_at": _parse_instant(data.get("addedAt")),
    }
    if common["start"] is None:
        raise ValueError("start is empty")

    if data.get("isCustom"):
        return CustomEntry(
            id=str(data["eventId"]),
            description=data.get("description") or None,
            **common
        )
    return CatalogEntry(id=int(data["eventId"]), **common)


def entry_to_dict(entry: WatchEntry) -> dict:
    """Encode an entry in the persisted camelCase form, omitting empty optionals."""
    data = {
        "eventId": entry.id,
        "title": entry.title,
        "start": _format_instant(entry.start),
        "reminded24h": entry.reminded_24h,
        "reminded1h": entry.reminded_1h,
    }
    if entry.finish is not None:
        data["finish"] = _format_instant(entry.finish)
    if entry.url:
        data["url"] = entry.url
    if isinstance(entry, CustomEntry):
        data["isCustom"] = True
        if entry.description:
            data["description"] = entry.description
    if entry.added_at is not None:
        data["addedAt"] = _format_instant(entry.added_at)
    return data
