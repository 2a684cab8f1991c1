"""Persistence for CTFtime event ids that have already been announced.

Document shape: ``{"eventIds": [int, ...], "lastChecked": ISO8601}``.
The id set only grows; nothing prunes it.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from dateutil.parser import isoparse

from domains.storage import DocumentStore, StoreError, get_document_store

SEEN_EVENTS_KEY = "seen_events"


@dataclass
class SeenEvents:
    """Announced event ids and when the poller last completed."""
    event_ids: set[int] = field(default_factory=set)
    last_checked: datetime | None = None


class SeenEventStore:
    """Loads and saves the seen-events document."""

    def __init__(self, documents: DocumentStore = None, key: str = SEEN_EVENTS_KEY):
        self.documents = documents or get_document_store()
        self.key = key

    async def load(self) -> SeenEvents:
        """Load the seen set (empty on first run).

        Raises:
            StoreError: If the document cannot be read or decoded
        """
        data = await self.documents.get(self.key)
        if data is None:
            return SeenEvents()

        try:
            last_checked = data.get("lastChecked")
            return SeenEvents(
                event_ids={int(i) for i in data.get("eventIds", [])},
                last_checked=isoparse(last_checked) if last_checked else None,
            )
        except (AttributeError, TypeError, ValueError) as e:
            raise StoreError(f"Seen-events document '{self.key}' is invalid: {e}") from e

    async def save(self, seen: SeenEvents) -> None:
        """Replace the stored seen set.

        Raises:
            StoreError: If the write fails
        """
        last_checked = seen.last_checked or datetime.now(timezone.utc)
        await self.documents.put(self.key, {
            "eventIds": sorted(seen.event_ids),
            "lastChecked": last_checked.astimezone(timezone.utc).isoformat().replace("+00:00", "Z"),
        })
