"""Watchlist persistence.

The whole watchlist is one JSON array under a single key. Callers load it,
change it in memory and save it back; concurrent writers are
last-writer-wins.
"""

from domains.storage import DocumentStore, StoreError, get_document_store
from logger import logger
from .config import WATCHLIST_KEY
from .models import WatchEntry, entry_from_dict, entry_to_dict


class WatchlistStore:
    """Loads and saves the watchlist document."""

    def __init__(self, documents: DocumentStore = None, key: str = WATCHLIST_KEY):
        self.documents = documents or get_document_store()
        self.key = key

    async def load(self) -> list[WatchEntry]:
        """Load the watchlist (empty if it was never saved).

        Raises:
            StoreError: If the document cannot be read or decoded
        """
        data = await self.documents.get(self.key)
        if data is None:
            return []
        if not isinstance(data, list):
            raise StoreError(f"Watchlist document '{self.key}' is not a list")

        try:
            return [entry_from_dict(item) for item in data]
        except (KeyError, TypeError, ValueError) as e:
            raise StoreError(f"Watchlist document '{self.key}' has an invalid entry: {e}") from e

    async def save(self, entries: list[WatchEntry]) -> None:
        """Replace the stored watchlist.

        Raises:
            StoreError: If the write fails
        """
        await self.documents.put(self.key, [entry_to_dict(e) for e in entries])
        logger.info(f"Saved watchlist ({len(entries)} entries)")
