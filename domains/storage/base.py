"""Document store contract.

Each key holds exactly one JSON document. Reads and writes always move the
whole document; there are no partial updates and no transactions, so
concurrent writers are last-writer-wins.
"""

from abc import ABC, abstractmethod
from typing import Any


class StoreError(Exception):
    """Raised when a document cannot be read, decoded or written."""


class DocumentStore(ABC):
    """Async get/put of whole JSON documents by key."""

    @abstractmethod
    async def get(self, key: str) -> Any | None:
        """Return the decoded document for key, or None if never written.

        Raises:
            StoreError: If the backend is unreachable or the document is corrupt
        """

    @abstractmethod
    async def put(self, key: str, document: Any) -> None:
        """Replace the document stored under key.

        Raises:
            StoreError: If the write did not complete
        """
