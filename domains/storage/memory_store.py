"""In-process document store, used for dry runs and tests."""

import copy
from typing import Any

from .base import DocumentStore


class MemoryDocumentStore(DocumentStore):
    """Keeps documents in a dict. Contents are lost when the process exits."""

    def __init__(self, documents: dict | None = None):
        self.documents: dict[str, Any] = dict(documents or {})
        self.writes = 0

    async def get(self, key: str) -> Any | None:
        return copy.deepcopy(self.documents.get(key))

    async def put(self, key: str, document: Any) -> None:
        self.documents[key] = copy.deepcopy(document)
        self.writes += 1
