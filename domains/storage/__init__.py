"""Whole-document JSON persistence.

Backends share the DocumentStore contract; the configured one is built by
get_document_store().
"""

import config
from .base import DocumentStore, StoreError
from .file_store import FileDocumentStore
from .memory_store import MemoryDocumentStore
from .supabase_store import SupabaseDocumentStore

_memory_store: MemoryDocumentStore | None = None


def get_document_store() -> DocumentStore:
    """Build the store selected by STORE_BACKEND."""
    global _memory_store

    if config.STORE_BACKEND == "supabase":
        return SupabaseDocumentStore(
            url=config.SUPABASE_URL,
            key=config.SUPABASE_KEY,
            table=config.SUPABASE_TABLE,
            timeout=config.HTTP_TIMEOUT
        )
    if config.STORE_BACKEND == "memory":
        if _memory_store is None:
            _memory_store = MemoryDocumentStore()
        return _memory_store
    return FileDocumentStore(config.DATA_DIR)


__all__ = [
    "DocumentStore",
    "StoreError",
    "FileDocumentStore",
    "MemoryDocumentStore",
    "SupabaseDocumentStore",
    "get_document_store",
]
