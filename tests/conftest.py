"""Pytest configuration and fixtures."""

import os
import sys
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, patch

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domains.storage import MemoryDocumentStore
from domains.watchlist.models import CatalogEntry, CustomEntry
from domains.watchlist.store import WatchlistStore


@pytest.fixture
def now():
    """A fixed evaluation instant."""
    return datetime(2026, 3, 10, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def documents():
    """Empty in-memory document store."""
    return MemoryDocumentStore()


@pytest.fixture
def watchlist_store(documents):
    """Watchlist store backed by memory."""
    return WatchlistStore(documents)


@pytest.fixture
def make_entry(now):
    """Factory for catalog entries starting a number of hours from now."""
    def _make(event_id=1001, hours=30.0, title=None, **kwargs):
        return CatalogEntry(
            id=event_id,
            title=title or f"Event {event_id}",
            start=now + timedelta(hours=hours),
            added_at=now - timedelta(days=1),
            **kwargs
        )
    return _make


@pytest.fixture
def make_custom_entry(now):
    """Factory for custom entries starting a number of hours from now."""
    def _make(entry_id="custom-abc12345", hours=30.0, title="Team Practice", **kwargs):
        return CustomEntry(
            id=entry_id,
            title=title,
            start=now + timedelta(hours=hours),
            added_at=now - timedelta(days=1),
            **kwargs
        )
    return _make


@pytest.fixture
def ctftime_event():
    """A CTFtime API event payload."""
    return {
        "id": 2345,
        "title": "Example CTF 2026",
        "url": "https://example-ctf.org",
        "ctftime_url": "https://ctftime.org/event/2345/",
        "start": "2026-03-15T01:00:00+00:00",
        "finish": "2026-03-17T01:00:00+00:00",
        "duration": {"hours": 0, "days": 2},
        "format": "Jeopardy",
        "weight": 24.5,
        "restrictions": "Open",
        "organizers": [{"id": 1, "name": "Example Team"}],
    }


@pytest.fixture
def mock_httpx_client():
    """Create a mock httpx client."""
    with patch('httpx.AsyncClient') as mock:
        client = AsyncMock()
        mock.return_value.__aenter__.return_value = client
        yield client
