"""Tests for watchlist entry encoding."""

from datetime import datetime, timezone

import pytest

from domains.watchlist.models import (
    CatalogEntry,
    CustomEntry,
    entry_from_catalog_event,
    entry_from_dict,
    entry_to_dict,
)


def test_catalog_entry_document_shape(make_entry):
    entry = make_entry(event_id=2345, hours=30, title="Example CTF", reminded_24h=True)

    data = entry_to_dict(entry)

    assert data["eventId"] == 2345
    assert data["title"] == "Example CTF"
    assert data["start"] == "2026-03-11T18:00:00Z"
    assert data["reminded24h"] is True
    assert data["reminded1h"] is False
    assert "isCustom" not in data
    assert entry_from_dict(data) == entry


def test_custom_entry_keeps_variant_and_description(make_custom_entry):
    entry = make_custom_entry(description="Bring snacks", url="https://example.org")

    data = entry_to_dict(entry)
    restored = entry_from_dict(data)

    assert data["isCustom"] is True
    assert isinstance(restored, CustomEntry)
    assert restored.description == "Bring snacks"
    assert restored == entry


def test_legacy_document_without_optional_fields():
    """Documents written by earlier versions omit flags and addedAt."""
    entry = entry_from_dict({"eventId": 77, "title": "Old", "start": "2026-01-01T00:00:00.000Z"})

    assert isinstance(entry, CatalogEntry)
    assert entry.start == datetime(2026, 1, 1, tzinfo=timezone.utc)
    assert entry.reminded_24h is False
    assert entry.added_at is None


def test_offsets_are_normalised_to_utc():
    entry = entry_from_dict({"eventId": 1, "title": "T", "start": "2026-03-15T10:00:00+09:00"})
    assert entry.start == datetime(2026, 3, 15, 1, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize("data", [
    {"title": "No id", "start": "2026-01-01T00:00:00Z"},
    {"eventId": 1, "start": "2026-01-01T00:00:00Z"},
    {"eventId": 1, "title": "No start"},
    {"eventId": 1, "title": "Bad start", "start": "next tuesday"},
])
def test_invalid_documents_raise(data):
    with pytest.raises((KeyError, ValueError)):
        entry_from_dict(data)


def test_entry_from_catalog_event(ctftime_event, now):
    entry = entry_from_catalog_event(ctftime_event, added_at=now)

    assert entry.id == 2345
    assert entry.start == datetime(2026, 3, 15, 1, 0, tzinfo=timezone.utc)
    assert entry.finish == datetime(2026, 3, 17, 1, 0, tzinfo=timezone.utc)
    assert entry.url == "https://ctftime.org/event/2345/"
    assert not entry.reminded_24h and not entry.reminded_1h
    assert not entry.is_custom


@pytest.mark.parametrize("start", ["", None])
def test_catalog_event_without_start_is_rejected(ctftime_event, now, start):
    ctftime_event["start"] = start

    with pytest.raises(ValueError, match="start is empty"):
        entry_from_catalog_event(ctftime_event, added_at=now)


def test_catalog_event_must_be_a_dict(now):
    with pytest.raises(TypeError):
        entry_from_catalog_event([2345, "Example CTF"], added_at=now)
