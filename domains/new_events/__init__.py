"""Announcement state for newly published CTFtime events."""

from .store import SeenEvents, SeenEventStore, SEEN_EVENTS_KEY

__all__ = ["SeenEvents", "SeenEventStore", "SEEN_EVENTS_KEY"]
