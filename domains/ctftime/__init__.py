"""CTFtime event catalog."""

from .client import fetch_event, fetch_upcoming_events, CatalogError

__all__ = ["fetch_event", "fetch_upcoming_events", "CatalogError"]
