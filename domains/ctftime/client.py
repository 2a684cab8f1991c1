"""CTFtime API client.

Events come back as plain dicts in the API's own shape:
id, title, url, ctftime_url, start, finish (ISO-8601), duration{hours,days},
format, weight, restrictions, organizers[{id,name}].
"""

from datetime import datetime, timedelta, timezone

import httpx

import config
from logger import logger
from .config import API_URL, USER_AGENT, MAX_EVENTS_LIMIT


class CatalogError(Exception):
    """Raised when the CTFtime API cannot serve a listing."""


def _headers() -> dict:
    """Get headers for CTFtime API calls."""
    return {
        "User-Agent": USER_AGENT,
        "Accept": "application/json",
    }


async def fetch_upcoming_events(
    days_ahead: int,
    now: datetime = None,
    limit: int = MAX_EVENTS_LIMIT
) -> list[dict]:
    """Fetch events starting within the next days_ahead days.

    Args:
        days_ahead: Size of the look-ahead window in days
        now: Window start (defaults to current UTC time)
        limit: Page size, capped at the API maximum of 100

    Returns:
        List of event dicts

    Raises:
        CatalogError: On network failure or a non-2xx response
    """
    now = now or datetime.now(timezone.utc)
    start = int(now.timestamp())
    finish = int((now + timedelta(days=days_ahead)).timestamp())

    params = {
        "limit": min(limit, MAX_EVENTS_LIMIT),
        "start": start,
        "finish": finish,
    }

    try:
        async with httpx.AsyncClient() as client:
            response = await client.get(
                f"{API_URL}/events/",
                headers=_headers(),
                params=params,
                timeout=config.HTTP_TIMEOUT
            )
    except httpx.HTTPError as e:
        raise CatalogError(f"CTFtime API request failed: {e}") from e

    if not response.is_success:
        raise CatalogError(f"CTFtime API error: {response.status_code} {response.reason_phrase}")

    try:
        events = response.json()
    except ValueError as e:
        raise CatalogError(f"CTFtime API returned invalid JSON: {e}") from e

    logger.info(f"Fetched {len(events)} upcoming events from CTFtime")
    return events


async def fetch_event(event_id: int) -> dict | None:
    """Fetch a single event.

    Args:
        event_id: CTFtime event ID

    Returns:
        Event dict, or None if the event does not exist or CTFtime is unavailable
    """
    try:
        async with httpx.AsyncClient() as client:
            response = await client.get(
                f"{API_URL}/events/{event_id}/",
                headers=_headers(),
                timeout=config.HTTP_TIMEOUT
            )
    except httpx.HTTPError as e:
        logger.warning(f"Failed to fetch CTFtime event {event_id}: {e}")
        return None

    if not response.is_success:
        logger.info(f"CTFtime event {event_id} not available ({response.status_code})")
        return None

    try:
        return response.json()
    except ValueError:
        logger.warning(f"CTFtime event {event_id} returned invalid JSON")
        return None
