"""Block Kit message builders."""

from datetime import datetime, timezone

from domains.ctftime.config import SITE_URL
from domains.ctftime.formatting import format_datetime, format_event_for_slack


def header(text: str) -> dict:
    return {"type": "header", "text": {"type": "plain_text", "text": text}}


def divider() -> dict:
    return {"type": "divider"}


def section(text: str) -> dict:
    return {"type": "section", "text": {"type": "mrkdwn", "text": text}}


def context(text: str) -> dict:
    return {"type": "context", "elements": [{"type": "mrkdwn", "text": text}]}


def build_new_events_message(events: list[dict], now: datetime = None) -> tuple[str, list[dict]]:
    """Build the batched "new events" announcement.

    Layout: header with the count, then a divider and a section per event,
    then a footer naming the source and the check time.

    Returns:
        Tuple of (fallback text, blocks)
    """
    now = now or datetime.now(timezone.utc)

    blocks = [header(f"🚩 New CTF events ({len(events)})")]
    for event in events:
        blocks.append(divider())
        blocks.append(section(format_event_for_slack(event)))
    blocks.append(context(f"_Source: <{SITE_URL}|CTFtime.org> | {format_datetime(now)}_"))

    text = f"Found {len(events)} new CTF event(s)"
    return text, blocks
