"""Tests for the CTFtime API client and event formatting."""

from unittest.mock import Mock

import httpx
import pytest

from domains.ctftime.client import CatalogError, fetch_event, fetch_upcoming_events
from domains.ctftime.formatting import format_duration, format_event_for_slack


def response(status=200, payload=None):
    return Mock(
        status_code=status,
        is_success=200 <= status < 300,
        reason_phrase="OK" if status < 400 else "Error",
        json=Mock(return_value=payload),
    )


class TestFetchUpcomingEvents:

    @pytest.mark.asyncio
    async def test_queries_window_with_user_agent(self, mock_httpx_client, now):
        mock_httpx_client.get.return_value = response(payload=[{"id": 1}])

        events = await fetch_upcoming_events(30, now=now)

        assert events == [{"id": 1}]
        args, kwargs = mock_httpx_client.get.call_args
        assert args[0] == "https://ctftime.org/api/v1/events/"
        start = int(now.timestamp())
        assert kwargs["params"] == {"limit": 100, "start": start, "finish": start + 30 * 86400}
        assert kwargs["headers"]["User-Agent"]
        assert kwargs["timeout"] > 0

    @pytest.mark.asyncio
    async def test_limit_is_capped(self, mock_httpx_client, now):
        mock_httpx_client.get.return_value = response(payload=[])

        await fetch_upcoming_events(7, now=now, limit=500)

        assert mock_httpx_client.get.call_args.kwargs["params"]["limit"] == 100

    @pytest.mark.asyncio
    async def test_non_2xx_raises(self, mock_httpx_client, now):
        mock_httpx_client.get.return_value = response(status=503)

        with pytest.raises(CatalogError, match="503"):
            await fetch_upcoming_events(30, now=now)

    @pytest.mark.asyncio
    async def test_network_error_raises(self, mock_httpx_client, now):
        mock_httpx_client.get.side_effect = httpx.ReadTimeout("slow")

        with pytest.raises(CatalogError):
            await fetch_upcoming_events(30, now=now)


class TestFetchEvent:

    @pytest.mark.asyncio
    async def test_found(self, mock_httpx_client, ctftime_event):
        mock_httpx_client.get.return_value = response(payload=ctftime_event)

        assert await fetch_event(2345) == ctftime_event
        assert mock_httpx_client.get.call_args.args[0] == "https://ctftime.org/api/v1/events/2345/"

    @pytest.mark.asyncio
    async def test_404_is_not_found(self, mock_httpx_client):
        mock_httpx_client.get.return_value = response(status=404)
        assert await fetch_event(1) is None

    @pytest.mark.asyncio
    async def test_network_error_is_not_found(self, mock_httpx_client):
        mock_httpx_client.get.side_effect = httpx.ConnectError("refused")
        assert await fetch_event(1) is None


class TestFormatting:

    def test_event_block(self, ctftime_event):
        text = format_event_for_slack(ctftime_event)

        assert text.splitlines()[0] == "*<https://ctftime.org/event/2345/|Example CTF 2026>*"
        assert "📅 2026/03/15 10:00 〜 2026/03/17 10:00" in text
        assert "⏱️ 2d 0h" in text
        assert "🏷️ Jeopardy | Weight: 24.50" in text
        assert "👥 Example Team" in text
        assert "🔗 <https://example-ctf.org|Official site>" in text
        assert "🔒" not in text

    def test_restricted_event_shows_restrictions(self, ctftime_event):
        ctftime_event["restrictions"] = "Academic"
        assert "🔒 Academic" in format_event_for_slack(ctftime_event)

    @pytest.mark.parametrize("duration,expected", [
        ({"hours": 36, "days": 0}, "36h"),
        ({"hours": 48, "days": 2}, "2d 0h"),
        ({"hours": 12, "days": 1}, "1d 12h"),
    ])
    def test_duration(self, duration, expected):
        assert format_duration({"duration": duration}) == expected
