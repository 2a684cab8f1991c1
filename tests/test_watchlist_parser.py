"""Tests for slash-command argument parsing."""

from datetime import datetime, timezone

import pytest

from domains.watchlist.parser import (
    UsageError,
    extract_event_id,
    parse_add_args,
    parse_datetime,
)


class TestExtractEventId:

    @pytest.mark.parametrize("value,expected", [
        ("12345", 12345),
        ("https://ctftime.org/event/12345", 12345),
        ("https://ctftime.org/event/12345/", 12345),
        ("ctftime.org/event/987/tasks/", 987),
        ("<https://ctftime.org/event/42>", 42),
    ])
    def test_accepts_ids_and_urls(self, value, expected):
        assert extract_event_id(value) == expected

    @pytest.mark.parametrize("value", ["custom-abc12345", "abc", "12a", "https://example.org/event/1", ""])
    def test_rejects_other_input(self, value):
        assert extract_event_id(value) is None


class TestParseDatetime:

    def test_date_and_time_read_as_jst(self):
        assert parse_datetime("2026-03-15 10:00") == datetime(2026, 3, 15, 1, 0, tzinfo=timezone.utc)

    def test_iso_without_zone_read_as_jst(self):
        assert parse_datetime("2026-03-15T10:00") == datetime(2026, 3, 15, 1, 0, tzinfo=timezone.utc)

    def test_explicit_zone_is_respected(self):
        assert parse_datetime("2026-03-15T10:00Z") == datetime(2026, 3, 15, 10, 0, tzinfo=timezone.utc)
        assert parse_datetime("2026-03-15T10:00:00-05:00") == datetime(2026, 3, 15, 15, 0, tzinfo=timezone.utc)

    @pytest.mark.parametrize("value", ["tomorrow", "2026-13-40 10:00", "2026-03-15T99:00", "2026/03/15 10:00", ""])
    def test_invalid_values(self, value):
        assert parse_datetime(value) is None


class TestParseAddArgs:

    def test_two_token_and_iso_forms_give_same_start(self):
        split = parse_add_args(["2026-03-15", "10:00", "My", "CTF"])
        iso = parse_add_args(["2026-03-15T10:00", "My", "CTF"])

        assert split.start == iso.start
        assert split.title == iso.title == "My CTF"

    def test_missing_title(self):
        with pytest.raises(UsageError):
            parse_add_args(["2026-03-15T10:00"])

    def test_missing_everything(self):
        with pytest.raises(UsageError):
            parse_add_args([])

    def test_unrecognised_date(self):
        with pytest.raises(UsageError):
            parse_add_args(["15/03/2026", "10:00", "Title"])

    def test_unparseable_iso(self):
        with pytest.raises(UsageError):
            parse_add_args(["2026-02-31T10:00", "Title"])
