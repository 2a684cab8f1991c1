"""Tests for the command-line entry point."""

from unittest.mock import AsyncMock, patch

import pytest

import main
from config import ConfigError
from domains.ctftime.client import CatalogError


@pytest.fixture
def valid_config():
    with patch('main.validate_config') as mock:
        yield mock


def test_config_error_exits_2():
    with patch('main.validate_config', side_effect=ConfigError("SLACK_WEBHOOK_URL is required")), \
         patch('main.check_reminders', new_callable=AsyncMock) as mock_check:
        assert main.main(["check-reminders"]) == 2
        mock_check.assert_not_awaited()


def test_check_events_passes_window(valid_config):
    with patch('main.check_for_new_events', new_callable=AsyncMock, return_value=[]) as mock_check:
        assert main.main(["check-events", "--days-ahead", "7"]) == 0
        mock_check.assert_awaited_once_with(days_ahead=7)


def test_check_reminders(valid_config):
    with patch('main.check_reminders', new_callable=AsyncMock, return_value=[]) as mock_check:
        assert main.main(["check-reminders"]) == 0
        mock_check.assert_awaited_once()


def test_failure_exits_1(valid_config):
    with patch('main.check_for_new_events', new_callable=AsyncMock, side_effect=CatalogError("down")):
        assert main.main(["check-events"]) == 1


def test_unknown_action_is_rejected():
    with pytest.raises(SystemExit):
        main.main(["launch"])
