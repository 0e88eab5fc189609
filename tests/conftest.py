"""Shared pytest fixtures for Saigai Watch tests.

- Fixture data lives in tests/fixtures/ as static JSON files
- mock_usgs_client returns fixture records without HTTP calls
- usgs_http_mock patches requests.Session.get for client tests
- manual_scheduler lets tests fire flash reverts explicitly
- No real external HTTP calls are made in any test
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, List
from unittest.mock import MagicMock, patch

import pytest
from dateutil import tz

_FIXTURES_DIR = Path(__file__).parent / "fixtures"

# Fixed reference time for the fixture feed (2024-01-15 12:05:00 UTC)
FIXED_NOW = datetime(2024, 1, 15, 12, 5, 0, tzinfo=tz.UTC)


# ── Raw fixture data loaders ─────────────────────────────────────────────────────

@pytest.fixture(scope="session")
def feed_raw() -> Dict[str, Any]:
    """Raw USGS GeoJSON FeatureCollection with three events (M6.0, M4.5, M2.7)."""
    with open(_FIXTURES_DIR / "sample_feed.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture(scope="session")
def sample_records(feed_raw):
    """FeatureRecords parsed from the fixture feed, in feed order."""
    from saigaiwatch.models.events import FeatureRecord

    return [FeatureRecord.from_geojson_feature(f) for f in feed_raw["features"]]


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    return lambda: FIXED_NOW


# ── Scheduler double ─────────────────────────────────────────────────────────────

class _ManualAction:
    def __init__(self, delay: float, callback: Callable[[], None]) -> None:
        self.delay = delay
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Scheduler that only runs callbacks when fire_all() is called."""

    def __init__(self) -> None:
        self.actions: List[_ManualAction] = []

    def call_later(self, delay: float, callback: Callable[[], None]) -> _ManualAction:
        action = _ManualAction(delay, callback)
        self.actions.append(action)
        return action

    @property
    def pending(self) -> List[_ManualAction]:
        return [a for a in self.actions if not a.cancelled and not a.fired]

    def fire_all(self) -> None:
        for action in self.pending:
            action.fired = True
            action.callback()


@pytest.fixture
def manual_scheduler() -> ManualScheduler:
    return ManualScheduler()


# ── Mock USGS client ─────────────────────────────────────────────────────────────

@pytest.fixture
def mock_usgs_client(sample_records):
    """Mock USGSClient whose fetch_features() returns the fixture records."""
    from saigaiwatch.clients.usgs_client import USGSClient

    client = MagicMock(spec=USGSClient)
    client.fetch_features.return_value = list(sample_records)
    return client


# ── Config and controller fixtures ───────────────────────────────────────────────

@pytest.fixture
def test_config(tmp_path):
    """WatchConfig isolated to a temp directory."""
    from config.settings import WatchConfig

    return WatchConfig(
        preferences_path=str(tmp_path / "prefs" / "preferences.json"),
        output_path=str(tmp_path / "outputs" / "page.html"),
        log_level="WARNING",
        display_timezone="UTC",
    )


@pytest.fixture
def controller(test_config, mock_usgs_client, manual_scheduler, fixed_clock):
    """AppController wired to the mock client, manual scheduler and fixed clock."""
    from saigaiwatch.controller import AppController

    ctrl = AppController(
        test_config,
        client=mock_usgs_client,
        scheduler=manual_scheduler,
        clock=fixed_clock,
    )
    yield ctrl
    ctrl.close()


# ── Response mock helper for USGS HTTP tests ─────────────────────────────────────

@pytest.fixture
def usgs_http_mock():
    """Context manager that patches requests.Session.get with a configurable response.

    Usage:
        def test_something(usgs_http_mock):
            with usgs_http_mock(status_code=200, payload={"features": []}) as mock_get:
                ...
    """
    import requests

    class _HttpMockContext:
        def __call__(self, status_code: int = 200, payload: Any = None, json_error: bool = False):
            mock_resp = MagicMock()
            mock_resp.status_code = status_code
            mock_resp.text = json.dumps(payload) if payload is not None else ""
            if json_error:
                mock_resp.json.side_effect = ValueError("Expecting value: line 1 column 1")
            else:
                mock_resp.json.return_value = payload
            return patch.object(requests.Session, "get", return_value=mock_resp)

    return _HttpMockContext()
