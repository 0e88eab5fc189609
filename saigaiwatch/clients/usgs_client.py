"""USGS FDSN event service client for Saigai Watch.

Handles HTTP communication with the USGS earthquake catalogue: query
construction, a single GET per cycle, and JSON parsing into FeatureRecords.

No rendering lives here; this client returns typed records in feed order.
Every failure (network, HTTP status, malformed payload) is raised as a
single FeedError; there is no retry.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional
from urllib.parse import urlencode

import requests
from requests import Session
from requests.adapters import HTTPAdapter

from config.defaults import (
    FEED_FORMAT,
    LOOKBACK_HOURS,
    MIN_MAGNITUDE,
    SEARCH_LATITUDE,
    SEARCH_LONGITUDE,
    SEARCH_RADIUS_KM,
    USGS_BASE_URL,
    USGS_REQUEST_TIMEOUT,
)
from saigaiwatch.errors import FeedError
from saigaiwatch.models.events import FeatureRecord
from saigaiwatch.utils.date_utils import start_time_param

logger = logging.getLogger(__name__)


def _format_number(value: float) -> str:
    """Render 36.0 as '36' and 2.5 as '2.5' for query strings."""
    return f"{value:g}"


def parse_feed(payload: Any) -> List[FeatureRecord]:
    """Convert a decoded GeoJSON FeatureCollection into records.

    Args:
        payload: Decoded JSON document from the event service.

    Returns:
        FeatureRecords in feed order (possibly empty).

    Raises:
        FeedError: If the payload lacks a ``features`` array or any feature
            does not match the expected schema.
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("features"), list):
        raise FeedError("Malformed feed response: missing 'features' array")

    records: List[FeatureRecord] = []
    for index, feature in enumerate(payload["features"]):
        try:
            records.append(FeatureRecord.from_geojson_feature(feature))
        except (KeyError, IndexError, TypeError, ValueError) as exc:
            raise FeedError(f"Malformed feature at index {index}: {exc!r}") from exc
    return records


class USGSClient:
    """Client for the USGS FDSN event query endpoint.

    Args:
        base_url: Event query endpoint.
        lookback_hours: Hours before now used for the ``starttime`` date.
        min_magnitude: ``minmagnitude`` filter.
        latitude: Search circle centre latitude.
        longitude: Search circle centre longitude.
        max_radius_km: Search circle radius in kilometres.
        request_timeout: HTTP timeout in seconds.
    """

    def __init__(
        self,
        base_url: str = USGS_BASE_URL,
        lookback_hours: int = LOOKBACK_HOURS,
        min_magnitude: float = MIN_MAGNITUDE,
        latitude: float = SEARCH_LATITUDE,
        longitude: float = SEARCH_LONGITUDE,
        max_radius_km: int = SEARCH_RADIUS_KM,
        request_timeout: int = USGS_REQUEST_TIMEOUT,
    ) -> None:
        self.base_url = base_url
        self.lookback_hours = lookback_hours
        self.min_magnitude = min_magnitude
        self.latitude = latitude
        self.longitude = longitude
        self.max_radius_km = max_radius_km
        self.request_timeout = request_timeout

        self._session = Session()
        adapter = HTTPAdapter(max_retries=0)   # One attempt per cycle
        self._session.mount("https://", adapter)
        self._session.mount("http://", adapter)

    @classmethod
    def from_config(cls, config: Any) -> "USGSClient":
        """Build a client from a WatchConfig."""
        return cls(
            base_url=config.base_url,
            lookback_hours=config.lookback_hours,
            min_magnitude=config.min_magnitude,
            latitude=config.search_latitude,
            longitude=config.search_longitude,
            max_radius_km=config.search_radius_km,
            request_timeout=config.request_timeout,
        )

    def build_params(self, now: Optional[datetime] = None) -> Dict[str, str]:
        """Build the query parameters; ``starttime`` is computed at call time."""
        return {
            "format": FEED_FORMAT,
            "starttime": start_time_param(now, self.lookback_hours),
            "minmagnitude": _format_number(self.min_magnitude),
            "latitude": _format_number(self.latitude),
            "longitude": _format_number(self.longitude),
            "maxradiuskm": str(self.max_radius_km),
        }

    def build_url(self, now: Optional[datetime] = None) -> str:
        """Construct the full feed URL for a cycle starting at ``now``."""
        return f"{self.base_url}?{urlencode(self.build_params(now))}"

    def fetch_features(self, now: Optional[datetime] = None) -> List[FeatureRecord]:
        """Fetch the recent events around the search centre.

        Args:
            now: Reference time for the ``starttime`` parameter (defaults to
                the current UTC time).

        Returns:
            FeatureRecords in feed order; empty when no events matched.

        Raises:
            FeedError: On any network, HTTP or parse failure.
        """
        url = self.build_url(now)
        logger.debug("USGS GET %s", url)
        try:
            resp = self._session.get(url, timeout=self.request_timeout)
        except requests.exceptions.Timeout as exc:
            logger.warning("USGS request timed out after %ss", self.request_timeout)
            raise FeedError(f"Request timed out after {self.request_timeout}s") from exc
        except requests.exceptions.RequestException as exc:
            logger.warning("USGS request failed: %s", exc)
            raise FeedError(str(exc)) from exc

        if resp.status_code != 200:
            logger.warning("USGS returned HTTP %d for URL: %s", resp.status_code, url)
            raise FeedError(f"HTTP {resp.status_code} from event service")

        try:
            payload = resp.json()
        except ValueError as exc:
            logger.warning("USGS response body is not valid JSON (length=%d)", len(resp.text or ""))
            raise FeedError(f"Invalid JSON in feed response: {exc}") from exc

        records = parse_feed(payload)
        logger.info("USGS feed returned %d event(s)", len(records))
        return records

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()

    def __enter__(self) -> "USGSClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
