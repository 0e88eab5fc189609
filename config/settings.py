"""Saigai Watch: WatchConfig and environment-based configuration loading.

All runtime configuration flows through WatchConfig. Paths and the log level
may be overridden from environment variables (a local .env file is honoured).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

from dateutil import tz
from dotenv import load_dotenv

from config.defaults import (
    DEFAULT_LOCALE,
    DEFAULT_LOG_LEVEL,
    FLASH_DURATION_SECONDS,
    FLY_TO_ZOOM,
    LOOKBACK_HOURS,
    MAP_CENTER,
    MAP_ZOOM,
    MAX_REQUEST_TIMEOUT,
    MIN_MAGNITUDE,
    OUTPUT_PATH,
    PREFERENCES_PATH,
    SEARCH_LATITUDE,
    SEARCH_LONGITUDE,
    SEARCH_RADIUS_KM,
    SUPPORTED_LOCALES,
    USGS_BASE_URL,
    USGS_REQUEST_TIMEOUT,
)

# Load .env file if present; silently skip if missing
load_dotenv()

logger = logging.getLogger(__name__)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring non-integer %s=%r, using %d", name, raw, default)
        return default


@dataclass
class WatchConfig:
    """Single configuration object handed to the controller and its components.

    Feed query values, map defaults, preference/output paths and logging live
    here. Component code reads them from this object, never from globals.
    """

    # ── Feed query ─────────────────────────────────────────────────────────────
    base_url: str = USGS_BASE_URL
    lookback_hours: int = LOOKBACK_HOURS
    min_magnitude: float = MIN_MAGNITUDE
    search_latitude: float = SEARCH_LATITUDE
    search_longitude: float = SEARCH_LONGITUDE
    search_radius_km: int = SEARCH_RADIUS_KM
    request_timeout: int = field(
        default_factory=lambda: _env_int("USGS_REQUEST_TIMEOUT", USGS_REQUEST_TIMEOUT)
    )

    # ── Map view ───────────────────────────────────────────────────────────────
    map_center: Tuple[float, float] = MAP_CENTER
    map_zoom: int = MAP_ZOOM
    fly_to_zoom: int = FLY_TO_ZOOM
    flash_duration: float = FLASH_DURATION_SECONDS

    # ── Locale ─────────────────────────────────────────────────────────────────
    locale: str = DEFAULT_LOCALE
    # IANA zone for the footer clock; None means the machine's local zone
    display_timezone: Optional[str] = field(
        default_factory=lambda: os.getenv("SAIGAIWATCH_TIMEZONE") or None
    )

    # ── Paths and logging ──────────────────────────────────────────────────────
    preferences_path: str = field(
        default_factory=lambda: os.getenv("SAIGAIWATCH_PREFERENCES", PREFERENCES_PATH)
    )
    output_path: str = field(
        default_factory=lambda: os.getenv("SAIGAIWATCH_OUTPUT", OUTPUT_PATH)
    )
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL))

    def __post_init__(self) -> None:
        if self.locale not in SUPPORTED_LOCALES:
            raise ValueError(
                f"Unsupported locale {self.locale!r}; expected one of {SUPPORTED_LOCALES}"
            )
        if self.display_timezone and tz.gettz(self.display_timezone) is None:
            raise ValueError(f"Unknown time zone {self.display_timezone!r}")
        # Clamp timeout into [1, MAX_REQUEST_TIMEOUT]
        self.request_timeout = max(1, min(int(self.request_timeout), MAX_REQUEST_TIMEOUT))
        self.preferences_path = os.path.expanduser(self.preferences_path)
