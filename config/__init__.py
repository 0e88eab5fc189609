"""Saigai Watch configuration package."""

from config.defaults import (
    DEFAULT_LOCALE,
    LOOKBACK_HOURS,
    MAP_CENTER,
    MAP_ZOOM,
    MIN_MAGNITUDE,
    SEARCH_RADIUS_KM,
    USGS_BASE_URL,
)
from config.settings import WatchConfig

__all__ = [
    "WatchConfig",
    "DEFAULT_LOCALE",
    "LOOKBACK_HOURS",
    "MAP_CENTER",
    "MAP_ZOOM",
    "MIN_MAGNITUDE",
    "SEARCH_RADIUS_KM",
    "USGS_BASE_URL",
]
