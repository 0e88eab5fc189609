"""Seismic event data models for Saigai Watch.

FeatureRecord is the typed form of one GeoJSON feature from the USGS event
service. Records are immutable and live for a single fetch cycle.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class FeatureRecord:
    """One earthquake entry from the feed."""

    id: str
    magnitude: float
    place: str
    time_ms: int         # Epoch milliseconds (UTC)
    title: str
    url: str
    longitude: float
    latitude: float

    @property
    def card_id(self) -> str:
        """DOM identifier of this record's card in the exported page."""
        return f"card-{self.id}"

    @property
    def location(self) -> tuple:
        """(latitude, longitude) pair in map order."""
        return (self.latitude, self.longitude)

    @classmethod
    def from_geojson_feature(cls, feature: Dict[str, Any]) -> "FeatureRecord":
        """Build a record from a raw GeoJSON feature dict.

        Null ``mag`` becomes 0.0; null ``place``/``title``/``url`` become empty
        strings. Missing ``id``, ``geometry.coordinates`` or ``time`` raise, as
        does a feature or ``properties`` value that is not a JSON object.

        Raises:
            KeyError, TypeError, ValueError: On a feature that does not match
                the feed schema.
        """
        if not isinstance(feature, dict):
            raise TypeError(f"feature must be an object, got {type(feature).__name__}")
        props = feature.get("properties") or {}
        if not isinstance(props, dict):
            raise TypeError(f"properties must be an object, got {type(props).__name__}")
        coords = feature["geometry"]["coordinates"]
        mag = props.get("mag")
        return cls(
            id=str(feature["id"]),
            magnitude=float(mag) if mag is not None else 0.0,
            place=str(props.get("place") or ""),
            time_ms=int(props["time"]),
            title=str(props.get("title") or ""),
            url=str(props.get("url") or ""),
            longitude=float(coords[0]),
            latitude=float(coords[1]),
        )
