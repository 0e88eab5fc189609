"""Map presenter for Saigai Watch.

Builds a fresh MapView each cycle and one Marker per record, then converts
the view to a Folium map with Leaflet DivIcon markers and bound popups.
Rendering only, no data transformation.
"""

from __future__ import annotations

import html
import logging
from typing import Any, Dict, List, Sequence, Tuple

from config.defaults import (
    MAP_CENTER,
    MAP_ZOOM,
    TILE_ATTRIBUTION,
    TILE_MAX_ZOOM,
    TILE_URL,
)
from saigaiwatch.i18n.translations import LocaleStore
from saigaiwatch.models.events import FeatureRecord
from saigaiwatch.models.view import MapView, Marker
from saigaiwatch.utils.date_utils import format_utc
from saigaiwatch.visualization.theme import magnitude_color, marker_diameter

logger = logging.getLogger(__name__)


def popup_html(record: FeatureRecord, locale: LocaleStore) -> str:
    """Popup body: title, magnitude, UTC time and the external detail link."""
    return (
        f"<h4>{html.escape(record.title)}</h4>\n"
        f"<p><strong>{html.escape(locale.t('magnitude'))}:</strong> {record.magnitude:.1f}</p>\n"
        f"<p><strong>{html.escape(locale.t('time'))}:</strong> {format_utc(record.time_ms)}</p>\n"
        f'<a href="{html.escape(record.url)}" target="_blank">'
        f"{html.escape(locale.t('link'))} &rarr;</a>"
    )


def marker_icon_html(color: str, diameter: float) -> str:
    """Inline-styled circle used as the Leaflet DivIcon body."""
    style = (
        f"background-color: {color}; width: {diameter:g}px; height: {diameter:g}px; "
        f"display: block; position: relative; border-radius: 50%; "
        f"border: 2px solid #fff; opacity: 0.8; box-shadow: 0 0 5px {color};"
    )
    return f'<div style="{style}"></div>'


class MapPresenter:
    """Creates map views and their markers.

    Args:
        center: Initial map centre (lat, lon).
        zoom: Initial zoom level.
        tile_url: Tile URL template.
        tile_attribution: Attribution shown on the map.
        max_zoom: Maximum tile zoom.
    """

    def __init__(
        self,
        center: Tuple[float, float] = MAP_CENTER,
        zoom: int = MAP_ZOOM,
        tile_url: str = TILE_URL,
        tile_attribution: str = TILE_ATTRIBUTION,
        max_zoom: int = TILE_MAX_ZOOM,
    ) -> None:
        self.center = tuple(center)
        self.zoom = zoom
        self.tile_url = tile_url
        self.tile_attribution = tile_attribution
        self.max_zoom = max_zoom

    def initialize(self) -> MapView:
        """Return a brand-new view at the fixed centre and zoom, with no markers."""
        return MapView(
            center=self.center,
            zoom=self.zoom,
            tile_url=self.tile_url,
            tile_attribution=self.tile_attribution,
            max_zoom=self.max_zoom,
        )

    def build_marker(self, record: FeatureRecord, locale: LocaleStore) -> Marker:
        return Marker(
            record=record,
            location=record.location,
            diameter=marker_diameter(record.magnitude),
            color=magnitude_color(record.magnitude),
            popup_html=popup_html(record, locale),
        )

    def add_markers(
        self,
        view: MapView,
        records: Sequence[FeatureRecord],
        locale: LocaleStore,
    ) -> List[Marker]:
        """Replace the view's markers with one marker per record, in feed order."""
        view.markers = [self.build_marker(record, locale) for record in records]
        logger.debug("Placed %d marker(s)", len(view.markers))
        return view.markers

    def to_folium(self, view: MapView, **map_options: Any) -> Tuple[Any, Dict[str, str]]:
        """Build a Folium map for the view.

        Extra keyword arguments (``width``, ``left``, ``position`` ...) are
        passed to ``folium.Map``.

        Returns:
            The ``folium.Map`` and a dict mapping record id to the JavaScript
            variable name of its Leaflet marker.
        """
        import folium

        fmap = folium.Map(
            location=list(view.center), zoom_start=view.zoom, tiles=None, **map_options
        )
        folium.TileLayer(
            tiles=view.tile_url,
            attr=view.tile_attribution,
            max_zoom=view.max_zoom,
        ).add_to(fmap)

        marker_layer = folium.FeatureGroup(name="earthquakes").add_to(fmap)
        marker_names: Dict[str, str] = {}
        for marker in view.markers:
            size = marker.diameter
            icon = folium.DivIcon(
                html=marker_icon_html(marker.color, size),
                icon_size=(size, size),
                icon_anchor=(size / 2, size / 2),
                class_name="magnitude-icon",
            )
            fmarker = folium.Marker(
                location=list(marker.location),
                icon=icon,
                popup=folium.Popup(marker.popup_html, max_width=300),
            )
            fmarker.add_to(marker_layer)
            marker_names[marker.record.id] = fmarker.get_name()

        return fmap, marker_names
