"""Presentation-state models for Saigai Watch.

These dataclasses are the headless equivalent of the page: a list of cards,
a map with markers, and the table that links the two. Renderers build them;
the cross-link binder and the page renderer read and mutate them.
"""

from __future__ import annotations

import html
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from saigaiwatch.models.events import FeatureRecord
from saigaiwatch.utils.scheduling import ScheduledAction


@dataclass
class Card:
    """Visual card for one record in the event list."""

    card_id: str
    record: FeatureRecord
    title: str
    magnitude_text: str
    place: str
    time_text: str
    accent_color: str
    location_label: str
    time_label: str
    background_color: str = ""

    def to_html(self) -> str:
        """Render the card as an HTML fragment."""
        style = f"border-left-color: {self.accent_color};"
        if self.background_color:
            style += f" background-color: {self.background_color};"
        return (
            f'<div class="earthquake-card" id="{html.escape(self.card_id)}" style="{style}">\n'
            f'  <div class="card-title">\n'
            f'    <h2>{html.escape(self.title)}</h2>\n'
            f'    <span class="magnitude" style="color: {self.accent_color};">'
            f'{html.escape(self.magnitude_text)}</span>\n'
            f'  </div>\n'
            f'  <p><strong>{html.escape(self.location_label)}:</strong> {html.escape(self.place)}</p>\n'
            f'  <p><strong>{html.escape(self.time_label)}:</strong> {html.escape(self.time_text)}</p>\n'
            f'</div>\n'
        )


@dataclass
class ListView:
    """The event list container: either a status message or a set of cards."""

    cards: List[Card] = field(default_factory=list)
    message: str = ""
    is_error: bool = False
    scrolled_to: Optional[str] = None    # card_id last scrolled into view

    def card_for(self, record_id: str) -> Optional[Card]:
        for card in self.cards:
            if card.record.id == record_id:
                return card
        return None


@dataclass
class Marker:
    """Map marker for one record."""

    record: FeatureRecord
    location: Tuple[float, float]    # (lat, lon)
    diameter: float
    color: str
    popup_html: str
    popup_open: bool = False


@dataclass
class MapView:
    """Map state for one cycle: viewport, tile source and markers."""

    center: Tuple[float, float]
    zoom: int
    tile_url: str
    tile_attribution: str
    max_zoom: int
    markers: List[Marker] = field(default_factory=list)

    def fly_to(self, location: Tuple[float, float], zoom: int) -> None:
        self.center = location
        self.zoom = zoom

    def open_popup(self, marker: Marker) -> None:
        """Open one marker's popup, closing any other."""
        for other in self.markers:
            other.popup_open = other is marker

    @property
    def open_popups(self) -> List[Marker]:
        return [m for m in self.markers if m.popup_open]


@dataclass
class LinkedRecord:
    """A record together with its card and marker handles."""

    record: FeatureRecord
    card: Card
    marker: Marker
    original_background: str = ""
    pending_revert: Optional[ScheduledAction] = None


# Record id -> linked handles, rebuilt every cycle
LinkTable = Dict[str, LinkedRecord]
