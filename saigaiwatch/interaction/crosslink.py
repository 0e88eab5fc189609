"""Card <-> marker cross-linking for Saigai Watch.

The binder keeps an explicit table from record id to the record's card and
marker. Activating a card moves the map and opens that marker's popup;
activating a marker scrolls the list to the card and flashes its background
for a short time. Pending flash reverts are cancelled when a new cycle
replaces the handles.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional, Sequence

from config.defaults import FLASH_COLOR, FLASH_DURATION_SECONDS, FLY_TO_ZOOM
from saigaiwatch.models.events import FeatureRecord
from saigaiwatch.models.view import LinkedRecord, LinkTable, ListView, MapView
from saigaiwatch.utils.scheduling import Scheduler, ThreadingScheduler

logger = logging.getLogger(__name__)


class CrossLinkBinder:
    """Links each record's card to its marker for one cycle.

    Args:
        scheduler: Delayed-action scheduler for flash reverts.
        fly_to_zoom: Zoom applied when a card is activated.
        flash_color: Temporary card background on marker activation.
        flash_duration: Seconds before the background reverts.
    """

    def __init__(
        self,
        scheduler: Optional[Scheduler] = None,
        fly_to_zoom: int = FLY_TO_ZOOM,
        flash_color: str = FLASH_COLOR,
        flash_duration: float = FLASH_DURATION_SECONDS,
    ) -> None:
        self.scheduler = scheduler or ThreadingScheduler()
        self.fly_to_zoom = fly_to_zoom
        self.flash_color = flash_color
        self.flash_duration = flash_duration
        self.links: LinkTable = {}
        self._list_view: Optional[ListView] = None
        self._map_view: Optional[MapView] = None
        self._lock = threading.Lock()

    def bind(
        self,
        records: Sequence[FeatureRecord],
        list_view: ListView,
        map_view: MapView,
    ) -> LinkTable:
        """Build the link table for a freshly rendered cycle.

        Any handles from the previous cycle are released first. Records whose
        card or marker is missing are skipped without error.
        """
        self.release()
        markers = {m.record.id: m for m in map_view.markers}
        cards = {c.record.id: c for c in list_view.cards}

        links: LinkTable = {}
        for record in records:
            card = cards.get(record.id)
            marker = markers.get(record.id)
            if card is None or marker is None:
                logger.debug("No card/marker pair for %s, not linked", record.id)
                continue
            links[record.id] = LinkedRecord(
                record=record,
                card=card,
                marker=marker,
                original_background=card.background_color,
            )

        with self._lock:
            self.links = links
            self._list_view = list_view
            self._map_view = map_view
        logger.debug("Bound %d card/marker pair(s)", len(links))
        return links

    def activate_card(self, record_id: str) -> bool:
        """Fly the map to the record and open only its popup.

        Returns:
            False if the record is not linked in the current cycle.
        """
        link = self.links.get(record_id)
        if link is None or self._map_view is None:
            return False
        self._map_view.fly_to(link.marker.location, self.fly_to_zoom)
        self._map_view.open_popup(link.marker)
        return True

    def activate_marker(self, record_id: str) -> bool:
        """Scroll the list to the record's card and flash its background.

        A second activation before the revert fires restarts the timer; the
        card still reverts to its pre-flash background.

        Returns:
            False if the record is not linked in the current cycle.
        """
        link = self.links.get(record_id)
        if link is None or self._list_view is None:
            return False

        with self._lock:
            if link.pending_revert is not None:
                link.pending_revert.cancel()
            self._list_view.scrolled_to = link.card.card_id
            link.card.background_color = self.flash_color
            link.pending_revert = self.scheduler.call_later(
                self.flash_duration, lambda: self._revert(link)
            )
        return True

    def _revert(self, link: LinkedRecord) -> None:
        with self._lock:
            link.card.background_color = link.original_background
            link.pending_revert = None

    def release(self) -> None:
        """Cancel pending reverts and drop all handles."""
        with self._lock:
            for link in self.links.values():
                if link.pending_revert is not None:
                    link.pending_revert.cancel()
                    link.pending_revert = None
            self.links = {}
            self._list_view = None
            self._map_view = None
