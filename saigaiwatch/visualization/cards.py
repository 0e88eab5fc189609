"""Event list renderer for Saigai Watch.

Turns FeatureRecords into Card objects inside a fresh ListView. Each call
produces a whole new list; nothing is diffed against the previous cycle.
"""

from __future__ import annotations

import logging
from typing import Sequence

from saigaiwatch.i18n.translations import LocaleStore
from saigaiwatch.models.events import FeatureRecord
from saigaiwatch.models.view import Card, ListView
from saigaiwatch.utils.date_utils import format_utc
from saigaiwatch.visualization.theme import magnitude_color

logger = logging.getLogger(__name__)


class CardRenderer:
    """Builds list views: loading, error, empty and populated."""

    def loading(self, locale: LocaleStore) -> ListView:
        return ListView(message=locale.t("loading"))

    def error(self, message: str, locale: LocaleStore) -> ListView:
        """List view that shows only the fetch error text."""
        return ListView(message=f"{locale.t('error')} {message}", is_error=True)

    def build_card(self, record: FeatureRecord, locale: LocaleStore) -> Card:
        return Card(
            card_id=record.card_id,
            record=record,
            title=record.title,
            magnitude_text=f"{record.magnitude:.1f}",
            place=record.place,
            time_text=format_utc(record.time_ms),
            accent_color=magnitude_color(record.magnitude),
            location_label=locale.t("location"),
            time_label=locale.t("time"),
        )

    def render(self, records: Sequence[FeatureRecord], locale: LocaleStore) -> ListView:
        """Render one card per record in feed order.

        An empty sequence yields the localized "no events" message and no cards.
        """
        if not records:
            logger.info("No events to render")
            return ListView(message=locale.t("no_events"))

        cards = [self.build_card(record, locale) for record in records]
        logger.debug("Rendered %d card(s)", len(cards))
        return ListView(cards=cards)
