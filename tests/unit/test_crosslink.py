"""Unit tests for saigaiwatch.interaction.crosslink.

Covers:
- bind: explicit id -> (card, marker) table, skipping unmatched records
- activate_card: fly-to and exactly one open popup
- activate_marker: scroll target, flash and cancellable revert
- release: pending reverts cancelled when a new cycle replaces the handles
"""

from __future__ import annotations

from saigaiwatch.i18n.translations import LocaleStore
from saigaiwatch.interaction.crosslink import CrossLinkBinder
from saigaiwatch.visualization.cards import CardRenderer
from saigaiwatch.visualization.map_presenter import MapPresenter

_FLASH = "rgba(255, 255, 0, 0.4)"


def _render(records):
    locale = LocaleStore("en")
    list_view = CardRenderer().render(records, locale)
    presenter = MapPresenter()
    map_view = presenter.initialize()
    presenter.add_markers(map_view, records, locale)
    return list_view, map_view


class TestBind:
    def test_links_every_record(self, sample_records, manual_scheduler):
        list_view, map_view = _render(sample_records)
        links = CrossLinkBinder(manual_scheduler).bind(sample_records, list_view, map_view)

        assert list(links) == [r.id for r in sample_records]
        for record in sample_records:
            assert links[record.id].card.record is record
            assert links[record.id].marker.record is record

    def test_record_without_card_is_skipped(self, sample_records, manual_scheduler):
        list_view, map_view = _render(sample_records)
        list_view.cards = list_view.cards[1:]

        links = CrossLinkBinder(manual_scheduler).bind(sample_records, list_view, map_view)

        assert sample_records[0].id not in links
        assert len(links) == len(sample_records) - 1


class TestActivateCard:
    def test_flies_to_record_and_opens_one_popup(self, sample_records, manual_scheduler):
        list_view, map_view = _render(sample_records)
        binder = CrossLinkBinder(manual_scheduler)
        binder.bind(sample_records, list_view, map_view)

        assert binder.activate_card(sample_records[1].id) is True

        assert map_view.center == (37.5, 137.2)
        assert map_view.zoom == 8
        assert [m.record.id for m in map_view.open_popups] == [sample_records[1].id]

    def test_second_activation_closes_first_popup(self, sample_records, manual_scheduler):
        list_view, map_view = _render(sample_records)
        binder = CrossLinkBinder(manual_scheduler)
        binder.bind(sample_records, list_view, map_view)

        binder.activate_card(sample_records[0].id)
        binder.activate_card(sample_records[2].id)

        assert len(map_view.open_popups) == 1
        assert map_view.open_popups[0].record.id == sample_records[2].id

    def test_unknown_id_returns_false(self, sample_records, manual_scheduler):
        list_view, map_view = _render(sample_records)
        binder = CrossLinkBinder(manual_scheduler)
        binder.bind(sample_records, list_view, map_view)

        assert binder.activate_card("missing") is False
        assert map_view.open_popups == []


class TestActivateMarker:
    def test_scrolls_and_flashes(self, sample_records, manual_scheduler):
        list_view, map_view = _render(sample_records)
        binder = CrossLinkBinder(manual_scheduler)
        binder.bind(sample_records, list_view, map_view)

        assert binder.activate_marker(sample_records[2].id) is True

        card = list_view.cards[2]
        assert list_view.scrolled_to == card.card_id
        assert card.background_color == _FLASH
        assert manual_scheduler.pending[0].delay == 0.5

    def test_flash_reverts_after_delay(self, sample_records, manual_scheduler):
        list_view, map_view = _render(sample_records)
        binder = CrossLinkBinder(manual_scheduler)
        binder.bind(sample_records, list_view, map_view)

        binder.activate_marker(sample_records[0].id)
        manual_scheduler.fire_all()

        assert list_view.cards[0].background_color == ""
        assert binder.links[sample_records[0].id].pending_revert is None

    def test_reactivation_restarts_timer(self, sample_records, manual_scheduler):
        list_view, map_view = _render(sample_records)
        binder = CrossLinkBinder(manual_scheduler)
        binder.bind(sample_records, list_view, map_view)

        binder.activate_marker(sample_records[0].id)
        first = manual_scheduler.actions[0]
        binder.activate_marker(sample_records[0].id)

        assert first.cancelled
        assert len(manual_scheduler.pending) == 1
        manual_scheduler.fire_all()
        assert list_view.cards[0].background_color == ""

    def test_unknown_id_returns_false(self, sample_records, manual_scheduler):
        list_view, map_view = _render(sample_records)
        binder = CrossLinkBinder(manual_scheduler)
        binder.bind(sample_records, list_view, map_view)

        assert binder.activate_marker("missing") is False
        assert list_view.scrolled_to is None


class TestRelease:
    def test_rebind_cancels_pending_revert(self, sample_records, manual_scheduler):
        list_view, map_view = _render(sample_records)
        binder = CrossLinkBinder(manual_scheduler)
        binder.bind(sample_records, list_view, map_view)
        binder.activate_marker(sample_records[0].id)
        pending = manual_scheduler.actions[0]

        new_list, new_map = _render(sample_records)
        binder.bind(sample_records, new_list, new_map)

        assert pending.cancelled
        assert manual_scheduler.pending == []
        assert new_list.cards[0].background_color == ""

    def test_release_clears_links(self, sample_records, manual_scheduler):
        list_view, map_view = _render(sample_records)
        binder = CrossLinkBinder(manual_scheduler)
        binder.bind(sample_records, list_view, map_view)
        binder.release()

        assert binder.links == {}
        assert binder.activate_card(sample_records[0].id) is False
