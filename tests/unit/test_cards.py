"""Unit tests for saigaiwatch.visualization.cards.

Covers:
- CardRenderer.render: one card per record in feed order, card ids, text fields
- Empty list -> "no events" message with zero cards
- loading() and error() status views
- Card.to_html: escaping and accent colour
"""

from __future__ import annotations

from saigaiwatch.i18n.translations import TRANSLATIONS, LocaleStore
from saigaiwatch.models.events import FeatureRecord
from saigaiwatch.visualization.cards import CardRenderer


def _record(**overrides) -> FeatureRecord:
    values = dict(
        id="ev1",
        magnitude=3.14159,
        place="Somewhere",
        time_ms=1705320000000,
        title="M 3.1 - Somewhere",
        url="https://example.com/ev1",
        longitude=139.0,
        latitude=35.0,
    )
    values.update(overrides)
    return FeatureRecord(**values)


class TestRender:
    def test_one_card_per_record_in_order(self, sample_records):
        view = CardRenderer().render(sample_records, LocaleStore("en"))
        assert len(view.cards) == len(sample_records)
        assert [c.record.id for c in view.cards] == [r.id for r in sample_records]
        assert view.message == ""

    def test_card_id_derived_from_record_id(self, sample_records):
        view = CardRenderer().render(sample_records, LocaleStore("en"))
        assert view.cards[0].card_id == "card-us7000lsze"

    def test_magnitude_one_decimal(self):
        card = CardRenderer().render([_record()], LocaleStore("en")).cards[0]
        assert card.magnitude_text == "3.1"

    def test_utc_time_string(self):
        card = CardRenderer().render([_record()], LocaleStore("en")).cards[0]
        assert card.time_text == "Mon, 15 Jan 2024 12:00:00 GMT"

    def test_accent_colour_follows_tier(self, sample_records):
        view = CardRenderer().render(sample_records, LocaleStore("en"))
        assert [c.accent_color for c in view.cards] == ["#D82C2C", "orange", "#0077B6"]

    def test_labels_localized(self):
        card = CardRenderer().render([_record()], LocaleStore("ja")).cards[0]
        assert card.location_label == "場所"
        assert card.time_label == "時刻 (UTC)"

    def test_empty_list_shows_no_events(self):
        view = CardRenderer().render([], LocaleStore("en"))
        assert view.cards == []
        assert view.message == TRANSLATIONS["en"]["no_events"]
        assert not view.is_error

    def test_each_call_returns_fresh_view(self, sample_records):
        renderer = CardRenderer()
        first = renderer.render(sample_records, LocaleStore("en"))
        second = renderer.render(sample_records[:1], LocaleStore("en"))
        assert first is not second
        assert len(second.cards) == 1


class TestStatusViews:
    def test_loading_message(self):
        view = CardRenderer().loading(LocaleStore("ja"))
        assert view.message == "USGS データ読み込み中..."
        assert view.cards == []

    def test_error_message_includes_text(self):
        view = CardRenderer().error("HTTP 503 from event service", LocaleStore("en"))
        assert view.is_error
        assert view.message == "Error loading data: HTTP 503 from event service"
        assert view.cards == []


class TestCardHtml:
    def test_html_contains_id_and_accent(self):
        card = CardRenderer().build_card(_record(magnitude=6.2), LocaleStore("en"))
        fragment = card.to_html()
        assert 'id="card-ev1"' in fragment
        assert "border-left-color: #D82C2C;" in fragment
        assert "6.2" in fragment

    def test_html_escapes_text(self):
        card = CardRenderer().build_card(_record(place="<script>x</script>"), LocaleStore("en"))
        fragment = card.to_html()
        assert "<script>" not in fragment
        assert "&lt;script&gt;" in fragment

    def test_background_included_when_flashing(self):
        card = CardRenderer().build_card(_record(), LocaleStore("en"))
        card.background_color = "rgba(255, 255, 0, 0.4)"
        assert "background-color: rgba(255, 255, 0, 0.4);" in card.to_html()
