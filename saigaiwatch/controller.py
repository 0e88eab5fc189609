"""Saigai Watch application controller.

Owns the AppState and runs the fetch-render-bind cycle:

  1. show the loading message and recreate the map view
  2. fetch records from the USGS feed (the only blocking step)
  3. render cards and markers, bind cross-links, stamp the footer

Every cycle takes a new generation number. A fetch result is applied only
while its generation is still the latest; results from superseded cycles
(e.g. a language toggle during an in-flight fetch) are discarded.

Usage:
    from config.settings import WatchConfig
    from saigaiwatch.controller import AppController

    controller = AppController(WatchConfig())
    controller.start()
    controller.export_page("outputs/saigai_watch.html")
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from dateutil import tz

from config.settings import WatchConfig
from saigaiwatch.clients.usgs_client import USGSClient
from saigaiwatch.errors import FeedError
from saigaiwatch.i18n.translations import LocaleStore
from saigaiwatch.interaction.crosslink import CrossLinkBinder
from saigaiwatch.io.preferences import ThemeStore
from saigaiwatch.models.events import FeatureRecord
from saigaiwatch.models.state import AppState, CycleRecord
from saigaiwatch.utils.date_utils import format_clock_time, to_local, utc_now
from saigaiwatch.utils.logging_utils import get_cycle_logger
from saigaiwatch.utils.scheduling import Scheduler
from saigaiwatch.visualization.cards import CardRenderer
from saigaiwatch.visualization.map_presenter import MapPresenter
from saigaiwatch.visualization.page import render_page

logger = logging.getLogger(__name__)


class CycleStatus:
    """Status codes recorded in CycleRecord.status."""

    PENDING = "PENDING"
    OK = "OK"
    EMPTY = "EMPTY"
    ERROR = "ERROR"
    SUPERSEDED = "SUPERSEDED"


class AppController:
    """Top-level controller for one Saigai Watch session.

    Args:
        config: Runtime configuration.
        client: Feed client (built from config when omitted).
        theme_store: Preference store (built from config when omitted).
        scheduler: Scheduler for card flash reverts.
        clock: Callable returning the current UTC datetime.
    """

    def __init__(
        self,
        config: Optional[WatchConfig] = None,
        client: Optional[USGSClient] = None,
        theme_store: Optional[ThemeStore] = None,
        scheduler: Optional[Scheduler] = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.config = config or WatchConfig()
        self.client = client or USGSClient.from_config(self.config)
        self.theme_store = theme_store or ThemeStore(self.config.preferences_path)
        self.clock = clock
        zone_name = self.config.display_timezone
        self.display_tz = tz.gettz(zone_name) if zone_name else tz.tzlocal()

        self.locale = LocaleStore(self.config.locale)
        self.renderer = CardRenderer()
        self.presenter = MapPresenter(center=self.config.map_center, zoom=self.config.map_zoom)
        self.binder = CrossLinkBinder(
            scheduler=scheduler,
            fly_to_zoom=self.config.fly_to_zoom,
            flash_duration=self.config.flash_duration,
        )

        self.state = AppState(locale=self.locale.locale, static_text=self.locale.static_text())
        self._lock = threading.RLock()
        self._executor: Optional[ThreadPoolExecutor] = None

    # ── Startup and toggles ────────────────────────────────────────────────────

    def start(self) -> AppState:
        """Apply the saved theme, then run the first cycle."""
        self.state.dark_mode = self.theme_store.load()
        return self.refresh()

    def toggle_theme(self) -> bool:
        """Flip and persist the theme; returns True when dark."""
        with self._lock:
            self.state.dark_mode = self.theme_store.toggle(self.state.dark_mode)
            return self.state.dark_mode

    def toggle_language(self) -> AppState:
        """Switch locale, update static text, and re-run the cycle."""
        self._switch_locale()
        return self.refresh()

    def toggle_language_async(self) -> "Future[AppState]":
        """Switch locale and re-run the cycle in the background."""
        self._switch_locale()
        return self.refresh_async()

    def _switch_locale(self) -> None:
        with self._lock:
            self.locale.toggle()
            self.state.locale = self.locale.locale
            self.state.static_text = self.locale.static_text()

    # ── Cycle ──────────────────────────────────────────────────────────────────

    def begin_cycle(self) -> int:
        """Start a cycle: new generation, loading message, fresh empty map."""
        with self._lock:
            self.state.generation += 1
            generation = self.state.generation
            self.binder.release()
            self.state.links = {}
            self.state.records = []
            self.state.list_view = self.renderer.loading(self.locale)
            self.state.map_view = self.presenter.initialize()
            self.state.cycle_log.append(
                CycleRecord(generation=generation, start_time=self.clock())
            )
        get_cycle_logger(__name__, generation).info("Cycle started (%s)", self.locale.locale)
        return generation

    def is_current(self, generation: int) -> bool:
        return generation == self.state.generation

    def fetch(self) -> List[FeatureRecord]:
        """Fetch records for a cycle. Raises FeedError on failure."""
        return self.client.fetch_features(now=self.clock())

    def complete_cycle(
        self,
        generation: int,
        records: Optional[Sequence[FeatureRecord]] = None,
        error: Optional[BaseException] = None,
    ) -> bool:
        """Apply a fetch outcome to the state if its cycle is still current.

        Args:
            generation: Generation returned by begin_cycle().
            records: Fetched records on success.
            error: The fetch failure, if any.

        Returns:
            True if applied, False if the cycle was superseded.
        """
        cycle_logger = get_cycle_logger(__name__, generation)
        with self._lock:
            record = self._cycle_record(generation)
            if not self.is_current(generation):
                cycle_logger.debug(
                    "Discarding result of superseded cycle (latest is %d)", self.state.generation
                )
                if record is not None:
                    record.status = CycleStatus.SUPERSEDED
                    record.end_time = self.clock()
                return False

            if error is not None:
                cycle_logger.warning("Feed fetch failed: %s", error)
                self.state.list_view = self.renderer.error(str(error), self.locale)
                status = CycleStatus.ERROR
            else:
                records = list(records or [])
                self.state.records = records
                self.state.list_view = self.renderer.render(records, self.locale)
                if records:
                    self.presenter.add_markers(self.state.map_view, records, self.locale)
                    self.state.links = self.binder.bind(
                        records, self.state.list_view, self.state.map_view
                    )
                    now = self.clock()
                    self.state.last_updated = now
                    local_now = to_local(now, self.display_tz)
                    clock_text = format_clock_time(local_now, self.locale.locale)
                    self.state.footer_text = f"{self.locale.t('update')} {clock_text}"
                    status = CycleStatus.OK
                else:
                    status = CycleStatus.EMPTY
                cycle_logger.info("Rendered %d record(s)", len(records))

            if record is not None:
                record.status = status
                record.record_count = len(self.state.records)
                record.end_time = self.clock()
                cycle_logger.info(
                    "Cycle finished: %s in %.2fs", status, record.elapsed_seconds
                )
            return True

    def refresh(self) -> AppState:
        """Run a full cycle synchronously and return the state."""
        generation = self.begin_cycle()
        try:
            records = self.fetch()
        except FeedError as exc:
            self.complete_cycle(generation, error=exc)
        else:
            self.complete_cycle(generation, records=records)
        return self.state

    def refresh_async(self) -> "Future[AppState]":
        """Run a cycle with the fetch on a worker thread.

        The returned future resolves to the state once the result has been
        applied or discarded.
        """
        generation = self.begin_cycle()
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="saigaiwatch")

        def _run() -> AppState:
            try:
                records = self.fetch()
            except FeedError as exc:
                self.complete_cycle(generation, error=exc)
            else:
                self.complete_cycle(generation, records=records)
            return self.state

        return self._executor.submit(_run)

    def _cycle_record(self, generation: int) -> Optional[CycleRecord]:
        for record in reversed(self.state.cycle_log):
            if record.generation == generation:
                return record
        return None

    # ── Interaction passthrough ────────────────────────────────────────────────

    def activate_card(self, record_id: str) -> bool:
        return self.binder.activate_card(record_id)

    def activate_marker(self, record_id: str) -> bool:
        return self.binder.activate_marker(record_id)

    # ── Output ─────────────────────────────────────────────────────────────────

    def render_page(self, alternate_href: Optional[str] = None) -> Optional[str]:
        with self._lock:
            return render_page(self.state, self.presenter, alternate_href=alternate_href)

    def export_page(
        self, output_path: str | Path, alternate_href: Optional[str] = None
    ) -> Optional[str]:
        """Render the current state and write it to ``output_path``."""
        with self._lock:
            return render_page(
                self.state, self.presenter, alternate_href=alternate_href, output_path=output_path
            )

    def close(self) -> None:
        """Cancel pending highlights, stop the worker pool and close the client."""
        self.binder.release()
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
        self.client.close()

    def __enter__(self) -> "AppController":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def run(config: WatchConfig, output_path: Optional[str | Path] = None) -> AppController:
    """Convenience entry point: start a controller and export the page.

    Args:
        config: Runtime configuration.
        output_path: Destination HTML path (defaults to config.output_path).

    Returns:
        The controller, still open, so callers can inspect its state.
    """
    controller = AppController(config)
    controller.start()
    controller.export_page(output_path or config.output_path)
    return controller
