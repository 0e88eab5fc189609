"""Application state for Saigai Watch.

AppState replaces page-level globals: the controller owns one instance and
hands it to every render and update step.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import Deque, Dict, List, Optional

from config.defaults import CYCLE_LOG_LIMIT
from saigaiwatch.models.events import FeatureRecord
from saigaiwatch.models.view import LinkTable, ListView, MapView


@dataclass
class CycleRecord:
    """Timing and outcome of a single fetch-render-bind cycle."""

    generation: int
    start_time: datetime
    end_time: Optional[datetime] = None
    status: str = "PENDING"    # PENDING, OK, EMPTY, ERROR, SUPERSEDED
    record_count: int = 0

    @property
    def elapsed_seconds(self) -> float:
        if self.end_time is None:
            return 0.0
        return (self.end_time - self.start_time).total_seconds()


@dataclass
class AppState:
    """Mutable state shared by the controller's render and update steps."""

    locale: str
    dark_mode: bool = True
    static_text: Dict[str, str] = field(default_factory=dict)
    records: List[FeatureRecord] = field(default_factory=list)
    list_view: ListView = field(default_factory=ListView)
    map_view: Optional[MapView] = None
    links: LinkTable = field(default_factory=dict)
    generation: int = 0
    last_updated: Optional[datetime] = None
    footer_text: str = ""
    # Oldest records drop off once CYCLE_LOG_LIMIT is reached
    cycle_log: Deque[CycleRecord] = field(default_factory=lambda: deque(maxlen=CYCLE_LOG_LIMIT))
