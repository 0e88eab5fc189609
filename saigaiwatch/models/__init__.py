"""Saigai Watch data models package.

Feed records, presentation state and application state as typed dataclasses.
"""

from saigaiwatch.models.events import FeatureRecord
from saigaiwatch.models.state import AppState, CycleRecord
from saigaiwatch.models.view import Card, LinkedRecord, LinkTable, ListView, MapView, Marker

__all__ = [
    "FeatureRecord",
    "AppState",
    "CycleRecord",
    "Card",
    "LinkedRecord",
    "LinkTable",
    "ListView",
    "MapView",
    "Marker",
]
