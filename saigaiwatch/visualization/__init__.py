"""Saigai Watch visualization package.

Rendering functions only: card list, map markers and the HTML page.
Magnitude colours and page palettes are shared from visualization/theme.py.
"""

from saigaiwatch.visualization.cards import CardRenderer
from saigaiwatch.visualization.map_presenter import MapPresenter
from saigaiwatch.visualization.page import render_page
from saigaiwatch.visualization.theme import (
    DARK_THEME,
    LIGHT_THEME,
    magnitude_color,
    magnitude_tier,
    marker_diameter,
)

__all__ = [
    "CardRenderer",
    "MapPresenter",
    "render_page",
    "DARK_THEME",
    "LIGHT_THEME",
    "magnitude_color",
    "magnitude_tier",
    "marker_diameter",
]
