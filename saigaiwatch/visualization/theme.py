"""Shared colour constants and magnitude styling for Saigai Watch.

Magnitude tier rules are used by both the card list and the map so that a
record's card accent and its marker always agree. Rendering only.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from config.defaults import (
    MARKER_BASE_SIZE,
    MARKER_SCALE,
    TIER_HIGH_COLOR,
    TIER_HIGH_THRESHOLD,
    TIER_LOW_COLOR,
    TIER_MEDIUM_COLOR,
    TIER_MEDIUM_THRESHOLD,
)

# ── Magnitude tiers ───────────────────────────────────────────────────────────
TIER_HIGH: str = "high"
TIER_MEDIUM: str = "medium"
TIER_LOW: str = "low"

TIER_COLORS: Mapping[str, str] = MappingProxyType({
    TIER_HIGH: TIER_HIGH_COLOR,
    TIER_MEDIUM: TIER_MEDIUM_COLOR,
    TIER_LOW: TIER_LOW_COLOR,
})

# ── Page palettes (CSS custom properties) ─────────────────────────────────────
DARK_THEME: Mapping[str, str] = MappingProxyType({
    "--color-bg": "#0A0E17",        # Deep navy page background
    "--color-panel": "#111827",     # Card background
    "--color-text": "#E5E7EB",      # Off-white text
    "--color-muted": "#9CA3AF",
    "--color-border": "#374151",
    "--color-primary": "#F87171",   # Error text and heading accent
})

LIGHT_THEME: Mapping[str, str] = MappingProxyType({
    "--color-bg": "#F5F5F5",
    "--color-panel": "#FFFFFF",
    "--color-text": "#1F2937",
    "--color-muted": "#6B7280",
    "--color-border": "#D1D5DB",
    "--color-primary": "#D82C2C",
})


def magnitude_tier(mag: float) -> str:
    """Classify a magnitude: >= 6.0 high, >= 4.5 medium, otherwise low."""
    if mag >= TIER_HIGH_THRESHOLD:
        return TIER_HIGH
    if mag >= TIER_MEDIUM_THRESHOLD:
        return TIER_MEDIUM
    return TIER_LOW


def magnitude_color(mag: float) -> str:
    """Return the card/marker colour for a magnitude.

    Example:
        >>> magnitude_color(6.0)
        '#D82C2C'
    """
    return TIER_COLORS[magnitude_tier(mag)]


def marker_diameter(mag: float) -> float:
    """Marker diameter in pixels, linear in magnitude (mag 6.0 -> 28)."""
    return MARKER_BASE_SIZE + mag * MARKER_SCALE


def palette(dark: bool) -> Mapping[str, str]:
    """Return the CSS palette for the requested theme."""
    return DARK_THEME if dark else LIGHT_THEME
