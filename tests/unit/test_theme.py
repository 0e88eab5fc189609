"""Unit tests for saigaiwatch.visualization.theme.

Covers:
- magnitude_tier: tier boundaries at 4.5 and 6.0
- magnitude_color: tier colours
- marker_diameter: linear sizing
- palette: light/dark selection
"""

from __future__ import annotations

import pytest

from saigaiwatch.visualization.theme import (
    DARK_THEME,
    LIGHT_THEME,
    TIER_HIGH,
    TIER_LOW,
    TIER_MEDIUM,
    magnitude_color,
    magnitude_tier,
    marker_diameter,
    palette,
)


class TestMagnitudeTier:
    @pytest.mark.parametrize(
        "mag,expected",
        [
            (9.1, TIER_HIGH),
            (6.0, TIER_HIGH),
            (5.99, TIER_MEDIUM),
            (4.5, TIER_MEDIUM),
            (4.49, TIER_LOW),
            (2.5, TIER_LOW),
            (0.0, TIER_LOW),
            (-1.0, TIER_LOW),
        ],
    )
    def test_tier_boundaries(self, mag, expected):
        assert magnitude_tier(mag) == expected


class TestMagnitudeColor:
    def test_high_tier_is_red(self):
        assert magnitude_color(6.0) == "#D82C2C"

    def test_medium_tier_is_orange(self):
        assert magnitude_color(4.5) == "orange"

    def test_low_tier_is_blue(self):
        assert magnitude_color(3.0) == "#0077B6"


class TestMarkerDiameter:
    def test_magnitude_six_gives_28(self):
        assert marker_diameter(6.0) == pytest.approx(28.0)

    def test_zero_magnitude_gives_base_size(self):
        assert marker_diameter(0.0) == pytest.approx(10.0)

    def test_linear_in_magnitude(self):
        assert marker_diameter(5.0) - marker_diameter(4.0) == pytest.approx(3.0)


class TestPalette:
    def test_dark_and_light_selected(self):
        assert palette(True) is DARK_THEME
        assert palette(False) is LIGHT_THEME

    def test_palettes_define_same_variables(self):
        assert set(DARK_THEME) == set(LIGHT_THEME)
