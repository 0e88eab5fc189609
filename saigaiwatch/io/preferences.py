"""Persisted display-theme preference.

One key (``theme``) holding ``"light"`` or ``"dark"`` in a small JSON file.
Dark is the default; only an explicit ``"light"`` turns it off.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from config.defaults import PREFERENCES_PATH, THEME_DARK, THEME_KEY, THEME_LIGHT
from saigaiwatch.io.persistence import load_json, save_json

logger = logging.getLogger(__name__)


class ThemeStore:
    """Reads and writes the light/dark preference.

    Args:
        path: Preference file location.
    """

    def __init__(self, path: str | Path = PREFERENCES_PATH) -> None:
        self.path = Path(path).expanduser()

    def saved_value(self) -> Optional[str]:
        """Return the raw saved theme string, or None if nothing is stored."""
        data = load_json(self.path)
        if not isinstance(data, dict):
            return None
        value = data.get(THEME_KEY)
        return value if isinstance(value, str) else None

    def load(self) -> bool:
        """Return True for dark mode unless ``"light"`` was saved."""
        dark = self.saved_value() != THEME_LIGHT
        logger.debug("Theme preference loaded from %s: %s", self.path, "dark" if dark else "light")
        return dark

    def save(self, dark: bool) -> None:
        """Persist the theme, keeping any other keys in the file."""
        data = load_json(self.path)
        if not isinstance(data, dict):
            data = {}
        data[THEME_KEY] = THEME_DARK if dark else THEME_LIGHT
        save_json(data, self.path)

    def toggle(self, current_dark: bool) -> bool:
        """Flip the theme, persist the new value and return it."""
        new_dark = not current_dark
        self.save(new_dark)
        logger.info("Theme switched to %s", THEME_DARK if new_dark else THEME_LIGHT)
        return new_dark
