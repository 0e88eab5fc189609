"""Static bilingual text for Saigai Watch (English / Japanese).

TRANSLATIONS holds one immutable dictionary per supported locale. LocaleStore
tracks the active locale in memory only; the choice is not persisted.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Mapping

from config.defaults import DEFAULT_LOCALE, SUPPORTED_LOCALES

logger = logging.getLogger(__name__)

_EN: Dict[str, str] = {
    "title": "Saigai Watch | 災害監視",
    "description": (
        "Monitoring recent seismic events in Japan (Magnitude 2.5+). "
        "Displaying data about the last 48 hours."
    ),
    "update": "Last updated:",
    "magnitude": "Magnitude",
    "location": "Location",
    "time": "Time (UTC)",
    "link": "USGS Details",
    "lang_button": "日本語",
    "loading": "Loading USGS data...",
    "no_events": "No relevant seismic events detected in the area in the last 48 hours.",
    "error": "Error loading data:",
}

_JA: Dict[str, str] = {
    "title": "災害監視 | Saigai Watch",
    "description": "日本における最近の地震情報 (マグニチュード2.5以上) の監視。過去48時間のデータを表示します。",
    "update": "最終更新:",
    "magnitude": "マグニチュード",
    "location": "場所",
    "time": "時刻 (UTC)",
    "link": "USGS 詳細",
    "lang_button": "English",
    "loading": "USGS データ読み込み中...",
    "no_events": "過去48時間、このエリアで関連性の高い地震イベントは検出されていません。",
    "error": "データの読み込みエラー:",
}

TRANSLATIONS: Mapping[str, Mapping[str, str]] = MappingProxyType({
    "en": MappingProxyType(_EN),
    "ja": MappingProxyType(_JA),
})


class LocaleStore:
    """Active-locale holder with a two-way toggle.

    Args:
        locale: Initial locale code; must be one of SUPPORTED_LOCALES.
    """

    def __init__(self, locale: str = DEFAULT_LOCALE) -> None:
        if locale not in SUPPORTED_LOCALES:
            raise ValueError(f"Unsupported locale {locale!r}")
        self.locale = locale

    @property
    def strings(self) -> Mapping[str, str]:
        return TRANSLATIONS[self.locale]

    def t(self, key: str) -> str:
        """Look up ``key`` in the active locale.

        Raises:
            KeyError: If the key is not defined.
        """
        return TRANSLATIONS[self.locale][key]

    def toggle(self) -> str:
        """Flip between the two supported locales and return the new one."""
        first, second = SUPPORTED_LOCALES
        self.locale = second if self.locale == first else first
        logger.info("Locale switched to %s", self.locale)
        return self.locale

    def static_text(self) -> Dict[str, str]:
        """Return the page's static (non-feed) text for the active locale."""
        strings = self.strings
        return {
            "html_lang": self.locale,
            "document_title": strings["title"],
            "heading": strings["title"],
            "description": strings["description"],
            "lang_button": strings["lang_button"],
        }
