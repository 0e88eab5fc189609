"""Saigai Watch localization package."""

from saigaiwatch.i18n.translations import TRANSLATIONS, LocaleStore

__all__ = [
    "TRANSLATIONS",
    "LocaleStore",
]
