"""Saigai Watch I/O package: theme preference storage and page files."""

from saigaiwatch.io.persistence import load_json, save_json, write_page
from saigaiwatch.io.preferences import ThemeStore

__all__ = [
    "load_json",
    "save_json",
    "write_page",
    "ThemeStore",
]
