"""Saigai Watch: recent-earthquake monitor for Japan.

Public API surface:
    - WatchConfig: Runtime configuration
    - AppController: Owns the application state and runs fetch cycles
    - run: Convenience entry point (one cycle + page export)
"""

__version__ = "1.0.0"
__author__ = "Saigai Watch Contributors"

from config.settings import WatchConfig
from saigaiwatch.controller import AppController, run

__all__ = [
    "__version__",
    "WatchConfig",
    "AppController",
    "run",
]
