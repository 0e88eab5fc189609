"""Saigai Watch utilities package.

Date formatting, logging setup and delayed-action scheduling.
"""

from saigaiwatch.utils.date_utils import format_utc, start_time_param
from saigaiwatch.utils.logging_utils import configure_logging, get_logger
from saigaiwatch.utils.scheduling import Scheduler, ThreadingScheduler

__all__ = [
    "format_utc",
    "start_time_param",
    "configure_logging",
    "get_logger",
    "Scheduler",
    "ThreadingScheduler",
]
