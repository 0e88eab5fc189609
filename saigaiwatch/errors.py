"""Exception types for Saigai Watch."""

from __future__ import annotations


class SaigaiWatchError(Exception):
    """Base class for all Saigai Watch errors."""


class FeedError(SaigaiWatchError):
    """The seismic feed could not be fetched or parsed.

    Network failures, non-200 responses and malformed payloads all surface as
    this one error; its message is shown to the user verbatim.
    """
