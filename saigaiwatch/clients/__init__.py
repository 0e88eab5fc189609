"""Saigai Watch clients package.

HTTP API clients only, no rendering in this layer.
"""

from saigaiwatch.clients.usgs_client import USGSClient, parse_feed

__all__ = [
    "USGSClient",
    "parse_feed",
]
