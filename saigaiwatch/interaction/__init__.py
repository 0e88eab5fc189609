"""Saigai Watch interaction package."""

from saigaiwatch.interaction.crosslink import CrossLinkBinder

__all__ = ["CrossLinkBinder"]
