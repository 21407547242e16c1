"""Utility functions for novaroute."""

from novaroute.utils.logging import configure_logging

__all__ = ["configure_logging"]
