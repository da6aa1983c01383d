"""Utility modules for the autoscaler."""

from .log import configure_logging

__all__ = ["configure_logging"]
