"""Command-line interface for the autoscaler."""

from .main import app, main

__all__ = ["app", "main"]
