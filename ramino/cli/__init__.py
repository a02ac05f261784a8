"""Command-line interface for the Ramino rules engine."""

from .main import app, main

__all__ = ["app", "main"]
