"""Command-line interface for vmatch."""

from .main import main

__all__ = ["main"]
