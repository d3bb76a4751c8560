"""Command-line interface (interface layer around the import core)."""

from .app import main

__all__ = ["main"]
