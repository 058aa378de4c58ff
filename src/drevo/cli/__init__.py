"""
CLI package for drevo.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from drevo.cli.app import app, main

__all__ = [
    "app",
    "main",
]
