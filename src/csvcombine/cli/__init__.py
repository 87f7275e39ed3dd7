"""Command-line interface for csvcombine."""

from csvcombine.cli.main import app, main

__all__ = ["app", "main"]
