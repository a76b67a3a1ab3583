"""Command-line interface for small-go."""

from smallgo.cli.app import app

__all__ = ["app"]
