"""Sandboxer command line interface."""

from sandboxer.cli.app import app

__all__ = ["app"]
