"""Sandboxer - Provision isolated sandboxes with dedicated ports and prefixes."""

__version__ = "1.0.0"

__all__ = ["__version__"]
