"""CLI commands module."""

from . import config, generate, list

__all__ = ["generate", "list", "config"]
