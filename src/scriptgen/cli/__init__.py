"""Command-line interface for scriptgen."""

from scriptgen.cli.app import entrypoint, main

__all__ = ["entrypoint", "main"]
