"""Command-line interface for mirrord_tomcat."""

from mirrord_tomcat.cli.app import entrypoint, main

__all__ = ["entrypoint", "main"]
