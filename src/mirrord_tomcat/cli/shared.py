"""Shared CLI helpers."""

import argparse
import logging

from mirrord_tomcat import __version__
from mirrord_tomcat.platforms import Platform


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")


def add_platform_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--platform",
        choices=[p.value for p in Platform],
        help="Behave as on this platform instead of the detected one",
    )


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )


def resolve_platform(value: str | None) -> Platform:
    return Platform(value) if value else Platform.current()
