"""Resolved start command model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CommandLineWithArgs:
    """The script that will be executed and the arguments passed to it."""

    command: str
    args: str | None = None
