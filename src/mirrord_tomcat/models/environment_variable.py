"""Environment variable record of a run configuration."""

from dataclasses import dataclass


@dataclass(frozen=True)
class EnvironmentVariable:
    name: str
    value: str
    is_predefined: bool = False
