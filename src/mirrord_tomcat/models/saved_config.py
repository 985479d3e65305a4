"""Pre-patch state kept for the duration of one launch attempt."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from mirrord_tomcat.models.environment_variable import EnvironmentVariable
from mirrord_tomcat.models.startup_info import StartupInfo

STARTUP_FIELDS = ("use_default", "script", "program_parameters", "vm_parameters")


@dataclass(frozen=True)
class SavedStartupInfo:
    """Startup fields captured before the script was swapped for a patched one."""

    fields: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def capture(cls, startup_info: StartupInfo) -> "SavedStartupInfo":
        return cls({name: getattr(startup_info, name) for name in STARTUP_FIELDS})


@dataclass(frozen=True)
class SavedConfig:
    env_vars: tuple[EnvironmentVariable, ...]
    startup_info: SavedStartupInfo | None = None
