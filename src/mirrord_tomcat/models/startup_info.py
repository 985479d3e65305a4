"""Startup script descriptor of a local Tomcat run configuration."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class StartupInfo:
    """How the server is started.

    When ``use_default`` is set the command line comes from ``default_script``,
    otherwise ``script`` is executed with ``program_parameters``.
    """

    use_default: bool = True
    script: str | None = None
    default_script: str = ""
    program_parameters: str | None = None
    vm_parameters: str | None = None
    # Back-reference to the owning server strategy, set by the host.
    parent: Any = field(default=None, repr=False, compare=False)
