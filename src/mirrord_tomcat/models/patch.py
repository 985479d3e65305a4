"""Patch computed by the exec manager."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Patch:
    """Environment to inject and, under SIP, the binary to launch instead."""

    environment: dict[str, str] = field(default_factory=dict)
    patched_path: str | None = None
