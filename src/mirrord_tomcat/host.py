"""Interfaces of the host IDE objects the interceptor talks to."""

import enum
from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

from mirrord_tomcat.models import EnvironmentVariable, Patch, StartupInfo


class NotificationType(str, enum.Enum):
    WARNING = "warning"


@runtime_checkable
class RunConfigurationView(Protocol):
    """Capability-restricted view of a local Tomcat run configuration."""

    startup_info: StartupInfo

    @property
    def env_variables(self) -> list[EnvironmentVariable]: ...

    def set_environment_variables(self, env_vars: Sequence[EnvironmentVariable]) -> None: ...

    def build_vm_arguments(self) -> str:
        """Regenerate VM arguments from the configuration's own Java parameters."""
        ...


class ExecutionEnvironment(Protocol):
    """One scheduled launch as seen by the execution listener."""

    configuration_kind: str
    configuration_settings: Any
    remote_target: str | None

    def server_home(self) -> str | None:
        """Return the Tomcat installation root of the application server."""
        ...


class ServerModel(Protocol):
    """JMX related settings of a local Tomcat server."""

    jndi_port: int
    access_file: str | None
    password_file: str | None

    def vm_argument(self, name: str) -> str | None: ...


class ExecManager(Protocol):
    def compute_patch(
        self, command: str, remote_target: str | None, config_reference: str | None
    ) -> Patch | None: ...


class Notifier(Protocol):
    def notify_simple(self, message: str, notification_type: NotificationType) -> None: ...
