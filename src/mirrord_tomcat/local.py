"""In-process implementations of the host objects.

Used by the ``preview`` command to run the interceptor without an IDE.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from mirrord_tomcat.models import EnvironmentVariable, StartupInfo

DEFAULT_JNDI_PORT = 1099


@dataclass
class LocalServerModel:
    jndi_port: int = DEFAULT_JNDI_PORT
    access_file: str | None = None
    password_file: str | None = None
    vm_arguments: dict[str, str] = field(default_factory=dict)

    def vm_argument(self, name: str) -> str | None:
        return self.vm_arguments.get(name)


@dataclass
class LocalServerStrategy:
    """Owner of a startup descriptor, linking it to its server model."""

    server_model: LocalServerModel


class LocalRunConfiguration:
    """A run configuration kept in memory.

    Variable names are unique; writing a name twice keeps the last value at
    the position of the first.
    """

    def __init__(
        self,
        startup_info: StartupInfo | None = None,
        env_variables: Sequence[EnvironmentVariable] = (),
        java_parameters: Sequence[str] = (),
        server_model: LocalServerModel | None = None,
    ) -> None:
        self.startup_info = startup_info if startup_info is not None else StartupInfo()
        self.java_parameters = list(java_parameters)
        if self.startup_info.parent is None:
            self.startup_info.parent = LocalServerStrategy(server_model or LocalServerModel())
        self._env: dict[str, EnvironmentVariable] = {}
        self.set_environment_variables(env_variables)

    @property
    def env_variables(self) -> list[EnvironmentVariable]:
        return list(self._env.values())

    def set_environment_variables(self, env_vars: Sequence[EnvironmentVariable]) -> None:
        env: dict[str, EnvironmentVariable] = {}
        for env_var in env_vars:
            env[env_var.name] = env_var
        self._env = env

    def env_dict(self) -> dict[str, str]:
        return {env_var.name: env_var.value for env_var in self._env.values()}

    def build_vm_arguments(self) -> str:
        parts = [self.startup_info.vm_parameters or "", *self.java_parameters]
        return " ".join(part for part in parts if part.strip())


@dataclass
class LocalExecutionEnvironment:
    configuration_settings: Any
    configuration_kind: str = "Tomcat Server"
    remote_target: str | None = None
    home: str | None = None

    def server_home(self) -> str | None:
        return self.home
