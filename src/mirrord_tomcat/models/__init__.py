"""Model package for mirrord_tomcat."""

from mirrord_tomcat.models.command_line import CommandLineWithArgs
from mirrord_tomcat.models.environment_variable import EnvironmentVariable
from mirrord_tomcat.models.interceptor_config import (
    DEFAULT_TOMCAT_SERVER_PORT,
    InterceptorConfig,
)
from mirrord_tomcat.models.patch import Patch
from mirrord_tomcat.models.saved_config import SavedConfig, SavedStartupInfo
from mirrord_tomcat.models.startup_info import StartupInfo

__all__ = [
    "CommandLineWithArgs",
    "DEFAULT_TOMCAT_SERVER_PORT",
    "EnvironmentVariable",
    "InterceptorConfig",
    "Patch",
    "SavedConfig",
    "SavedStartupInfo",
    "StartupInfo",
]
