"""Resolve the command line a Tomcat run configuration will execute."""

import logging
import os
import re
from collections.abc import Callable

from mirrord_tomcat.errors import ConfigurationUnavailable
from mirrord_tomcat.models import CommandLineWithArgs, StartupInfo
from mirrord_tomcat.models.interceptor_config import DEFAULT_STARTUP_SCRIPT

log = logging.getLogger(__name__)

# A space that is not escaped with a backslash.
UNESCAPED_SPACE_RE = re.compile(r"(?<!\\) ")


def split_command_line(command_line: str) -> CommandLineWithArgs:
    """Split a command line on its first unescaped space."""
    parts = UNESCAPED_SPACE_RE.split(command_line, maxsplit=1)
    command = parts[0]
    args = parts[1] if len(parts) > 1 else None
    return CommandLineWithArgs(command, args)


def resolve_start_script(
    startup_info: StartupInfo,
    home_provider: Callable[[], str | None],
    startup_script: str = DEFAULT_STARTUP_SCRIPT,
) -> CommandLineWithArgs:
    """Return the script that will be executed for ``startup_info``.

    When the default script is used but the host left it blank, the path is
    guessed from the Tomcat installation returned by ``home_provider``.
    """
    if not startup_info.use_default:
        if not startup_info.script:
            raise ConfigurationUnavailable("no startup script is configured")
        return CommandLineWithArgs(startup_info.script, startup_info.program_parameters)

    command_line = startup_info.default_script
    if not command_line or not command_line.strip():
        home = home_provider()
        if not home:
            raise ConfigurationUnavailable(
                "default startup script is blank and the Tomcat home is unknown"
            )
        command_line = os.path.join(home, startup_script)
        log.debug("guessed default startup script %s", command_line)
    return split_command_line(command_line)
