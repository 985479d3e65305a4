"""JMX options Tomcat's startup policy would pass to the server JVM."""

import logging
from collections.abc import Mapping
from pathlib import Path

from mirrord_tomcat.errors import IOFailure
from mirrord_tomcat.host import ServerModel
from mirrord_tomcat.platforms import Platform
from mirrord_tomcat.quoting import combine_java_opts

log = logging.getLogger(__name__)

JAVA_VM_ENV_VARIABLE = "JAVA_OPTS"
RMI_HOST_JAVA_OPT = "java.rmi.server.hostname"


def _canonical_path(path: str) -> str:
    try:
        return str(Path(path).resolve())
    except (OSError, RuntimeError) as e:
        raise IOFailure(f"cannot canonicalize {path}: {e}") from e


def custom_java_options(server_model: ServerModel) -> list[str]:
    """Return the JMX options for ``server_model``.

    The IDE talks to the server over JMX, so these are generated even when
    the patched script bypasses the IDE's own startup policy.
    """
    result = [
        "-Dcom.sun.management.jmxremote=",
        f"-Dcom.sun.management.jmxremote.port={server_model.jndi_port}",
        "-Dcom.sun.management.jmxremote.ssl=false",
    ]
    access_file = server_model.access_file
    password_file = server_model.password_file
    if access_file is None or password_file is None:
        result.append("-Dcom.sun.management.jmxremote.authenticate=false")
    else:
        password_path = _canonical_path(password_file)
        access_path = _canonical_path(access_file)
        result.append(f"-Dcom.sun.management.jmxremote.password.file={password_path}")
        result.append(f"-Dcom.sun.management.jmxremote.access.file={access_path}")
    if server_model.vm_argument(RMI_HOST_JAVA_OPT) is None:
        result.append(f"-D{RMI_HOST_JAVA_OPT}=127.0.0.1")
    return result


def java_opts_env_value(
    server_model: ServerModel,
    env: Mapping[str, str],
    platform: Platform | None = None,
    env_name: str = JAVA_VM_ENV_VARIABLE,
) -> str:
    """Return ``env[env_name]`` extended with the JMX options."""
    custom = custom_java_options(server_model)
    log.debug("custom java options: %s", custom)
    return combine_java_opts(env.get(env_name), custom, platform)
