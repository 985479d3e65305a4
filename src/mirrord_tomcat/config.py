"""Configuration for mirrord_tomcat."""

import logging
import os

from mirrord_tomcat.models import DEFAULT_TOMCAT_SERVER_PORT, InterceptorConfig
from mirrord_tomcat.platforms import Platform

log = logging.getLogger(__name__)

SERVER_PORT_ENV = "MIRRORD_TOMCAT_SERVER_PORT"
PLATFORM_ENV = "MIRRORD_TOMCAT_PLATFORM"

# Injected next to the patch so the layer does not wait on Tomcat's shutdown
# port as if it were a debugger port.
DETECT_DEBUGGER_PORT_ENV = "MIRRORD_DETECT_DEBUGGER_PORT"
IGNORE_DEBUGGER_PORTS_ENV = "MIRRORD_IGNORE_DEBUGGER_PORTS"
DETECT_DEBUGGER_PORT_VALUE = "javaagent"


def get_server_port() -> str:
    """Return the Tomcat shutdown port from env or default."""
    return os.environ.get(SERVER_PORT_ENV) or DEFAULT_TOMCAT_SERVER_PORT


def get_platform() -> Platform:
    """Return the platform override from env, or the detected one."""
    override = os.environ.get(PLATFORM_ENV, "").strip().lower()
    if override:
        try:
            return Platform(override)
        except ValueError:
            log.warning("ignoring unknown %s=%r", PLATFORM_ENV, override)
    return Platform.current()


def load_config() -> InterceptorConfig:
    """Build the interceptor configuration from the process environment."""
    config = InterceptorConfig(server_port=get_server_port(), platform=get_platform())
    log.debug("config=%s", config.model_dump())
    return config
