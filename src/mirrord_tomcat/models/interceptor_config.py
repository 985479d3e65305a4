"""Runtime configuration model for the launch interceptor."""

from pydantic import BaseModel, Field

from mirrord_tomcat.platforms import Platform

DEFAULT_TOMCAT_SERVER_PORT = "8005"
DEFAULT_STARTUP_SCRIPT = "bin/catalina.sh"


class InterceptorConfig(BaseModel):
    """Runtime configuration for the launch interceptor."""

    server_port: str = DEFAULT_TOMCAT_SERVER_PORT
    platform: Platform = Field(default_factory=Platform.current)
    config_env_name: str = "MIRRORD_CONFIG_FILE"
    java_opts_env_name: str = "JAVA_OPTS"
    managed_kind_prefix: str = "Tomcat"
    default_startup_script: str = DEFAULT_STARTUP_SCRIPT
