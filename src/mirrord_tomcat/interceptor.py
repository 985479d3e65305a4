"""Patch Tomcat run configurations around a launch and restore them afterwards.

The host calls ``process_start_scheduled`` right before it starts a run
configuration, then exactly one of ``process_started`` or
``process_not_started``. Scheduling saves the configuration, injects the
mirrord environment and, when SIP forbids injecting into the startup script,
points the configuration at the patched copy of the script. Both terminal
callbacks put the saved configuration back, so the user's stored
configuration never keeps launch-time changes.
"""

import logging
from typing import Any

from mirrord_tomcat.config import (
    DETECT_DEBUGGER_PORT_ENV,
    DETECT_DEBUGGER_PORT_VALUE,
    IGNORE_DEBUGGER_PORTS_ENV,
    load_config,
)
from mirrord_tomcat.host import (
    ExecManager,
    ExecutionEnvironment,
    NotificationType,
    Notifier,
    RunConfigurationView,
)
from mirrord_tomcat.introspection import AttributeServerModelLocator, ServerModelLocator
from mirrord_tomcat.java_opts import java_opts_env_value
from mirrord_tomcat.models import (
    EnvironmentVariable,
    InterceptorConfig,
    Patch,
    SavedConfig,
    SavedStartupInfo,
)
from mirrord_tomcat.script import resolve_start_script
from mirrord_tomcat.snapshots import SnapshotStore

log = logging.getLogger(__name__)

RUN_WITHOUT_MIRRORD_MESSAGE = (
    "Cannot abort run due to platform limitations, running without mirrord"
)


class LaunchInterceptor:
    """Execution listener that runs Tomcat configurations with mirrord."""

    def __init__(
        self,
        exec_manager: ExecManager,
        notifier: Notifier,
        config: InterceptorConfig | None = None,
        store: SnapshotStore | None = None,
        locator: ServerModelLocator | None = None,
    ) -> None:
        self.exec_manager = exec_manager
        self.notifier = notifier
        self.config = config if config is not None else load_config()
        self.store = store if store is not None else SnapshotStore()
        self.locator = locator if locator is not None else AttributeServerModelLocator()

    def get_config(self, env: ExecutionEnvironment) -> RunConfigurationView | None:
        """Return the local Tomcat configuration of ``env``, or None if not ours."""
        if not str(env.configuration_kind).startswith(self.config.managed_kind_prefix):
            return None
        settings = env.configuration_settings
        if settings is None or not isinstance(settings, RunConfigurationView):
            return None
        return settings

    def process_start_scheduled(self, executor_id: str, env: ExecutionEnvironment) -> None:
        config = self.get_config(env)
        if config is None:
            return
        try:
            self._patch(executor_id, env, config)
        except Exception as e:
            # The host offers no way to abort the launch from here, so a
            # half-applied patch is rolled back and the app runs without mirrord.
            log.debug("Running tomcat project failed: ", exc_info=True)
            log.warning("not running %s with mirrord: %s", executor_id, e)
            self.restore(executor_id, config)
            self.notifier.notify_simple(RUN_WITHOUT_MIRRORD_MESSAGE, NotificationType.WARNING)

    def process_not_started(self, executor_id: str, env: ExecutionEnvironment) -> None:
        config = self.get_config(env)
        if config is not None:
            self.restore(executor_id, config)

    def process_started(
        self, executor_id: str, env: ExecutionEnvironment, handler: Any = None
    ) -> None:
        config = self.get_config(env)
        if config is not None:
            self.restore(executor_id, config)

    def _config_reference(self, env_vars: list[EnvironmentVariable]) -> str | None:
        for env_var in env_vars:
            if env_var.name == self.config.config_env_name:
                return env_var.value
        return None

    def _patch(
        self, executor_id: str, env: ExecutionEnvironment, config: RunConfigurationView
    ) -> None:
        env_vars = list(config.env_variables)
        startup_info = config.startup_info
        command_line = resolve_start_script(
            startup_info, env.server_home, self.config.default_startup_script
        )
        log.debug("start script %s args=%r", command_line.command, command_line.args)

        patch = self.exec_manager.compute_patch(
            command_line.command, env.remote_target, self._config_reference(env_vars)
        )
        if patch is None:
            log.debug("no patch for %s, leaving configuration untouched", executor_id)
            return

        mirrord_env = {
            **patch.environment,
            DETECT_DEBUGGER_PORT_ENV: DETECT_DEBUGGER_PORT_VALUE,
            IGNORE_DEBUGGER_PORTS_ENV: self.config.server_port,
        }
        additions = [EnvironmentVariable(k, v, False) for k, v in mirrord_env.items()]
        rewrite_script = self.config.platform.rewrites_script and patch.patched_path is not None
        startup_fields: dict[str, Any] = {}
        saved_startup_info = None
        if rewrite_script:
            startup_fields, java_opts = self._startup_rewrite(
                config, patch, command_line.args, mirrord_env
            )
            additions.append(java_opts)
            saved_startup_info = SavedStartupInfo.capture(startup_info)
        elif patch.patched_path is not None:
            log.debug(
                "ignoring patched path %s on %s", patch.patched_path, self.config.platform.value
            )

        # The configuration is only modified from here on.
        self.store.put(executor_id, SavedConfig(tuple(env_vars), saved_startup_info))
        config.set_environment_variables(env_vars + additions)
        log.debug("injected %d variables into %s", len(additions), executor_id)
        for name, value in startup_fields.items():
            setattr(startup_info, name, value)
        if startup_fields:
            log.debug("startup script replaced with %s", patch.patched_path)

    def _startup_rewrite(
        self,
        config: RunConfigurationView,
        patch: Patch,
        args: str | None,
        mirrord_env: dict[str, str],
    ) -> tuple[dict[str, Any], EnvironmentVariable]:
        """Return the startup fields and ``JAVA_OPTS`` record for the SIP-patched script.

        The patched script gets what the default script would get, so the VM
        arguments are regenerated and the JMX options are passed explicitly.
        """
        server_model = self.locator.locate(config.startup_info)
        java_opts_name = self.config.java_opts_env_name
        java_opts = java_opts_env_value(
            server_model, mirrord_env, self.config.platform, java_opts_name
        )
        fields: dict[str, Any] = {
            "use_default": False,
            "script": patch.patched_path,
            "vm_parameters": config.build_vm_arguments(),
        }
        if args is not None:
            fields["program_parameters"] = args
        return fields, EnvironmentVariable(java_opts_name, java_opts, False)

    def restore(self, executor_id: str, config: RunConfigurationView) -> None:
        """Put back the configuration saved for ``executor_id``, at most once."""
        saved = self.store.take(executor_id)
        if saved is None:
            return
        config.set_environment_variables(list(saved.env_vars))
        if saved.startup_info is None:
            log.debug("restored environment of %s", executor_id)
            return
        startup_info = config.startup_info
        for name, value in saved.startup_info.fields.items():
            try:
                setattr(startup_info, name, value)
            except (AttributeError, TypeError) as e:
                log.warning("could not restore startup field %s of %s: %s", name, executor_id, e)
        log.debug("restored environment and startup script of %s", executor_id)
