"""`mirrord-tomcat preview` command implementation.

Runs one scheduled launch through the interceptor against an in-memory run
configuration, prints the patched configuration and then restores it.
"""

import argparse
import sys

from mirrord_tomcat.cli.shared import (
    add_common_arguments,
    add_platform_argument,
    configure_logging,
    resolve_platform,
)
from mirrord_tomcat.config import get_server_port
from mirrord_tomcat.exec_manager import DEFAULT_TIMEOUT_SECONDS, CliExecManager
from mirrord_tomcat.interceptor import LaunchInterceptor
from mirrord_tomcat.local import (
    DEFAULT_JNDI_PORT,
    LocalExecutionEnvironment,
    LocalRunConfiguration,
    LocalServerModel,
)
from mirrord_tomcat.models import EnvironmentVariable, InterceptorConfig, StartupInfo
from mirrord_tomcat.notify import StreamNotifier

PREVIEW_EXECUTOR_ID = "preview"


def _parse_env(values: list[str]) -> list[EnvironmentVariable]:
    env_vars = []
    for item in values:
        name, sep, value = item.partition("=")
        if not sep or not name:
            raise ValueError(f"expected NAME=VALUE, got {item!r}")
        env_vars.append(EnvironmentVariable(name, value))
    return env_vars


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mirrord-tomcat preview",
        description="Show how a Tomcat run configuration is patched for mirrord",
    )
    add_common_arguments(parser)
    add_platform_argument(parser)
    script_group = parser.add_mutually_exclusive_group()
    script_group.add_argument("--script", help="Explicit startup script")
    script_group.add_argument(
        "--default-script",
        default="",
        help="Default startup command line (guessed from --home when empty)",
    )
    parser.add_argument("--args", help="Program parameters of the explicit script")
    parser.add_argument("--home", help="Tomcat installation root")
    parser.add_argument("--vm-args", help="VM parameters of the configuration")
    parser.add_argument(
        "-e",
        "--env",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Environment variable of the run configuration (repeatable)",
    )
    parser.add_argument("--wsl", help="WSL distribution the server runs in")
    parser.add_argument("--jndi-port", type=int, default=DEFAULT_JNDI_PORT)
    parser.add_argument("--mirrord", default="mirrord", help="mirrord binary")
    parser.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT_SECONDS)
    return parser


def _print_config(title: str, config: LocalRunConfiguration) -> None:
    info = config.startup_info
    print(f"{title}:")
    print(f"  use_default: {'true' if info.use_default else 'false'}")
    print(f"  script: {info.script or '(not set)'}")
    print(f"  program_parameters: {info.program_parameters or '(not set)'}")
    print(f"  vm_parameters: {info.vm_parameters or '(not set)'}")
    for env_var in config.env_variables:
        print(f"  {env_var.name}={env_var.value}")


def run(argv: list[str]) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.debug)

    try:
        env_vars = _parse_env(args.env)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    startup_info = StartupInfo(
        use_default=args.script is None,
        script=args.script,
        default_script=args.default_script,
        program_parameters=args.args,
        vm_parameters=args.vm_args,
    )
    run_config = LocalRunConfiguration(
        startup_info, env_vars, server_model=LocalServerModel(jndi_port=args.jndi_port)
    )
    env = LocalExecutionEnvironment(run_config, remote_target=args.wsl, home=args.home)
    interceptor = LaunchInterceptor(
        CliExecManager(args.mirrord, args.timeout),
        StreamNotifier(),
        InterceptorConfig(server_port=get_server_port(), platform=resolve_platform(args.platform)),
    )

    interceptor.process_start_scheduled(PREVIEW_EXECUTOR_ID, env)
    saved = interceptor.store.get(PREVIEW_EXECUTOR_ID)
    if saved is None:
        print("Configuration was not patched", file=sys.stderr)
        return 1
    _print_config("patched", run_config)
    if saved.startup_info is not None:
        print(f"  saved startup fields: {', '.join(saved.startup_info.fields)}")

    interceptor.process_not_started(PREVIEW_EXECUTOR_ID, env)
    _print_config("restored", run_config)
    return 0
