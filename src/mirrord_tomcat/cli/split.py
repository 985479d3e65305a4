"""`mirrord-tomcat split` command implementation."""

import argparse

from mirrord_tomcat.cli.shared import add_common_arguments, configure_logging
from mirrord_tomcat.script import split_command_line


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mirrord-tomcat split",
        description="Show how a default startup command line is split into script and arguments",
    )
    add_common_arguments(parser)
    parser.add_argument("command_line", help="Command line, spaces escaped with a backslash")
    return parser


def run(argv: list[str]) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.debug)
    result = split_command_line(args.command_line)
    print(f"command: {result.command}")
    print(f"args: {result.args if result.args is not None else '(none)'}")
    return 0
