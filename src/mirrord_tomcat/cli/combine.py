"""`mirrord-tomcat combine` command implementation."""

import argparse

from mirrord_tomcat.cli.shared import (
    add_common_arguments,
    add_platform_argument,
    configure_logging,
    resolve_platform,
)
from mirrord_tomcat.quoting import combine_java_opts


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mirrord-tomcat combine",
        description="Append Java options to a JAVA_OPTS value, quoting them as catalina expects",
    )
    add_common_arguments(parser)
    add_platform_argument(parser)
    parser.add_argument("--base", default="", help="Existing JAVA_OPTS value, used verbatim")
    parser.add_argument("options", nargs="+", metavar="option", help="Java option to append")
    return parser


def run(argv: list[str]) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.debug)
    print(combine_java_opts(args.base, args.options, resolve_platform(args.platform)))
    return 0
