"""Top-level CLI router."""

import sys

from . import combine as combine_cmd
from . import preview as preview_cmd
from . import split as split_cmd

COMMANDS = {
    "combine": combine_cmd.run,
    "preview": preview_cmd.run,
    "split": split_cmd.run,
}

USAGE = "usage: mirrord-tomcat {combine,preview,split} ..."


def main(argv: list[str] | None = None) -> int:
    """Route to the requested sub-command."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or args[0] not in COMMANDS:
        print(USAGE, file=sys.stderr)
        return 2
    return COMMANDS[args[0]](args[1:])


def entrypoint() -> None:
    """Console script entrypoint."""
    raise SystemExit(main())
