"""Quoting of Java options passed to Tomcat through an environment variable."""

from collections.abc import Sequence

from mirrord_tomcat.platforms import Platform

QUOTED_CHARS = frozenset("() ?*+&")


def _needs_quoting(option: str) -> bool:
    return any(char in QUOTED_CHARS for char in option)


def quote_java_opts(options: Sequence[str], platform: Platform | None = None) -> str:
    """Quote options that may contain paths and join them with spaces.

    The command line itself does not need this, but options forwarded in an
    environment variable are word-split by the startup script.
    """
    platform = platform or Platform.current()
    quoted_opts = []
    for option in options:
        if _needs_quoting(option):
            quoted = f'"{option}"'
            if platform is Platform.WINDOWS:
                # cmd strips one level of ^ escaping and catalina.bat another,
                # so & has to reach the JVM escaped twice.
                quoted = quoted.replace("&", "^^^&")
            option = quoted
        quoted_opts.append(option)
    return " ".join(quoted_opts)


def combine_java_opts(
    base: str | None, custom: Sequence[str], platform: Platform | None = None
) -> str:
    """Append quoted ``custom`` options to ``base``, which is used as is."""
    assert custom, "combine_java_opts needs at least one option"
    quoted_custom = quote_java_opts(custom, platform)
    if base is None or not base.strip():
        return quoted_custom
    return f"{base} {quoted_custom}"
