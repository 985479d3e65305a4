"""User-facing notifications."""

import logging
import os
import sys
from typing import TextIO

from mirrord_tomcat.host import NotificationType

log = logging.getLogger(__name__)

BOLD = "\033[1m"
YELLOW = "\033[33m"
RESET = "\033[0m"

_COLORS = {
    NotificationType.WARNING: YELLOW,
}


def supports_color(stream: TextIO) -> bool:
    """Return whether ANSI color output should be used on ``stream``."""
    if os.getenv("NO_COLOR") is not None:
        return False
    if os.getenv("TERM", "").lower() == "dumb":
        return False
    return hasattr(stream, "isatty") and stream.isatty()


class StreamNotifier:
    """Write notifications as single lines to a text stream."""

    def __init__(self, stream: TextIO | None = None, title: str = "mirrord") -> None:
        self._stream = stream if stream is not None else sys.stderr
        self._title = title

    def notify_simple(self, message: str, notification_type: NotificationType) -> None:
        prefix = f"{self._title} {notification_type.value}:"
        color = _COLORS.get(notification_type)
        if color and supports_color(self._stream):
            prefix = f"{BOLD}{color}{prefix}{RESET}"
        try:
            self._stream.write(f"{prefix} {message}\n")
            self._stream.flush()
        except OSError as e:
            log.debug("dropping notification %r: %s", message, e)
