"""Unit tests for mirrord_tomcat.notify."""

import io

from mirrord_tomcat.host import NotificationType
from mirrord_tomcat.notify import StreamNotifier


class _TtyStream(io.StringIO):
    def isatty(self) -> bool:
        return True


class _RaisingStream(io.StringIO):
    def write(self, text: str) -> int:
        raise OSError("stream write failed")


class TestStreamNotifier:
    def test_writes_plain_line_when_not_a_tty(self):
        stream = io.StringIO()

        StreamNotifier(stream).notify_simple("running without mirrord", NotificationType.WARNING)

        assert stream.getvalue() == "mirrord warning: running without mirrord\n"

    def test_colors_warning_on_tty(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("TERM", "xterm")
        stream = _TtyStream()

        StreamNotifier(stream).notify_simple("hi", NotificationType.WARNING)

        assert "\033[33m" in stream.getvalue()

    def test_no_color_env_disables_color(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        stream = _TtyStream()

        StreamNotifier(stream).notify_simple("hi", NotificationType.WARNING)

        assert stream.getvalue() == "mirrord warning: hi\n"

    def test_write_errors_are_dropped(self):
        StreamNotifier(_RaisingStream()).notify_simple("hi", NotificationType.WARNING)
