"""Unit tests for mirrord_tomcat.script."""

import os
from dataclasses import replace
from unittest.mock import MagicMock

import pytest

from mirrord_tomcat.errors import ConfigurationUnavailable
from mirrord_tomcat.models import CommandLineWithArgs, StartupInfo
from mirrord_tomcat.script import resolve_start_script, split_command_line


class TestSplitCommandLine:
    def test_splits_on_first_space(self):
        assert split_command_line("/bin/run -flag value") == CommandLineWithArgs(
            "/bin/run", "-flag value"
        )

    def test_escaped_space_is_kept_in_command(self):
        assert split_command_line("C:\\a\\ b.sh -x") == CommandLineWithArgs("C:\\a\\ b.sh", "-x")

    def test_no_space_means_no_args(self):
        assert split_command_line("/opt/tomcat/bin/catalina.sh") == CommandLineWithArgs(
            "/opt/tomcat/bin/catalina.sh", None
        )

    def test_trailing_space_gives_empty_args(self):
        assert split_command_line("run ") == CommandLineWithArgs("run", "")


class TestResolveStartScript:
    def test_default_script_is_split(self):
        info = StartupInfo(use_default=True, default_script="/opt/tomcat/bin/catalina.sh run")
        home = MagicMock(return_value="/ignored")

        result = resolve_start_script(info, home)

        assert result == CommandLineWithArgs("/opt/tomcat/bin/catalina.sh", "run")
        home.assert_not_called()

    def test_blank_default_script_is_guessed_from_home(self):
        info = StartupInfo(use_default=True, default_script="  ")

        result = resolve_start_script(info, lambda: "/opt/tomcat")

        assert result == CommandLineWithArgs(os.path.join("/opt/tomcat", "bin/catalina.sh"), None)

    def test_missing_home_raises(self):
        info = StartupInfo(use_default=True, default_script="")
        with pytest.raises(ConfigurationUnavailable):
            resolve_start_script(info, lambda: None)

    def test_explicit_script_uses_program_parameters_verbatim(self):
        info = StartupInfo(
            use_default=False,
            script="/srv/start tomcat.sh",
            program_parameters="run -security",
            default_script="/opt/tomcat/bin/catalina.sh",
        )

        result = resolve_start_script(info, lambda: None)

        assert result == CommandLineWithArgs("/srv/start tomcat.sh", "run -security")

    def test_explicit_script_missing_raises(self):
        info = StartupInfo(use_default=False, script=None)
        with pytest.raises(ConfigurationUnavailable):
            resolve_start_script(info, lambda: "/opt/tomcat")

    def test_does_not_mutate_startup_info(self):
        info = StartupInfo(use_default=True, default_script="")
        before = replace(info)

        resolve_start_script(info, lambda: "/opt/tomcat")

        assert info == before
