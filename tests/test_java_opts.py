"""Unit tests for mirrord_tomcat.java_opts."""

from pathlib import Path
from unittest.mock import patch

import pytest

from mirrord_tomcat.errors import IOFailure
from mirrord_tomcat.java_opts import custom_java_options, java_opts_env_value
from mirrord_tomcat.local import LocalServerModel
from mirrord_tomcat.platforms import Platform


class TestCustomJavaOptions:
    def test_without_auth_files(self):
        model = LocalServerModel(jndi_port=1099)

        assert custom_java_options(model) == [
            "-Dcom.sun.management.jmxremote=",
            "-Dcom.sun.management.jmxremote.port=1099",
            "-Dcom.sun.management.jmxremote.ssl=false",
            "-Dcom.sun.management.jmxremote.authenticate=false",
            "-Djava.rmi.server.hostname=127.0.0.1",
        ]

    def test_only_one_auth_file_disables_authentication(self):
        model = LocalServerModel(access_file="/etc/jmx.access")

        options = custom_java_options(model)

        assert "-Dcom.sun.management.jmxremote.authenticate=false" in options
        assert not any("access.file" in option for option in options)

    def test_auth_files_are_canonicalized(self, tmp_path: Path):
        access = tmp_path / "jmx.access"
        password = tmp_path / "jmx.password"
        access.write_text("")
        password.write_text("")
        (tmp_path / "sub").mkdir()
        model = LocalServerModel(
            access_file=str(tmp_path / "." / "jmx.access"),
            password_file=str(tmp_path / "sub" / ".." / "jmx.password"),
        )

        options = custom_java_options(model)

        assert f"-Dcom.sun.management.jmxremote.password.file={password.resolve()}" in options
        assert f"-Dcom.sun.management.jmxremote.access.file={access.resolve()}" in options
        assert "-Dcom.sun.management.jmxremote.authenticate=false" not in options

    def test_canonicalization_error_raises_io_failure(self):
        model = LocalServerModel(access_file="/a", password_file="/b")
        with patch("mirrord_tomcat.java_opts.Path.resolve", side_effect=OSError("loop")):
            with pytest.raises(IOFailure):
                custom_java_options(model)

    def test_existing_rmi_host_is_kept(self):
        model = LocalServerModel(vm_arguments={"java.rmi.server.hostname": "10.0.0.1"})

        assert not any("java.rmi.server.hostname" in o for o in custom_java_options(model))


class TestJavaOptsEnvValue:
    def test_appends_to_existing_java_opts(self):
        model = LocalServerModel(jndi_port=2000)

        value = java_opts_env_value(model, {"JAVA_OPTS": "-javaagent:/tmp/agent.jar"}, Platform.MAC)

        assert value.startswith("-javaagent:/tmp/agent.jar -Dcom.sun.management.jmxremote= ")
        assert "-Dcom.sun.management.jmxremote.port=2000" in value

    def test_without_java_opts(self):
        value = java_opts_env_value(LocalServerModel(), {}, Platform.MAC)

        assert value.startswith("-Dcom.sun.management.jmxremote= ")
