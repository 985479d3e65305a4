"""Unit tests for mirrord_tomcat.config."""

from unittest.mock import patch

from mirrord_tomcat.config import get_platform, get_server_port, load_config
from mirrord_tomcat.platforms import Platform


class TestServerPort:
    @patch.dict("os.environ", {}, clear=True)
    def test_default_port(self):
        assert get_server_port() == "8005"

    @patch.dict("os.environ", {"MIRRORD_TOMCAT_SERVER_PORT": "9005"}, clear=True)
    def test_port_override(self):
        assert get_server_port() == "9005"

    @patch.dict("os.environ", {"MIRRORD_TOMCAT_SERVER_PORT": "9005"}, clear=True)
    def test_load_config_reads_port(self):
        assert load_config().server_port == "9005"


class TestPlatform:
    @patch.dict("os.environ", {"MIRRORD_TOMCAT_PLATFORM": "Windows"}, clear=True)
    def test_override(self):
        assert get_platform() is Platform.WINDOWS

    @patch.dict("os.environ", {"MIRRORD_TOMCAT_PLATFORM": "beos"}, clear=True)
    @patch("mirrord_tomcat.platforms._platform.system", return_value="Darwin")
    def test_unknown_override_falls_back_to_detection(self, _system):
        assert get_platform() is Platform.MAC

    @patch("mirrord_tomcat.platforms._platform.system", return_value="Linux")
    def test_detection(self, _system):
        assert Platform.current() is Platform.LINUX
        assert not Platform.current().rewrites_script

    def test_only_mac_rewrites_script(self):
        assert [p for p in Platform if p.rewrites_script] == [Platform.MAC]
