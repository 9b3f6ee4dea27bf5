import unittest, os
from unittest import mock

from avalanche_installer.settings import Settings


class TestSettings(unittest.TestCase):
    def test_defaults(self):
        cfg = Settings(_env_file=None)
        self.assertEqual(cfg.tool_name, "avalanche")
        self.assertEqual(cfg.default_shell, "bash")
        self.assertEqual(
            cfg.install_command,
            "curl -sSfL https://raw.githubusercontent.com/ava-labs/avalanche-cli/main/scripts/install.sh | sh -s",
        )

    def test_env_prefix_overrides(self):
        env = {
            "AVALANCHE_INSTALLER_INSTALL_SCRIPT_URL": "https://example.test/install.sh",
            "AVALANCHE_INSTALLER_LOG_LEVEL": "DEBUG",
        }
        with mock.patch.dict(os.environ, env):
            cfg = Settings(_env_file=None)
        self.assertEqual(cfg.install_command, "curl -sSfL https://example.test/install.sh | sh -s")
        self.assertEqual(cfg.log_level, "DEBUG")
