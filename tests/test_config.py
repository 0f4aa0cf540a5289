import json
import os
import tempfile
import unittest

from rackspace import RackspaceConfig
from rackspace.constants import AUTH_URL
from rackspace.exceptions import InvalidArgumentError


class TestRackspaceConfig(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        # Store original environment
        cls.original_env = dict(os.environ)

    def setUp(self):
        for name in list(os.environ):
            if name.startswith("RACKSPACE_"):
                del os.environ[name]

    def tearDown(self):
        # Restore original environment after each test
        os.environ.clear()
        os.environ.update(self.original_env)

    def _write(self, suffix, content):
        with tempfile.NamedTemporaryFile(mode="w", suffix=suffix, delete=False) as f:
            f.write(content)
        self.addCleanup(os.unlink, f.name)
        return f.name

    def test_explicit_values(self):
        config = RackspaceConfig(user="user", key="key", auth_url="https://identity.test.com", timeout_seconds=5)

        self.assertEqual(config.user, "user")
        self.assertEqual(config.key, "key")
        self.assertEqual(config.auth_url, "https://identity.test.com")
        self.assertEqual(config.timeout_seconds, 5)
        self.assertFalse(config.service_net)

    def test_config_with_env_vars(self):
        os.environ["RACKSPACE_USER"] = "env_user"
        os.environ["RACKSPACE_KEY"] = "env_key"
        os.environ["RACKSPACE_AUTH_URL"] = "https://lon.identity.api.rackspacecloud.com"
        os.environ["RACKSPACE_TIMEOUT"] = "30"
        os.environ["RACKSPACE_SERVICE_NET"] = "true"

        config = RackspaceConfig()

        self.assertEqual(config.user, "env_user")
        self.assertEqual(config.key, "env_key")
        self.assertEqual(config.auth_url, "https://lon.identity.api.rackspacecloud.com")
        self.assertEqual(config.timeout_seconds, 30.0)
        self.assertTrue(config.service_net)

    def test_explicit_values_win_over_env(self):
        os.environ["RACKSPACE_USER"] = "env_user"
        os.environ["RACKSPACE_KEY"] = "env_key"

        config = RackspaceConfig(user="user")

        self.assertEqual(config.user, "user")
        self.assertEqual(config.key, "env_key")

    def test_defaults(self):
        config = RackspaceConfig(user="user", key="key")

        self.assertEqual(config.auth_url, AUTH_URL)
        self.assertEqual(config.timeout_seconds, 15.0)

    def test_missing_fields(self):
        with self.assertRaises(InvalidArgumentError) as context:
            RackspaceConfig()

        message = str(context.exception)
        self.assertIn("RACKSPACE_USER", message)
        self.assertIn("RACKSPACE_KEY", message)

    def test_missing_key(self):
        with self.assertRaises(InvalidArgumentError) as context:
            RackspaceConfig(user="user")

        self.assertNotIn("RACKSPACE_USER", str(context.exception))
        self.assertIn("RACKSPACE_KEY", str(context.exception))

    def test_invalid_timeout(self):
        os.environ["RACKSPACE_TIMEOUT"] = "soon"

        with self.assertRaises(InvalidArgumentError):
            RackspaceConfig(user="user", key="key")

    def test_negative_timeout(self):
        os.environ["RACKSPACE_TIMEOUT"] = "-1"

        with self.assertRaises(InvalidArgumentError):
            RackspaceConfig(user="user", key="key")

    def test_load_from_json_file(self):
        path = self._write(".json", json.dumps({"RACKSPACE_USER": "json_user", "RACKSPACE_KEY": "json_key"}))

        config = RackspaceConfig(json_path=path)

        self.assertEqual(config.user, "json_user")
        self.assertEqual(config.key, "json_key")
        self.assertEqual(config.auth_url, AUTH_URL)

    def test_json_path_from_env(self):
        path = self._write(".json", json.dumps({"RACKSPACE_USER": "json_user", "RACKSPACE_KEY": "json_key"}))
        os.environ["RACKSPACE_JSON_PATH"] = path

        config = RackspaceConfig()

        self.assertEqual(config.user, "json_user")

    def test_load_from_flat_toml_file(self):
        path = self._write(".toml", 'RACKSPACE_USER = "toml_user"\nRACKSPACE_KEY = "toml_key"\nRACKSPACE_TIMEOUT = 4\n')

        config = RackspaceConfig(toml_path=path)

        self.assertEqual(config.user, "toml_user")
        self.assertEqual(config.key, "toml_key")
        self.assertEqual(config.timeout_seconds, 4.0)

    def test_load_from_toml_profiles(self):
        path = self._write(
            ".toml",
            '[default]\nRACKSPACE_USER = "default_user"\nRACKSPACE_KEY = "default_key"\n\n'
            '[london]\nRACKSPACE_USER = "lon_user"\nRACKSPACE_KEY = "lon_key"\n'
            'RACKSPACE_AUTH_URL = "https://lon.identity.api.rackspacecloud.com"\n',
        )

        config = RackspaceConfig(toml_path=path)
        self.assertEqual(config.user, "default_user")

        config = RackspaceConfig(toml_path=path, ini_profile="london")
        self.assertEqual(config.user, "lon_user")
        self.assertEqual(config.auth_url, "https://lon.identity.api.rackspacecloud.com")

    def test_load_from_ini_file(self):
        path = self._write(
            ".ini",
            "[default]\nrackspace_user = ini_user\nrackspace_key = ini_key\n\n"
            "[other_profile]\nrackspace_user = other_user\nrackspace_key = other_key\n",
        )

        config = RackspaceConfig(ini_path=path)
        self.assertEqual(config.user, "ini_user")
        self.assertEqual(config.key, "ini_key")

        config = RackspaceConfig(ini_path=path, ini_profile="other_profile")
        self.assertEqual(config.user, "other_user")
        self.assertEqual(config.key, "other_key")

    def test_invalid_ini_profile(self):
        path = self._write(".ini", "[default]\nrackspace_user = ini_user\nrackspace_key = ini_key\n")

        with self.assertRaises(InvalidArgumentError) as context:
            RackspaceConfig(ini_path=path, ini_profile="missing")

        self.assertIn("Profile 'missing' not found", str(context.exception))

    def test_load_from_env_file(self):
        path = self._write(".env", 'RACKSPACE_USER="dotenv_user"\nRACKSPACE_KEY="dotenv_key"\nRACKSPACE_SERVICE_NET=1\n')

        config = RackspaceConfig(env_path=path)

        self.assertEqual(config.user, "dotenv_user")
        self.assertEqual(config.key, "dotenv_key")
        self.assertTrue(config.service_net)

    def test_file_not_found(self):
        with self.assertRaises(FileNotFoundError):
            RackspaceConfig(json_path="/nonexistent/path.json")

    def test_unsupported_file_type(self):
        path = self._write(".txt", "test")

        with self.assertRaises(InvalidArgumentError) as context:
            RackspaceConfig(json_path=path)

        self.assertIn("Unsupported config file type", str(context.exception))


if __name__ == "__main__":
    unittest.main()
