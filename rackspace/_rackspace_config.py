import json
import os
from configparser import ConfigParser
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import toml
from dotenv import dotenv_values

from rackspace.constants import AUTH_URL, DEFAULT_TIMEOUT_SECONDS
from rackspace.exceptions import InvalidArgumentError

TRUTHY_VALUES = {"1", "true", "yes", "on"}


@dataclass
class RackspaceConfig:
    """
    Configuration class for the Rackspace client.

    This class holds the values needed to authenticate against the Rackspace identity
    service. They can be passed directly or read from a configuration source.

    The priority for each field is as follows:
    1. If a parameter is passed during initialization, it is used.
    2. If no parameter is provided, it falls back to the configuration source: the
       first of ``json_path``, ``toml_path``, ``ini_path`` and ``env_path`` that is
       set, or the process environment when none is.
    3. If neither is available (for required fields), it raises an InvalidArgumentError.

    Configuration keys:
    - `RACKSPACE_USER`: The account name.
    - `RACKSPACE_KEY`: The API key.
    - `RACKSPACE_AUTH_URL`: The identity service URL. Defaults to the US endpoint.
    - `RACKSPACE_TIMEOUT`: Transport timeout in seconds. Defaults to 15.
    - `RACKSPACE_SERVICE_NET`: Use the ServiceNet storage endpoint ("true"/"1").

    Parameters:
    ----------
    user: str
        The account name. If not provided, it defaults to `RACKSPACE_USER`.
    key: str
        The API key. If not provided, it defaults to `RACKSPACE_KEY`.
    auth_url: str, optional
        The identity service URL. If not provided, it defaults to `RACKSPACE_AUTH_URL`.
    timeout_seconds: float, optional
        Transport timeout. If not provided, it defaults to `RACKSPACE_TIMEOUT`.
    service_net: bool, optional
        Whether storage URLs should target ServiceNet.
    json_path: str, optional
        The path to a JSON file containing configuration settings.
    toml_path: str, optional
        The path to a TOML file containing configuration settings.
    ini_path: str, optional
        The path to an INI file containing configuration settings.
    ini_profile: str, optional
        The profile (INI section or TOML table) to read. Defaults to "default".
    env_path: str, optional
        The path to a dotenv file containing configuration settings.

    Raises:
    -------
    InvalidArgumentError
        If user or key is provided neither via input nor by the configuration source.
    """

    user: str = ""
    key: str = ""
    auth_url: str = ""
    timeout_seconds: Optional[float] = None
    service_net: Optional[bool] = None
    json_path: str = field(default_factory=lambda: os.getenv("RACKSPACE_JSON_PATH", ""))
    toml_path: str = field(default_factory=lambda: os.getenv("RACKSPACE_TOML_PATH", ""))
    ini_path: str = field(default_factory=lambda: os.getenv("RACKSPACE_INI_PATH", ""))
    ini_profile: str = field(default_factory=lambda: os.getenv("RACKSPACE_INI_PROFILE", "default"))
    env_path: str = field(default_factory=lambda: os.getenv("RACKSPACE_ENV_PATH", ""))

    def __post_init__(self):
        """Fill unset fields from the configuration source and validate required ones."""
        if self.json_path:
            config = self.load_config_from_file(self.json_path)
        elif self.toml_path:
            config = self.load_config_from_file(self.toml_path)
        elif self.ini_path:
            config = self.load_config_from_file(self.ini_path)
        elif self.env_path:
            config = self.load_config_from_file(self.env_path)
        else:
            config = dict(os.environ)

        self.user = self.user or config.get("RACKSPACE_USER") or ""
        self.key = self.key or config.get("RACKSPACE_KEY") or ""
        self.auth_url = self.auth_url or config.get("RACKSPACE_AUTH_URL") or AUTH_URL
        if self.timeout_seconds is None:
            self.timeout_seconds = self._parse_timeout(config.get("RACKSPACE_TIMEOUT"))
        if self.service_net is None:
            self.service_net = str(config.get("RACKSPACE_SERVICE_NET", "")).strip().lower() in TRUTHY_VALUES

        missing_fields = []
        if not self.user:
            missing_fields.append("user (or RACKSPACE_USER)")
        if not self.key:
            missing_fields.append("key (or RACKSPACE_KEY)")

        if missing_fields:
            raise InvalidArgumentError(f"Missing required fields: {', '.join(missing_fields)}")

    @staticmethod
    def _parse_timeout(value: Union[str, float, int, None]) -> float:
        if value is None or value == "":
            return DEFAULT_TIMEOUT_SECONDS
        try:
            timeout = float(value)
        except (TypeError, ValueError):
            raise InvalidArgumentError(f"RACKSPACE_TIMEOUT must be a number of seconds, got {value!r}")
        if timeout <= 0:
            raise InvalidArgumentError(f"RACKSPACE_TIMEOUT must be positive, got {value!r}")
        return timeout

    def load_config_from_file(self, file_path: str) -> Dict[str, Any]:
        if not os.path.exists(file_path):
            raise FileNotFoundError(f"Configuration file '{file_path}' does not exist.")

        path = Path(file_path)
        ext = path.suffix.lower()

        if ext == ".json":
            with open(file_path, "r") as f:
                return json.load(f)
        elif ext == ".toml":
            return self.read_credentials_from_toml(file_path, self.ini_profile)
        elif ext == ".ini":
            return self.read_credentials_from_ini(file_path, self.ini_profile)
        elif ext == ".env" or path.name == ".env":
            return {k: v for k, v in dotenv_values(file_path).items() if v is not None}
        else:
            raise InvalidArgumentError(f"Unsupported config file type: '{ext}'. Use .json, .toml, .ini or .env")

    @staticmethod
    def read_credentials_from_toml(toml_path: str, profile: str = "default") -> Dict[str, Any]:
        """
        Read credentials from a TOML file.

        The file may hold the keys at top level or inside profile tables such as
        ``[default]``. When the requested profile table exists it is used.
        """
        data = toml.load(toml_path)
        section = data.get(profile)
        if isinstance(section, dict):
            return section
        return {k: v for k, v in data.items() if not isinstance(v, dict)}

    @staticmethod
    def read_credentials_from_ini(ini_path: str, profile: str = "default") -> Dict[str, str]:
        """
        Read credentials from an INI file.

        Parameters
        ----------
        ini_path : str
            The path to the INI file containing credentials.
        profile : str, optional
            The profile section name to read from. Defaults to 'default'.

        Returns
        -------
        dict
            Dictionary containing credentials with upper-cased keys.

        Raises
        ------
        FileNotFoundError
            If the INI file does not exist.
        InvalidArgumentError
            If the specified profile is not found in the INI file.
        """
        ini_file = Path(ini_path).expanduser().resolve()

        if not ini_file.exists():
            raise FileNotFoundError(f"INI config file not found at: {ini_file}")

        config_parser = ConfigParser()
        config_parser.read(ini_file)

        if profile not in config_parser:
            available = ", ".join(config_parser.sections()) or "no profiles"
            raise InvalidArgumentError(f"Profile '{profile}' not found in INI file. Available profiles: {available}")

        return {key.upper(): value for key, value in config_parser[profile].items()}
