import re
from typing import Any, Dict, Optional, Sequence, Tuple, Union

from rackspace._api_requester import APIRequester
from rackspace._auth_client import Authentication
from rackspace._credentials import Credentials
from rackspace._http_client import HTTPClient, HTTPResponse
from rackspace._models import Resolution
from rackspace._rackspace_config import RackspaceConfig
from rackspace._rackspace_logging import LoggerConfig
from rackspace._session import RESOLVABLE_FIELDS, SessionState
from rackspace.constants import AUTH_URL, DEFAULT_TIMEOUT_SECONDS, SERVICE_NET_PREFIX
from rackspace.exceptions import InvalidArgumentError

logger = LoggerConfig(logger_name=__name__).get_logger()

_SCHEME_RE = re.compile(r"^(https?)://")


class RackspaceClient:
    """
    RackspaceClient is the main entry point for talking to the Rackspace cloud.

    It owns the credentials, the session and the request pipeline. Authentication is
    lazy: the first access to the token or to an endpoint URL that is still unset
    authenticates once, and later accesses reuse the session.

    Resource modules (Cloud Files, Cloud Servers...) only need `get_token`, the endpoint
    accessors, `send` and the last-error accessors.

    Attributes:
    ----------
    config: RackspaceConfig
        The configuration object containing user, key, auth_url and transport settings.
    credentials: Credentials
        Account name, API key and identity URL.
    session: SessionState
        Token, endpoint URLs and last error.
    api_requester: APIRequester
        Sends the authenticated requests.
    auth: Authentication
        Performs the identity exchange.
    service_net: bool
        When True, storage URLs point at ServiceNet, Rackspace's internal network.
        Needs a service catalog map that fills ``storage_url``.
    """

    def __init__(
        self,
        config: RackspaceConfig,
        http_client: Optional[HTTPClient] = None,
        service_catalog_map: Optional[Sequence[Tuple[str, str]]] = None,
    ):
        """
        Initialize the RackspaceClient with the provided configuration.

        No request is made here; authentication happens on first need.

        Parameters:
        ----------
        config: RackspaceConfig
            The configuration object containing user, key and auth_url.
        http_client: HTTPClient, optional
            The transport to use. Built from ``config.timeout_seconds`` when omitted.
        service_catalog_map: sequence of (str, str), optional
            Ordered (service name, session field) pairs overriding the default catalog matching.

        Raises:
        -------
        InvalidArgumentError:
            If the user, the key or the authentication URL is empty.
        """
        self.config = config
        self.credentials = Credentials(config.user, config.key, config.auth_url)
        self.session = SessionState()
        self.service_net = bool(config.service_net)
        self.api_requester = APIRequester(
            self.session, http_client or HTTPClient(timeout_seconds=config.timeout_seconds)
        )
        self.auth = Authentication(self.credentials, self.session, self.api_requester, service_catalog_map)

    @classmethod
    def from_credentials(
        cls,
        user: str,
        key: str,
        auth_url: Optional[str] = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        service_net: bool = False,
        **kwargs: Any,
    ) -> "RackspaceClient":
        """
        Build a client from an account name and API key, without reading any configuration source.

        Neither the environment nor the ``RACKSPACE_*_PATH`` files are consulted; every
        value not passed here takes its built-in default.
        """
        if not user:
            raise InvalidArgumentError("The user cannot be empty")
        if not key:
            raise InvalidArgumentError("The key cannot be empty")
        config = RackspaceConfig(
            user=user,
            key=key,
            auth_url=auth_url or AUTH_URL,
            timeout_seconds=timeout_seconds,
            service_net=service_net,
            json_path="",
            toml_path="",
            ini_path="",
            env_path="",
        )
        return cls(config, **kwargs)

    def __enter__(self) -> "RackspaceClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self.api_requester.http_client.close()

    # Credentials

    @property
    def user(self) -> str:
        return self.credentials.user

    @property
    def key(self) -> str:
        return self.credentials.key

    @property
    def auth_url(self) -> str:
        return self.credentials.auth_url

    def set_user(self, user: Optional[str]) -> None:
        self.credentials.set_user(user)

    def set_key(self, key: Optional[str]) -> None:
        self.credentials.set_key(key)

    def set_auth_url(self, url: Optional[str]) -> None:
        self.credentials.set_auth_url(url)

    # Authentication and lazy access

    def authenticate(self) -> bool:
        """
        Authenticate now, whatever the session currently holds.

        Returns:
        -------
        bool:
            True on success. On failure the reason is available through
            `get_error_msg` and `get_error_code`.
        """
        return self.auth.authenticate()

    def resolve(self, field_name: str) -> Resolution:
        """
        Return a session value, authenticating first when it is unset.

        Parameters:
        ----------
        field_name: str
            One of "token", "storage_url", "cdn_url", "management_url".

        Returns:
        -------
        Resolution:
            The value, or a failed resolution carrying the authentication error. A
            successful authentication whose catalog lacked the entry gives a
            non-failed resolution with a None value.

        Raises:
        -------
        InvalidArgumentError:
            If field_name is not a resolvable session field.
        """
        if field_name not in RESOLVABLE_FIELDS:
            raise InvalidArgumentError(
                f"Unknown session field '{field_name}'. Expected one of: {', '.join(RESOLVABLE_FIELDS)}"
            )

        value = getattr(self.session, field_name)
        if value:
            return Resolution(value=value)

        if not self.authenticate():
            return Resolution(failed=True, error=self.session.last_error)

        value = getattr(self.session, field_name)
        if not value:
            logger.info("Authenticated, but the service catalog has no entry for %s", field_name)
        return Resolution(value=value)

    def _get(self, field_name: str, required: bool) -> Optional[str]:
        resolution = self.resolve(field_name)
        return resolution.unwrap() if required else resolution.value

    def get_token(self, required: bool = False) -> Optional[str]:
        """
        Return the bearer token, authenticating if needed.

        Returns None when authentication fails, or raises AuthenticationError when
        ``required`` is True.
        """
        return self._get("token", required)

    def get_storage_url(self, required: bool = False) -> Optional[str]:
        """
        Return the Cloud Files storage URL, authenticating if needed.

        With ServiceNet enabled the host is prefixed with ``snet-``. The default
        service catalog map never fills the storage URL, so this returns None unless
        the client was built with a ``("cloudFiles", "storage_url")`` map entry.
        """
        url = self._get("storage_url", required)
        if url and self.service_net:
            url = _SCHEME_RE.sub(rf"\1://{SERVICE_NET_PREFIX}", url, count=1)
        return url

    def get_cdn_url(self, required: bool = False) -> Optional[str]:
        return self._get("cdn_url", required)

    def get_management_url(self, required: bool = False) -> Optional[str]:
        return self._get("management_url", required)

    # Requests

    def send(
        self,
        url: str,
        method: str,
        headers: Optional[Dict[str, str]] = None,
        query_data: Optional[Dict[str, Any]] = None,
        body: Optional[Union[str, bytes]] = None,
    ) -> HTTPResponse:
        """Send a request carrying the current token. See `APIRequester.send`."""
        return self.api_requester.send(url, method, headers, query_data, body)

    def is_successful(self) -> bool:
        """Return True when the last HTTP call recorded no error."""
        return self.session.last_error is None

    def get_error_msg(self) -> Optional[str]:
        return self.session.last_error.message if self.session.last_error else None

    def get_error_code(self) -> Optional[int]:
        return self.session.last_error.status_code if self.session.last_error else None
