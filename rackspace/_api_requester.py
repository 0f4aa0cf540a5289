from importlib.metadata import PackageNotFoundError, version
from typing import Any, Dict, Optional, Union

from requests.structures import CaseInsensitiveDict

from rackspace._http_client import HTTPClient, HTTPRequest, HTTPResponse
from rackspace._rackspace_logging import LoggerConfig
from rackspace._session import SessionState
from rackspace.constants import API_FORMAT, AUTH_TOKEN_HEADER, DEFAULT_TIMEOUT_SECONDS, USER_AGENT_PRODUCT

logger = LoggerConfig(logger_name=__name__).get_logger()


class APIRequester:
    """
    Shapes and sends requests to the Rackspace API on behalf of a session.

    This class is responsible for preparing API requests and delegating the actual HTTP
    calls to the HTTPClient. It adds the auth-token header whenever the session holds
    a token and applies the provider's header, query and body conventions.

    Attributes:
    ----------
    session: SessionState
        The session providing the token and receiving the last error.
    http_client: HTTPClient
        The HTTP client responsible for making actual HTTP requests.
    headers: dict
        The default headers to be included in every request.

    Methods:
    -------
    send(url, method, headers, query_data, body) -> HTTPResponse:
        Sends an HTTP request through the HTTPClient and returns the raw response.
    """

    def __init__(self, session: SessionState, http_client: Optional[HTTPClient] = None):
        """
        Initializes a new instance of APIRequester.

        Parameters:
        ----------
        session: SessionState
            The session providing the token and receiving the last error.
        http_client: HTTPClient, optional
            The transport to use. A new HTTPClient with the default timeout is created when omitted.
        """
        self.session = session
        self.headers = self._generate_headers()
        self.http_client = http_client or HTTPClient(timeout_seconds=DEFAULT_TIMEOUT_SECONDS)
        self.http_client.base_headers.update(self.headers)

    def _generate_headers(self) -> Dict[str, str]:
        """
        Generates the HTTP headers sent with every request.

        Returns:
            dict[str, str]: A dictionary containing the "User-Agent" header identifying this client.
        """
        try:
            client_version = version("rackspace")
        except PackageNotFoundError:
            client_version = "0.0.0"

        return {"User-Agent": f"{USER_AGENT_PRODUCT}/{client_version}"}

    def send(
        self,
        url: str,
        method: str,
        headers: Optional[Dict[str, str]] = None,
        query_data: Optional[Dict[str, Any]] = None,
        body: Optional[Union[str, bytes]] = None,
    ) -> HTTPResponse:
        """
        Sends an HTTP request, adding the auth token when the session holds one.

        The response is returned untouched whatever its status code; interpreting it
        is the caller's responsibility.

        Parameters:
        ----------
        url: str
            Absolute URL of the request.
        method: str
            HTTP method.
        headers: dict, optional
            Request headers. Caller values take precedence over the defaults.
            Names are matched case-insensitively.
        query_data: dict, optional
            Query string parameters. ``format`` defaults to ``json``.
        body: str or bytes, optional
            Raw request payload.

        Returns:
        -------
        HTTPResponse:
            The HTTPResponse object containing status code, raw body, and headers.
        """
        self.http_client.reset_parameters()

        method = method.upper()
        request_headers = CaseInsensitiveDict(self.headers)
        request_headers.update(headers or {})
        params = dict(query_data or {})

        if self.session.token:
            request_headers[AUTH_TOKEN_HEADER] = self.session.token

        # An empty PUT would otherwise be sent as a form post
        if not request_headers.get("Content-Type") and method == "PUT" and not body:
            request_headers["Content-Type"] = ""

        if not params.get("format"):
            params["format"] = API_FORMAT

        if body:
            request_headers.setdefault("Content-Type", "application/json")
        else:
            body = None

        self.session.clear_error()
        logger.debug("%s %s", method, url)
        return self.http_client.send(
            HTTPRequest(method=method, url=url, headers=request_headers, params=params, body=body)
        )
