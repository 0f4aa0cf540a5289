import json
from typing import Any, Dict, Optional, Union

import requests
from requests.structures import CaseInsensitiveDict
from requests.utils import default_headers

from rackspace.constants import DEFAULT_TIMEOUT_SECONDS
from rackspace.exceptions import RackspaceAPIError


class HTTPRequest:
    """
    Represents an HTTP request with method, URL, headers, query parameters and raw body.

    Attributes:
    ----------
    method: str
        The HTTP method (e.g., "GET", "POST", "PUT", etc.).
    url: str
        The full URL or endpoint to send the request to.
    headers: dict
        The headers to be included in the request.
    params: dict
        The query string parameters.
    body: bytes, optional
        The raw payload of the request, sent as-is.
    """

    def __init__(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
        body: Optional[Union[str, bytes]] = None,
    ):
        self.method = method.upper()
        self.url = url
        self.headers = dict(headers or {})
        self.params = dict(params or {})
        self.body = body.encode("utf-8") if isinstance(body, str) else body


class HTTPResponse:
    """
    Represents an HTTP response with status code, raw body, and headers.

    The body is kept exactly as received; decoding it is up to the caller.

    Attributes:
    ----------
    status_code: int
        The HTTP status code of the response.
    body: str
        The raw body of the response.
    headers: dict
        The headers returned by the server.
    """

    def __init__(self, status_code: int, body: str, headers: CaseInsensitiveDict[str]):
        self.status_code = status_code
        self.body = body
        self.headers = headers

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        """
        Decode the body as JSON.

        Raises:
        -------
        ValueError:
            If the body is empty or not valid JSON.
        """
        return json.loads(self.body)

    def raise_for_status(self) -> None:
        """
        Raise a RackspaceAPIError when the status code is not 2xx.

        Raises:
        -------
        RackspaceAPIError:
            If the response is an error response.
        """
        if not self.ok:
            raise RackspaceAPIError(
                f"API request failed with status {self.status_code}: {self.body}",
                status_code=self.status_code,
                body=self.body,
            )


class HTTPClient:
    """
    Responsible for making actual HTTP requests using the `requests` library.

    A single `requests.Session` is kept and reused across calls, so per-call state
    has to be cleared with `reset_parameters` before building the next request.

    Attributes:
    ----------
    timeout_seconds: float
        Connect and read timeout applied to every request.
    base_headers: dict
        Headers restored on the session by every reset.
    """

    def __init__(self, timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS, base_headers: Optional[Dict[str, str]] = None):
        self.timeout_seconds = timeout_seconds
        self.base_headers = dict(base_headers or {})
        self._session: Optional[requests.Session] = None

    def _get_session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def reset_parameters(self) -> None:
        """Drop headers and query parameters left on the shared session by a previous call."""
        session = self._get_session()
        session.headers = default_headers()
        session.headers.update(self.base_headers)
        session.params = {}

    def send(self, request: HTTPRequest) -> HTTPResponse:
        """
        Sends an HTTP request and returns the HTTP response.

        Error status codes are returned like any other response. Transport failures
        (connection errors, timeouts) propagate as `requests.RequestException`.

        Parameters:
        ----------
        request: HTTPRequest
            The HTTPRequest object containing method, URL, headers, params and body.

        Returns:
        -------
        HTTPResponse:
            The response object containing status code, raw body, and headers.
        """
        response = self._get_session().request(
            method=request.method,
            url=request.url,
            headers=request.headers,
            params=request.params,
            data=request.body,
            timeout=self.timeout_seconds,
        )

        return HTTPResponse(
            status_code=response.status_code,
            body=response.text,
            headers=response.headers,
        )

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None
