import json
from typing import Any, Dict, Optional, Sequence, Tuple

import requests

from rackspace._api_requester import APIRequester
from rackspace._credentials import Credentials
from rackspace._models import ServiceCatalogEntry
from rackspace._rackspace_logging import LoggerConfig
from rackspace._session import ENDPOINT_FIELDS, SessionState
from rackspace.constants import API_VERSION, CREDENTIALS_SCHEMA
from rackspace.exceptions import InvalidArgumentError

logger = LoggerConfig(logger_name=__name__).get_logger()

# Walked in service catalog order: when two catalog entries target the same field,
# the one listed last in the catalog wins. Both Cloud Files entries write cdn_url.
SERVICE_CATALOG_MAP: Tuple[Tuple[str, str], ...] = (
    ("cloudServersOpenStack", "management_url"),
    ("cloudFilesCDN", "cdn_url"),
    ("cloudFiles", "cdn_url"),
)


class Authentication:
    """
    Authentication against the Rackspace identity service (v2.0 API key credentials).

    This class exchanges an account name and API key for a bearer token at
    ``{auth_url}/v2.0/tokens`` and populates the session with the token and the
    endpoint URLs found in the returned service catalog.

    Failures are never raised: `authenticate` returns False and the reason is kept
    in ``session.last_error``.

    Attributes:
    ----------
    credentials: Credentials
        Account name, API key and identity URL.
    session: SessionState
        The session receiving the token, the endpoints and the last error.
    api_requester: APIRequester
        Sends the identity request.
    service_catalog_map: tuple of (str, str)
        Ordered (service name, session field) pairs applied to the service catalog.
    """

    def __init__(
        self,
        credentials: Credentials,
        session: SessionState,
        api_requester: APIRequester,
        service_catalog_map: Optional[Sequence[Tuple[str, str]]] = None,
    ):
        self.credentials = credentials
        self.session = session
        self.api_requester = api_requester
        self.service_catalog_map = tuple(SERVICE_CATALOG_MAP if service_catalog_map is None else service_catalog_map)
        for _, field_name in self.service_catalog_map:
            if field_name not in ENDPOINT_FIELDS:
                raise InvalidArgumentError(
                    f"Unknown session field '{field_name}'. Expected one of: {', '.join(ENDPOINT_FIELDS)}"
                )

    @property
    def token_url(self) -> str:
        return f"{self.credentials.auth_url.rstrip('/')}/{API_VERSION}/tokens"

    def _build_payload(self) -> str:
        return json.dumps(
            {
                "auth": {
                    CREDENTIALS_SCHEMA: {
                        "username": self.credentials.user,
                        "apiKey": self.credentials.key,
                    }
                }
            }
        )

    def authenticate(self) -> bool:
        """
        Requests a new token and records it, with the catalog endpoints, in the session.

        Returns:
        -------
        bool:
            True when the identity service returned an ``access`` object. False otherwise,
            with ``session.last_error`` holding the raw body and HTTP status code (status 0
            and the error text for transport failures).
        """
        logger.info("Authenticating user %s against %s", self.credentials.user, self.token_url)

        try:
            response = self.api_requester.send(
                self.token_url,
                "POST",
                headers={"Content-Type": "application/json"},
                body=self._build_payload(),
            )
        except requests.RequestException as e:
            logger.warning("Authentication request to %s failed: %s", self.token_url, e)
            self.session.set_error(f"Unable to reach the identity service: {e}", 0)
            return False

        try:
            content = response.json()
        except ValueError:
            content = None

        access = content.get("access") if isinstance(content, dict) else None
        token = self._extract_token(access)
        if token is None:
            logger.warning("Authentication rejected with HTTP %s", response.status_code)
            self.session.set_error(response.body, response.status_code)
            return False

        catalog = access.get("serviceCatalog") or []
        if not isinstance(catalog, list):
            logger.warning("Ignoring malformed service catalog of type %s", type(catalog).__name__)
            catalog = []
        self._apply_service_catalog(catalog)
        self.session.token = token
        logger.info("Authenticated user %s", self.credentials.user)
        return True

    @staticmethod
    def _extract_token(access: Any) -> Optional[str]:
        if not isinstance(access, dict):
            return None
        token = access.get("token")
        if not isinstance(token, dict) or not token.get("id"):
            return None
        return token["id"]

    def _apply_service_catalog(self, catalog: Sequence[Dict[str, Any]]) -> None:
        for item in catalog:
            entry = ServiceCatalogEntry.from_dict(item) if isinstance(item, dict) else None
            if entry is None:
                continue
            for service_name, field_name in self.service_catalog_map:
                if entry.name != service_name:
                    continue
                previous = getattr(self.session, field_name)
                if previous and previous != entry.public_url:
                    logger.debug("%s overwrites %s (was %s)", service_name, field_name, previous)
                setattr(self.session, field_name, entry.public_url)
