__version__ = "0.1.0"

# Authentication-related imports
from rackspace._api_requester import APIRequester
from rackspace._auth_client import SERVICE_CATALOG_MAP, Authentication
from rackspace._credentials import Credentials
from rackspace._session import SessionState

# Client and config-related imports
from rackspace._rackspace_client import RackspaceClient
from rackspace._rackspace_config import RackspaceConfig

# HTTP-related imports
from rackspace._http_client import HTTPClient, HTTPRequest, HTTPResponse

# Models and errors
from rackspace._models import LastError, Resolution, ServiceCatalogEntry
from rackspace.exceptions import (
    AuthenticationError,
    InvalidArgumentError,
    RackspaceAPIError,
    RackspaceError,
)

__all__ = [
    "Authentication",
    "APIRequester",
    "Credentials",
    "SessionState",
    "LastError",
    "Resolution",
    "ServiceCatalogEntry",
    "SERVICE_CATALOG_MAP",
    "HTTPClient",
    "HTTPRequest",
    "HTTPResponse",
    "RackspaceClient",
    "RackspaceConfig",
    "RackspaceError",
    "InvalidArgumentError",
    "AuthenticationError",
    "RackspaceAPIError",
]
