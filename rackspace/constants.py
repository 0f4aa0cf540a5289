"""Fixed values of the Rackspace identity and REST API wire protocol."""

API_VERSION = "v2.0"
AUTH_URL = "https://identity.api.rackspacecloud.com"
API_FORMAT = "json"

# Request headers
AUTH_TOKEN_HEADER = "X-Auth-Token"
AUTH_USER_HEADER = "X-Auth-User"
AUTH_KEY_HEADER = "X-Auth-Key"

# Pre-identity (v1.0) equivalents, still honoured by Cloud Files
AUTH_USER_HEADER_LEGACY = "X-Storage-User"
AUTH_KEY_HEADER_LEGACY = "X-Storage-Pass"
AUTH_TOKEN_HEADER_LEGACY = "X-Storage-Token"

# Response headers carrying endpoint URLs
STORAGE_URL_HEADER = "X-Storage-Url"
CDN_MANAGEMENT_URL_HEADER = "X-CDN-Management-Url"
MANAGEMENT_URL_HEADER = "X-Server-Management-Url"

USER_AGENT_PRODUCT = "rackspace-python-client"

DEFAULT_TIMEOUT_SECONDS = 15.0

CREDENTIALS_SCHEMA = "RAX-KSKEY:apiKeyCredentials"

SERVICE_NET_PREFIX = "snet-"
