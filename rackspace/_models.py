import json
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from rackspace.exceptions import AuthenticationError

AUTHENTICATION_FAILED_MESSAGE = "Authentication failed, a valid token is required to use the Rackspace API"


@dataclass
class BaseModel:
    """
    Base model class for Rackspace client models.

    This class provides common functionality for all models,
    including methods to convert the model to a dictionary or JSON string.
    """

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the model instance to a dictionary.

        Returns:
        -------
        Dict[str, Any]:
            A dictionary representation of the model, excluding None values.
        """
        return {k: v for k, v in asdict(self).items() if v is not None}

    def to_json(self) -> str:
        """
        Convert the model instance to a JSON string.

        Returns:
        -------
        str:
            A JSON string representation of the model, excluding None values.
        """
        return json.dumps(self.to_dict())


@dataclass
class LastError(BaseModel):
    """
    Error recorded by the last failed HTTP exchange.

    Attributes:
    ----------
    message: str
        The raw response body, or the transport error text.
    status_code: int
        HTTP status code of the response, 0 when no response was received.
    """

    message: str
    status_code: int


@dataclass
class ServiceCatalogEntry(BaseModel):
    """A named service of the identity response and its first public endpoint."""

    name: str
    public_url: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Optional["ServiceCatalogEntry"]:
        """
        Build an entry from one element of ``access.serviceCatalog``.

        Returns None when the element has no name or no endpoint with a public URL.
        """
        name = data.get("name")
        endpoints = data.get("endpoints") or []
        if not name or not isinstance(endpoints, list) or not endpoints or not isinstance(endpoints[0], dict):
            return None
        public_url = endpoints[0].get("publicURL")
        if not public_url:
            return None
        return cls(name=name, public_url=public_url)


@dataclass
class Resolution(BaseModel):
    """
    Outcome of resolving a session value, authenticating first when it was unset.

    ``failed`` is only True when authentication was attempted and rejected. A
    successful authentication whose service catalog lacked the requested entry
    yields ``failed=False`` with ``value=None``.
    """

    value: Optional[str] = None
    failed: bool = False
    error: Optional[LastError] = None

    def unwrap(self) -> Optional[str]:
        """
        Return the resolved value, raising when authentication failed.

        Raises:
        -------
        AuthenticationError:
            If the resolution carries an authentication failure.
        """
        if self.failed:
            status_code = self.error.status_code if self.error else None
            body = self.error.message if self.error else None
            raise AuthenticationError(AUTHENTICATION_FAILED_MESSAGE, status_code=status_code, body=body)
        return self.value
