from dataclasses import dataclass, fields
from typing import Optional

from rackspace._models import BaseModel, LastError

ENDPOINT_FIELDS = ("storage_url", "cdn_url", "management_url")
RESOLVABLE_FIELDS = ("token",) + ENDPOINT_FIELDS


@dataclass
class SessionState(BaseModel):
    """
    In-memory state produced by authentication.

    The session is either empty (never authenticated) or holds a token. Endpoint
    URLs are populated on a best-effort basis from the service catalog and may stay
    unset even when the token is present.

    Attributes:
    ----------
    token: str, optional
        The current bearer token.
    storage_url: str, optional
        Cloud Files storage endpoint.
    cdn_url: str, optional
        Cloud Files CDN endpoint.
    management_url: str, optional
        Cloud Servers management endpoint.
    last_error: LastError, optional
        Error of the last HTTP exchange, cleared at the start of every call.
    """

    token: Optional[str] = None
    storage_url: Optional[str] = None
    cdn_url: Optional[str] = None
    management_url: Optional[str] = None
    last_error: Optional[LastError] = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    def set_error(self, message: str, status_code: int) -> None:
        self.last_error = LastError(message=message, status_code=status_code)

    def clear_error(self) -> None:
        self.last_error = None

    def reset(self) -> None:
        """Forget the token, every endpoint and the last error."""
        for f in fields(self):
            setattr(self, f.name, None)

    def to_dict(self):
        data = super().to_dict()
        # Never expose the bearer token through serialisation
        if "token" in data:
            data["token"] = "***"
        return data
