from typing import Optional

from rackspace.constants import AUTH_URL
from rackspace.exceptions import InvalidArgumentError


class Credentials:
    """
    Holds the account name, API key and identity endpoint used to obtain tokens.

    Attributes:
    ----------
    user: str
        Rackspace account name.
    key: str
        Rackspace API key.
    auth_url: str
        Base URL of the identity service, without the version segment.
    """

    def __init__(self, user: Optional[str], key: Optional[str], auth_url: str = AUTH_URL):
        """
        Parameters:
        ----------
        user : str
            Rackspace account name.
        key : str
            Rackspace API key.
        auth_url : str, optional
            Identity service URL. Defaults to the US identity endpoint.

        Raises:
        -------
        InvalidArgumentError:
            If user, key or auth_url is empty.
        """
        if not user:
            raise InvalidArgumentError("The user cannot be empty")
        if not key:
            raise InvalidArgumentError("The key cannot be empty")

        self._user = ""
        self._key = ""
        self._auth_url = ""
        self.set_user(user)
        self.set_key(key)
        self.set_auth_url(auth_url)

    def __repr__(self) -> str:
        return f"Credentials(user={self._user!r}, key='***', auth_url={self._auth_url!r})"

    @property
    def user(self) -> str:
        return self._user

    @property
    def key(self) -> str:
        return self._key

    @property
    def auth_url(self) -> str:
        return self._auth_url

    def get_user(self) -> str:
        return self._user

    def get_key(self) -> str:
        return self._key

    def get_auth_url(self) -> str:
        return self._auth_url

    def set_user(self, user: Optional[str]) -> None:
        """Replace the account name. Blank values are ignored."""
        if user:
            self._user = user

    def set_key(self, key: Optional[str]) -> None:
        """Replace the API key. Blank values are ignored."""
        if key:
            self._key = key

    def set_auth_url(self, url: Optional[str]) -> None:
        """
        Replace the identity service URL.

        Raises:
        -------
        InvalidArgumentError:
            If url is empty.
        """
        if not url:
            raise InvalidArgumentError("The authentication URL is not valid")
        self._auth_url = url
