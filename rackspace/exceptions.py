class RackspaceError(Exception):
    """Base class for every error raised by the rackspace package."""

    pass


class InvalidArgumentError(RackspaceError, ValueError):
    """
    Exception raised when a client is built or configured with invalid input.

    Empty user names, empty API keys and empty authentication URLs are programmer
    errors and are reported immediately through this exception.
    """

    pass


class AuthenticationError(RackspaceError, RuntimeError):
    """
    Exception raised when a value that requires a valid token cannot be obtained.

    Attributes:
        message (str): Explanation of the error.
        status_code (int, optional): HTTP status code of the failed identity response.
        body (str, optional): Raw body of the failed identity response.
    """

    def __init__(self, message, status_code=None, body=None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class RackspaceAPIError(RackspaceError):
    """
    Exception raised when an API request to the Rackspace cloud fails.

    Attributes:
        message (str): Explanation of the error.
        status_code (int, optional): HTTP status code of the failed API response.
        body (str, optional): Body of the failed API response, often containing additional error details.

    Args:
        message (str): Explanation of the error.
        status_code (int, optional): HTTP status code of the failed API response.
        body (str, optional): Body of the failed API response, often containing additional error details.
    """

    def __init__(self, message, status_code=None, body=None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
