"""Error taxonomy for the Mastermind API client.

Every failure of a remote operation is raised as exactly one of these
classes. The client never logs or prints them; formatting for the player
happens in the game loop.

Examples:
    Catch the whole family, or a single variant::

        >>> try:
        ...     raise ApiError("game not found")
        ... except MastermindError as e:
        ...     e.message
        'game not found'
"""


class MastermindError(Exception):
    """Base class for every API client failure."""


class InvalidRequest(MastermindError):
    """The request URL could not be constructed."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Invalid URL: {url!r}")
        self.url = url


class NetworkError(MastermindError):
    """Transport failure: DNS, refused connection, timeout, bad encoding."""

    def __init__(self, cause: Exception) -> None:
        super().__init__(str(cause) or type(cause).__name__)
        self.cause = cause


class DecodingError(MastermindError):
    """A 200 response body did not match the expected shape."""

    def __init__(self, cause: Exception) -> None:
        super().__init__(str(cause))
        self.cause = cause


class ApiError(MastermindError):
    """The server reported a domain-level error message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidResponse(MastermindError):
    """Non-200 response that carried no recognizable error message."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"HTTP {status_code}: {body}")
        self.status_code = status_code
        self.body = body
