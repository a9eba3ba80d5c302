"""Async HTTP client for the remote Mastermind game API.

Wraps the two remote operations and normalizes every failure into the
closed taxonomy in :mod:`mastermind.lib.errors`. No retries are performed.

Examples:
    Start a game and submit a guess::

        >>> async with MastermindClient("https://mastermind.darkube.app") as api:
        ...     game_id = await api.start_new_game()
        ...     feedback = await api.submit_guess(game_id, "1234")
        ...     feedback.black, feedback.white
        (1, 2)

    Inject a transport for testing::

        >>> transport = httpx.MockTransport(handler)
        >>> async with MastermindClient(base_url, transport=transport) as api:
        ...     ...
"""

from types import TracebackType
from typing import Self, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from mastermind.lib.errors import (
    ApiError,
    DecodingError,
    InvalidRequest,
    InvalidResponse,
    NetworkError,
)
from mastermind.lib.responses import (
    CreateGameResponse,
    ErrorResponse,
    GuessRequest,
    GuessResponse,
)

_ALLOWED_SCHEMES = ("http", "https")

M = TypeVar("M", bound=BaseModel)


def build_url(base_url: str, path: str) -> httpx.URL:
    """Join an endpoint path onto the base URL.

    Raises:
        InvalidRequest: If the result is not an absolute http(s) URL.
    """
    raw = f"{base_url.rstrip('/')}/{path.lstrip('/')}"
    try:
        url = httpx.URL(raw)
    except httpx.InvalidURL as e:
        raise InvalidRequest(raw) from e
    if url.scheme not in _ALLOWED_SCHEMES or not url.host:
        raise InvalidRequest(raw)
    return url


def _decode(model: type[M], response: httpx.Response) -> M:
    try:
        return model.model_validate_json(response.content)
    except ValidationError as e:
        raise DecodingError(e) from e


class MastermindClient:
    """Client for ``POST /game`` and ``POST /guess``.

    Use as an async context manager; it owns one ``httpx.AsyncClient`` for
    the lifetime of the block.

    Args:
        base_url: Root URL of the game service.
        timeout: Request timeout in seconds.
        transport: Optional httpx transport (e.g. ``httpx.MockTransport``).
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url
        self._timeout = timeout
        self._transport = transport
        self._http: httpx.AsyncClient | None = None

    async def __aenter__(self) -> Self:
        self._http = httpx.AsyncClient(
            timeout=self._timeout,
            transport=self._transport,
        )
        return self

    async def __aexit__(
        self,
        _exc_type: type[BaseException] | None,
        _exc_val: BaseException | None,
        _exc_tb: TracebackType | None,
    ) -> None:
        if self._http is not None:
            await self._http.aclose()
            self._http = None

    async def _post(
        self,
        path: str,
        *,
        content: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        if self._http is None:
            raise RuntimeError("MastermindClient used outside 'async with'")
        url = build_url(self.base_url, path)
        try:
            return await self._http.post(url, content=content, headers=headers)
        except httpx.UnsupportedProtocol as e:
            raise InvalidRequest(str(url)) from e
        except httpx.RequestError as e:
            raise NetworkError(e) from e

    async def start_new_game(self) -> str:
        """Create a game on the server and return its id.

        Raises:
            InvalidRequest: The endpoint URL is malformed.
            NetworkError: The server could not be reached or its reply was unreadable.
            InvalidResponse: The server answered with a non-200 status.
            DecodingError: The 200 body has no usable ``game_id``.
        """
        response = await self._post("/game")
        if response.status_code != 200:
            raise InvalidResponse(response.status_code, response.text)
        return _decode(CreateGameResponse, response).game_id

    async def submit_guess(self, game_id: str, guess: str) -> GuessResponse:
        """Submit a guess and return the black/white feedback.

        The guess is sent as-is; digit rules are the caller's concern.

        Raises:
            InvalidRequest: The endpoint URL is malformed.
            NetworkError: The server could not be reached or its reply was unreadable.
            ApiError: Non-200 status with an ``{"error": ...}`` body.
            InvalidResponse: Any other non-200 status.
            DecodingError: The 200 body is not valid feedback.
        """
        body = GuessRequest(game_id=game_id, guess=guess)
        response = await self._post(
            "/guess",
            content=body.model_dump_json(),
            headers={"Content-Type": "application/json"},
        )
        if response.status_code != 200:
            try:
                error = ErrorResponse.model_validate_json(response.content)
            except ValidationError:
                raise InvalidResponse(response.status_code, response.text) from None
            raise ApiError(error.error)
        return _decode(GuessResponse, response)
