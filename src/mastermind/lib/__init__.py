"""Library layer for the Mastermind client.

Reusable, parametric pieces configured through arguments; nothing here
reads settings or talks to the player.

Modules:
- client: Async HTTP client for the game API (MastermindClient)
- errors: Closed error taxonomy raised by the client
- responses: Pydantic wire models for request/response bodies
"""

from mastermind.lib.client import MastermindClient, build_url
from mastermind.lib.errors import (
    ApiError,
    DecodingError,
    InvalidRequest,
    InvalidResponse,
    MastermindError,
    NetworkError,
)
from mastermind.lib.responses import (
    CreateGameResponse,
    ErrorResponse,
    GuessRequest,
    GuessResponse,
)

__all__ = [
    # Client
    "MastermindClient",
    "build_url",
    # Errors
    "ApiError",
    "DecodingError",
    "InvalidRequest",
    "InvalidResponse",
    "MastermindError",
    "NetworkError",
    # Responses
    "CreateGameResponse",
    "ErrorResponse",
    "GuessRequest",
    "GuessResponse",
]
