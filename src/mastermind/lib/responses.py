"""Wire models for the Mastermind HTTP API.

Request and response bodies are validated with pydantic in strict mode:
JSON strings and booleans are never coerced to ints. Unknown fields sent
by the server are ignored.

Shape reference:
    POST /game   -> {"game_id": str}
    POST /guess  <- {"game_id": str, "guess": str}
                 -> {"black": int, "white": int}
    errors       -> {"error": str}
"""

from pydantic import BaseModel, ConfigDict, Field


class CreateGameResponse(BaseModel):
    """Body of a successful ``POST /game``."""

    model_config = ConfigDict(strict=True)

    game_id: str = Field(min_length=1, description="Server-issued game id")


class GuessRequest(BaseModel):
    """Body sent to ``POST /guess``."""

    model_config = ConfigDict(strict=True)

    game_id: str
    guess: str


class GuessResponse(BaseModel):
    """Feedback for a scored guess.

    ``black`` counts digits right in value and position, ``white`` digits
    right in value but in the wrong position.
    """

    model_config = ConfigDict(strict=True)

    black: int = Field(ge=0, le=4, description="Exact matches")
    white: int = Field(ge=0, le=4, description="Value-only matches")

    @property
    def solved(self) -> bool:
        return self.black == 4


class ErrorResponse(BaseModel):
    """Error body the server may attach to a non-200 response."""

    model_config = ConfigDict(strict=True)

    error: str
