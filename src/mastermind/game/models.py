"""Session state and result models for the game loop."""

from enum import StrEnum

from pydantic import BaseModel, Field

CODE_LENGTH = 4
DIGITS = frozenset("123456")


def is_valid(guess: str) -> bool:
    """Return True if ``guess`` is exactly four digits, each 1-6."""
    return len(guess) == CODE_LENGTH and all(ch in DIGITS for ch in guess)


class GameOutcome(StrEnum):
    """How a session ended."""

    WON = "won"
    LOST = "lost"
    QUIT = "quit"
    ABORTED = "aborted"


class GameSession(BaseModel):
    """Mutable state of the one game this process plays.

    Owned by the loop; never persisted.
    """

    game_id: str = Field(min_length=1, description="Server-issued game id")
    attempts_remaining: int = Field(ge=0, description="Local attempt budget")
    guesses_scored: int = Field(default=0, ge=0)

    def consume_attempt(self) -> None:
        """Spend one attempt on a scored, non-winning guess."""
        self.attempts_remaining -= 1

    @property
    def exhausted(self) -> bool:
        return self.attempts_remaining <= 0


class GameResult(BaseModel):
    """Summary returned by the game loop."""

    outcome: GameOutcome
    game_id: str | None = None
    guesses_scored: int = 0
    attempts_remaining: int = 0
