"""Game loop: drives one Mastermind session over a text interface.

This is the only place player-facing text is produced. The API client
raises; this module formats.

Flow:
1. Start a game on the server (failure ends the session)
2. Prompt for a guess, validate it locally
3. Submit it, show black/white feedback
4. Stop on a win, on an exhausted budget, on ``exit`` or end of input
"""

import logging
import sys
from collections.abc import Callable
from typing import TypeAlias

import typer

from mastermind.game.models import GameOutcome, GameResult, GameSession, is_valid
from mastermind.lib.client import MastermindClient
from mastermind.lib.errors import (
    ApiError,
    DecodingError,
    InvalidRequest,
    InvalidResponse,
    MastermindError,
    NetworkError,
)
from mastermind.lib.responses import GuessResponse

logger = logging.getLogger(__name__)

EXIT_COMMAND = "exit"

LineReader: TypeAlias = Callable[[], str | None]


def read_stdin_line() -> str | None:
    """Read one line from stdin; None at end of input."""
    line = sys.stdin.readline()
    if not line:
        return None
    return line.rstrip("\r\n")


def format_error(error: MastermindError) -> str:
    """Render a client error as a framed, player-facing block."""
    match error:
        case InvalidRequest():
            lines = ["Error: The API URL is invalid."]
        case NetworkError(cause=cause):
            lines = [
                "Network Error: Could not connect to the server. "
                "Please check your internet connection.",
                f"Details: {cause}",
            ]
        case DecodingError(cause=cause):
            lines = [
                "Error: Failed to process the response from the server.",
                f"Details: {cause}",
            ]
        case ApiError(message=message):
            lines = [f"API Error: {message}"]
        case InvalidResponse(status_code=status_code, body=body):
            lines = [
                "Error: Received an unexpected response from the server.",
                f"Status Code: {status_code}",
                f"Response Body: {body}",
            ]
        case _:
            lines = [f"An unexpected error occurred: {error}"]
    return "\n".join(
        ["", "--- An Error Occurred ---", *lines, "-------------------------", ""]
    )


def _print_welcome() -> None:
    typer.echo("--- Welcome to Mastermind ---")
    typer.echo("Guess the 4-digit code. Each digit is between 1 and 6.")
    typer.echo("Type 'exit' at any time to quit the game.")
    typer.echo("-----------------------------")


def _print_feedback(feedback: GuessResponse) -> None:
    typer.echo("\n--- Feedback ---")
    typer.echo(f"Correct value and position (B): {feedback.black}")
    typer.echo(f"Correct value, wrong position (W): {feedback.white}")
    typer.echo("----------------")


def _result(session: GameSession, outcome: GameOutcome) -> GameResult:
    logger.debug("Game %s ended: %s", session.game_id, outcome)
    return GameResult(
        outcome=outcome,
        game_id=session.game_id,
        guesses_scored=session.guesses_scored,
        attempts_remaining=session.attempts_remaining,
    )


async def run_game(
    api: MastermindClient,
    *,
    max_attempts: int = 10,
    read_line: LineReader = read_stdin_line,
) -> GameResult:
    """Play one game against the server.

    Args:
        api: An open API client.
        max_attempts: Scored guesses allowed before the game is lost.
        read_line: Source of player input; returns None at end of input.

    Returns:
        GameResult describing how the session ended.
    """
    _print_welcome()

    typer.echo("Starting a new game...")
    try:
        game_id = await api.start_new_game()
    except MastermindError as e:
        logger.debug("Could not start game: %r", e)
        typer.echo(format_error(e))
        return GameResult(outcome=GameOutcome.ABORTED)

    typer.echo(f"Success! A new game has started. Game ID: {game_id}")
    session = GameSession(game_id=game_id, attempts_remaining=max_attempts)
    logger.debug("Game %s started with %d attempts", game_id, max_attempts)

    while not session.exhausted:
        typer.echo(
            "\nEnter your 4-digit guess "
            f"(Attempts remaining: {session.attempts_remaining}):"
        )
        line = read_line()
        if line is None or line.strip().lower() == EXIT_COMMAND:
            typer.echo("Thanks for playing!")
            return _result(session, GameOutcome.QUIT)

        guess = line.strip()
        if not is_valid(guess):
            typer.echo(
                "Invalid input. Please enter exactly 4 digits, each between 1 and 6."
            )
            continue

        logger.debug("Submitting guess %s for game %s", guess, session.game_id)
        try:
            feedback = await api.submit_guess(session.game_id, guess)
        except MastermindError as e:
            logger.debug("Guess %s failed: %r", guess, e)
            typer.echo(format_error(e))
            continue

        session.guesses_scored += 1
        _print_feedback(feedback)
        logger.debug(
            "Feedback for %s: black=%d white=%d", guess, feedback.black, feedback.white
        )

        if feedback.solved:
            typer.echo("\n🎉 Congratulations! You guessed the code! 🎉")
            return _result(session, GameOutcome.WON)

        session.consume_attempt()

    typer.echo("\nGame over! You've run out of attempts.")
    return _result(session, GameOutcome.LOST)
