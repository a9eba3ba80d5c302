"""Environment CLI for playing a Mastermind game.

The CLI is the process-level harness that:
1. Configures logging
2. Builds the API client from settings
3. Runs one interactive game
4. Maps the outcome to an exit code

Usage:
    uv run mastermind
    uv run python -m mastermind.environment.cli --base-url http://localhost:8000
"""

import asyncio
import logging
from typing import Annotated

import typer

from mastermind.game.config import normalize_base_url, settings
from mastermind.game.core import run_game
from mastermind.game.models import GameOutcome, GameResult
from mastermind.lib.client import MastermindClient
from mastermind.version import CLIENT_VERSION

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="mastermind",
    help="Play Mastermind against a remote game server",
    add_completion=False,
    pretty_exceptions_show_locals=False,
)


async def play_session(base_url: str) -> GameResult:
    """Open a client against ``base_url`` and play one game."""
    logger.debug("Connecting to %s (client %s)", base_url, CLIENT_VERSION)
    async with MastermindClient(
        base_url, timeout=settings.http_timeout_seconds
    ) as api:
        return await run_game(api, max_attempts=settings.max_attempts)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"mastermind {CLIENT_VERSION}")
        raise typer.Exit()


@app.command()
def play(
    base_url: Annotated[
        str | None,
        typer.Option("--base-url", help="Game server URL (overrides settings)"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging"),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the client version and exit",
        ),
    ] = False,
) -> None:
    """Start a game and guess the code interactively."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.WARNING)

    url = normalize_base_url(base_url) if base_url else settings.base_url
    result = asyncio.run(play_session(url))
    if result.outcome is GameOutcome.ABORTED:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
