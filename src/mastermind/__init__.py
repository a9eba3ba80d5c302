"""Command-line client for a remote Mastermind code-breaking game.

Structure:
- mastermind/lib/: Reusable API layer
  - client.py: Async HTTP client (start game, submit guess)
  - errors.py: Closed error taxonomy
  - responses.py: Wire models

- mastermind/game/: Session logic
  - config.py: Configuration via pydantic-settings
  - models.py: Guess validation, session state, results
  - core.py: Turn loop and error formatting

- mastermind/environment/: Player-facing harness
  - cli/: typer entry point
"""
