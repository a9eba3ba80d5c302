"""Environment harness for playing a game.

Handles the process-level concerns the game loop stays out of:
logging setup, settings, exit codes.

Structure:
- cli/: typer entry point (``mastermind`` console script)
"""
