"""Game module: the interactive session around the API client.

- config.py: Configuration via pydantic-settings
- models.py: Guess validation, session state, results
- core.py: The turn loop and error formatting
"""
