"""docdown CLI commands.

Each command module contains the business logic for a CLI command.
The cli.py module handles Typer decorators and argument parsing,
then delegates to these command functions.
"""

from docdown.commands.render import render_command

__all__ = ["render_command"]
