"""Rich display utilities for the docdown CLI.

Markdown goes to stdout untouched; everything meant for a human goes to
stderr so output can be redirected straight into a README.
"""

from rich.console import Console
from rich.markup import escape

err_console = Console(stderr=True)


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[bold red]✗[/] {escape(message)}", highlight=False)
