"""docdown CLI - Main entry point.

Generates GitHub-friendly Markdown documentation from a package model:

    docdown /path/to/package > README.markdown
    docdown > README.markdown          # package in the current directory
    docdown --plain .                  # standard Markdown, no code fences
"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from docdown import __version__
from docdown.commands import render_command

app = typer.Typer(
    help="docdown - Markdown documentation from a package documentation model.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"docdown {__version__}")
        raise typer.Exit()


@app.command()
def main(
    ctx: typer.Context,
    target: Annotated[
        Optional[Path],
        typer.Argument(help="Package directory or model file (default: current directory)"),
    ] = None,
    heading: Annotated[
        Optional[str],
        typer.Option(
            "--heading",
            help="Heading detection method: SingleWord (1Word), TitleCase, Title, "
            "TitleCase1Word, none",
        ),
    ] = None,
    plain: Annotated[
        bool,
        typer.Option(
            "--plain", help="Emit standard Markdown, rather than GitHub Flavored Markdown"
        ),
    ] = False,
    signature: Annotated[
        bool, typer.Option("--signature", help="Add the docdown signature to the end")
    ] = False,
    template: Annotated[
        Optional[Path], typer.Option("--template", help="The template file to use")
    ] = None,
    no_template: Annotated[
        bool, typer.Option("--no-template", help="Disable template processing")
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", help="Log debug output to stderr")
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = False,
) -> None:
    """Render package documentation as Markdown.

    For each line of the package doc comment, docdown checks whether it looks
    like a heading and, if so, prefixes it with a Markdown heading marker.

    A template named .docdown.markdown, .docdown.md, .docdown.template or
    .docdown.tmpl in the package directory is used automatically.

    Examples:
        docdown example/
        docdown --heading Title --signature example/docdown.yaml
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    def show_usage() -> None:
        typer.echo(ctx.get_help(), err=True)

    render_command(
        target if target is not None else Path("."),
        heading=heading,
        plain=plain,
        signature=signature,
        template=template,
        no_template=no_template,
        show_usage=show_usage if target is None else None,
    )


if __name__ == "__main__":
    app()
