"""Render command implementation."""

import logging
from collections.abc import Callable
from pathlib import Path

import typer

from docdown.config import load_style, merge_cli_overrides
from docdown.display import print_error
from docdown.exceptions import DocdownError, PackageNotFoundError
from docdown.loader import load_document, package_directory
from docdown.markdown.render import render
from docdown.templates import load_template

logger = logging.getLogger(__name__)


def render_command(
    target: Path,
    heading: str | None = None,
    plain: bool = False,
    signature: bool = False,
    template: Path | None = None,
    no_template: bool = False,
    show_usage: Callable[[], None] | None = None,
) -> None:
    """Render documentation for ``target`` to stdout.

    Args:
        target: Package directory or model file
        heading: Heading detection method, overriding the config file
        plain: Emit indented code instead of fenced code
        signature: Append the docdown signature
        template: Explicit template file
        no_template: Disable template processing
        show_usage: Called instead of reporting a missing package when the
            target was not given explicitly
    """
    try:
        document = load_document(target)
    except PackageNotFoundError as e:
        if show_usage is not None:
            show_usage()
            raise SystemExit(2) from e
        print_error(e.message)
        raise SystemExit(1) from e
    except DocdownError as e:
        print_error(e.message)
        raise SystemExit(1) from e

    directory = package_directory(target)
    try:
        style = merge_cli_overrides(
            load_style(directory),
            heading=heading,
            plain=True if plain else None,
            signature=True if signature else None,
        )
        overlay = load_template(directory, explicit=template, disabled=no_template)
        documentation = render(document, style, template=overlay)
    except DocdownError as e:
        print_error(e.message)
        raise SystemExit(1) from e

    logger.debug("Rendered %d characters for %s", len(documentation), document.name)
    typer.echo(documentation)
