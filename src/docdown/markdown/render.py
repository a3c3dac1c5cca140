"""Document rendering: header, synopsis, usage and signature.

Each ``emit_*`` step is self-contained: it takes the document and the style
explicitly, returns its own trimmed Markdown, and can be called in any order
(templates do exactly that). ``render`` is the default composition:

    header, synopsis, usage (packages only), signature

joined by one blank line. Joining the steps by hand gives the same bytes.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from docdown.markdown.builders import Blocks, trim_blank_lines
from docdown.markdown.headings import headify
from docdown.markdown.sections import render_functions, render_types, render_values
from docdown.markdown.text import format_doc
from docdown.model import Document
from docdown.style import SIGNATURE, Style

if TYPE_CHECKING:  # pragma: no cover - import for type checking only
    from docdown.templates import DocumentTemplate

logger = logging.getLogger(__name__)


def emit_header(document: Document, style: Style) -> str:
    """Package name, a rule, and the import line when one applies."""
    lines = [f"# {document.name}", "---"]
    if not document.is_command and style.include_import and document.import_path:
        lines.append(f'    import "{document.import_path}"')
    return trim_blank_lines("\n".join(lines))


def emit_synopsis(document: Document, style: Style) -> str:
    """The package doc comment, reflowed, with headlines marked."""
    text = format_doc(document.synopsis, width=style.width)
    return trim_blank_lines(headify(text, style.synopsis_header, style.heading))


def emit_usage(document: Document, style: Style) -> str:
    """Usage header followed by constants, variables, functions and types."""
    return (
        Blocks()
        .extend(
            style.usage_header,
            render_values(document.constants, style),
            render_values(document.variables, style),
            render_functions(document.functions, style.function_header, style),
            render_types(document.types, style),
        )
        .render()
    )


def emit_signature(style: Style) -> str:
    """Attribution footer, or "" unless the style asks for it."""
    if not style.include_signature:
        return ""
    return f"---\n{SIGNATURE}"


def emit(document: Document, style: Style) -> str:
    """The standard documentation, without the signature."""
    blocks = Blocks().extend(emit_header(document, style), emit_synopsis(document, style))
    if not document.is_command:
        blocks.add(emit_usage(document, style))
    return blocks.render()


def render(
    document: Document,
    style: Style,
    template: DocumentTemplate | None = None,
) -> str:
    """Render the final Markdown for ``document``.

    Args:
        document: Documentation model to render
        style: Rendering style
        template: Optional template replacing the default composition

    Returns:
        Trimmed Markdown; the signature (if enabled) always comes last

    Raises:
        TemplateError: If the template fails to render
    """
    if template is None:
        body = emit(document, style)
    else:
        logger.debug("Rendering %s through template %s", document.name, template.path)
        body = template.render(document, style)
    return Blocks().extend(body, emit_signature(style)).render().strip()
