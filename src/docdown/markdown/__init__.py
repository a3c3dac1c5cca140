"""Markdown generation for documentation models.

Leaf utilities live here; the section and document renderers are in
``docdown.markdown.sections`` and ``docdown.markdown.render``.
"""

from docdown.markdown.builders import Blocks, CodeBlock, trim_blank_lines
from docdown.markdown.headings import HeadingStrategy, headify
from docdown.markdown.text import convert_quotes, format_code, format_doc, indent

__all__ = [
    # Builders
    "Blocks",
    "CodeBlock",
    "trim_blank_lines",
    # Headings
    "HeadingStrategy",
    "headify",
    # Text
    "convert_quotes",
    "format_code",
    "format_doc",
    "indent",
]
