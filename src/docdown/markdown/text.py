"""Doc comment and declaration formatting.

``format_doc`` reflows a raw doc comment the way godoc prints it as text:
paragraphs are re-wrapped, indented runs are kept verbatim as code blocks.
``format_code`` turns declaration source into a fenced or indented block.
"""

import logging
import re
import textwrap

from docdown.markdown.builders import CodeBlock

logger = logging.getLogger(__name__)

PUNCH_CARD_WIDTH = 80

# Emitted by go/printer for structs with hidden fields
_FILTERED_FIELDS_RE = re.compile(
    r"^[ \t]*// contains filtered or unexported fields[ \t]*(?:\n|\Z)", re.MULTILINE
)
_QUOTES = (("``", "“"), ("''", "”"))


def _is_blank(line: str) -> bool:
    return not line.strip()


def _indent_len(line: str) -> int:
    return len(line) - len(line.lstrip(" \t"))


def _unindent(lines: list[str]) -> list[str]:
    """Remove the leading whitespace shared by all non-blank lines."""
    prefix = None
    for line in lines:
        if _is_blank(line):
            continue
        lead = line[: _indent_len(line)]
        if prefix is None:
            prefix = lead
            continue
        n = 0
        while n < len(prefix) and n < len(lead) and prefix[n] == lead[n]:
            n += 1
        prefix = prefix[:n]
    cut = len(prefix or "")
    return ["" if _is_blank(line) else line[cut:] for line in lines]


def _blocks(text: str) -> list[tuple[bool, list[str]]]:
    """Split comment text into (verbatim, lines) blocks."""
    lines = _unindent(text.split("\n"))
    out: list[tuple[bool, list[str]]] = []
    para: list[str] = []

    def close() -> None:
        nonlocal para
        if para:
            out.append((False, para))
            para = []

    i = 0
    while i < len(lines):
        line = lines[i]
        if _is_blank(line):
            close()
            i += 1
            continue
        if _indent_len(line) > 0:
            close()
            j = i + 1
            while j < len(lines) and (_is_blank(lines[j]) or _indent_len(lines[j]) > 0):
                j += 1
            # but not trailing blank lines
            while j > i and _is_blank(lines[j - 1]):
                j -= 1
            out.append((True, _unindent(lines[i:j])))
            i = j
            continue
        para.append(line)
        i += 1
    close()
    return out


def convert_quotes(text: str) -> str:
    """Replace ``doc comment'' quote pairs with typographic quotes."""
    for plain, fancy in _QUOTES:
        text = text.replace(plain, fancy)
    return text


def format_doc(
    text: str,
    indent: str = "",
    pre_indent: str = "    ",
    width: int = PUNCH_CARD_WIDTH,
) -> str:
    """Reflow a doc comment for Markdown.

    Paragraphs (runs of unindented lines) are joined and wrapped at
    ``width - 2 * len(indent)`` columns, each output line prefixed with
    ``indent``. Indented runs are verbatim: they are unindented as a group,
    prefixed with ``pre_indent`` and never re-wrapped. Blocks are separated
    by a single blank line.

    Args:
        text: Raw doc comment text
        indent: Prefix for paragraph lines
        pre_indent: Prefix for verbatim lines
        width: Total line width budget

    Returns:
        Formatted text without a trailing newline ("" for an empty comment)
    """
    if not text:
        return ""
    column = width - 2 * len(indent)
    rendered = []
    for verbatim, lines in _blocks(text):
        if verbatim:
            rendered.append("\n".join(pre_indent + line if line else "" for line in lines))
            continue
        words = convert_quotes(" ".join(lines)).split()
        rendered.append(
            textwrap.fill(
                " ".join(words),
                width=column + len(indent),
                initial_indent=indent,
                subsequent_indent=indent,
                break_long_words=False,
                break_on_hyphens=False,
            )
        )
    return "\n\n".join(rendered)


def indent(text: str, prefix: str) -> str:
    """Prefix every line that has content; blank lines are left alone."""
    return "\n".join(prefix + line if line.strip() else line for line in text.split("\n"))


def format_code(
    declaration: object,
    plain: bool = False,
    language: str = "go",
    width: int = 4,
) -> str:
    """Render declaration source as a Markdown code block.

    Args:
        declaration: Declaration source text
        plain: Indent by ``width`` spaces instead of fencing
        language: Fence language tag
        width: Indent width for plain mode

    Returns:
        The code block, or "" when there is no usable declaration
    """
    if not isinstance(declaration, str):
        logger.debug("Ignoring declaration of type %s", type(declaration).__name__)
        return ""
    source = _FILTERED_FIELDS_RE.sub("", declaration).rstrip()
    if not source.strip():
        return ""
    if plain:
        return indent(source, " " * width)
    return CodeBlock(language).set_content(source).render()
