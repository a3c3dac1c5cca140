"""Markdown builder classes shared by the formatter and the renderers."""

from __future__ import annotations

import re

_LEADING_BLANK_LINES_RE = re.compile(r"\A(?:[ \t]*\n)+")


def trim_blank_lines(text: str) -> str:
    """Strip leading blank lines and trailing whitespace.

    Leading indentation on the first non-blank line is kept, so an indented
    code block at the start of a block stays a code block.
    """
    return _LEADING_BLANK_LINES_RE.sub("", text.rstrip())


class CodeBlock:
    """Builder for fenced code blocks.

    Example:
        code = CodeBlock("go")
        code.set_content("const Other = 3")
        print(code.render())
    """

    def __init__(self, language: str = "") -> None:
        self.language = language
        self.lines: list[str] = []

    def set_content(self, content: str) -> CodeBlock:
        """Set the entire code block content."""
        self.lines = content.split("\n")
        return self

    def render(self) -> str:
        """Render the code block to markdown."""
        content = "\n".join(self.lines)
        return f"```{self.language}\n{content}\n```"


class Blocks:
    """Builder for a run of Markdown blocks separated by one blank line.

    Each added part is trimmed of surrounding blank lines; parts that end up
    empty are dropped, so an empty section never leaves a stray header or
    blank line behind.

    Example:
        blocks = Blocks()
        blocks.add("## Usage")
        blocks.add("")  # ignored
        blocks.add("```go\\nconst X = 1\\n```")
        print(blocks.render())
    """

    def __init__(self) -> None:
        self.parts: list[str] = []

    def add(self, content: str) -> Blocks:
        """Add a block, skipping it if it is blank."""
        content = trim_blank_lines(content)
        if content:
            self.parts.append(content)
        return self

    def extend(self, *contents: str) -> Blocks:
        """Add several blocks in order."""
        for content in contents:
            self.add(content)
        return self

    def render(self) -> str:
        """Render the blocks to markdown."""
        return "\n\n".join(self.parts)
