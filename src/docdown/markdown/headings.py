"""Headline detection for package synopsis text.

A headline is a line that stands on its own and looks like a title, e.g.
"Installation" or "Getting Started". Detected lines are prefixed with a
Markdown heading marker; everything else passes through untouched.
"""

import re
from enum import Enum

from docdown.exceptions import InvalidArgumentError

_WORD = r"[A-Za-z0-9_-]+"
_TITLE_WORD = r"[A-Z][A-Za-z0-9_-]*"

_SINGLE_WORD_RE = re.compile(_WORD)
_TITLE_CASE_RE = re.compile(rf"{_TITLE_WORD}(?:[ \t]+{_TITLE_WORD})*")
_TITLE_RE = re.compile(rf"{_WORD}(?:[ \t]+{_WORD})*")


class HeadingStrategy(str, Enum):
    """Pattern used to decide whether a line is a headline."""

    SINGLE_WORD = "SingleWord"
    TITLE_CASE = "TitleCase"
    TITLE = "Title"
    TITLE_CASE_1WORD = "TitleCase1Word"
    NONE = "none"

    @classmethod
    def parse(cls, name: str) -> "HeadingStrategy":
        """Resolve a strategy from its option spelling.

        Accepts the canonical names plus ``1Word`` for SingleWord and
        ``""``/``-`` for none.
        """
        strategy = _ALIASES.get(name.strip())
        if strategy is None:
            choices = ", ".join(s.value for s in cls)
            raise InvalidArgumentError(
                "heading", f"unknown method {name!r} (choose from {choices})"
            )
        return strategy

    def matches(self, line: str) -> bool:
        """Return True if the whole line qualifies as a headline."""
        if self is HeadingStrategy.NONE:
            return False
        if self is HeadingStrategy.TITLE_CASE_1WORD:
            return HeadingStrategy.SINGLE_WORD.matches(line) or HeadingStrategy.TITLE_CASE.matches(
                line
            )
        return _PATTERNS[self].fullmatch(line) is not None


_PATTERNS = {
    HeadingStrategy.SINGLE_WORD: _SINGLE_WORD_RE,
    HeadingStrategy.TITLE_CASE: _TITLE_CASE_RE,
    HeadingStrategy.TITLE: _TITLE_RE,
}

_ALIASES = {s.value: s for s in HeadingStrategy}
_ALIASES.update(
    {
        "1Word": HeadingStrategy.SINGLE_WORD,
        "": HeadingStrategy.NONE,
        "-": HeadingStrategy.NONE,
    }
)


def headify(text: str, header: str, strategy: HeadingStrategy | None) -> str:
    """Prefix every headline in ``text`` with ``header``.

    Example:
        headify("Installation\\n\\n\\tgo get foo", "###", HeadingStrategy.TITLE_CASE_1WORD)
        # "### Installation\\n\\n\\tgo get foo"
    """
    if strategy is None or strategy is HeadingStrategy.NONE:
        return text
    lines = text.split("\n")
    return "\n".join(f"{header} {line}" if strategy.matches(line) else line for line in lines)
