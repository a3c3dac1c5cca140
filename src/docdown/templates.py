"""Template overlay for custom documentation layouts.

A template replaces the default composition but reuses the same emission
steps. Templates are Jinja2 and see a read-only view:

    {{ emit() }}           the standard documentation
    {{ emit_header() }}    package name and import line
    {{ emit_synopsis() }}  the package doc comment
    {{ emit_usage() }}     constants, variables, functions and types
    {% if is_command %}    whether the document describes a command
    {{ name }}             package/command name
    {{ import_path }}      import path ("" if unknown)

Undefined names are errors; so is any other failure while loading or
rendering. There is no fallback to partial output.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined
from jinja2 import Template as JinjaTemplate
from jinja2 import TemplateError as JinjaTemplateError

from docdown.exceptions import TemplateError
from docdown.markdown.render import emit, emit_header, emit_synopsis, emit_usage
from docdown.model import Document
from docdown.style import Style

logger = logging.getLogger(__name__)

# Probed in order; the first one present wins
TEMPLATE_NAMES = (
    ".docdown.markdown",
    ".docdown.md",
    ".docdown.template",
    ".docdown.tmpl",
)


@dataclass(frozen=True)
class TemplateView:
    """What a template is allowed to see."""

    emit: Callable[[], str]
    emit_header: Callable[[], str]
    emit_synopsis: Callable[[], str]
    emit_usage: Callable[[], str]
    is_command: bool
    name: str
    import_path: str

    @classmethod
    def of(cls, document: Document, style: Style) -> "TemplateView":
        return cls(
            emit=lambda: emit(document, style),
            emit_header=lambda: emit_header(document, style),
            emit_synopsis=lambda: emit_synopsis(document, style),
            emit_usage=lambda: emit_usage(document, style),
            is_command=document.is_command,
            name=document.name,
            import_path=document.import_path,
        )

    def as_context(self) -> dict[str, object]:
        return {
            "emit": self.emit,
            "emit_header": self.emit_header,
            "emit_synopsis": self.emit_synopsis,
            "emit_usage": self.emit_usage,
            "is_command": self.is_command,
            "name": self.name,
            "import_path": self.import_path,
        }


def _get_environment(directory: Path) -> Environment:
    """Get Jinja2 environment for user documentation templates."""
    return Environment(
        loader=FileSystemLoader(str(directory)),
        undefined=StrictUndefined,
        autoescape=False,
        keep_trailing_newline=True,
    )


class DocumentTemplate:
    """A parsed template file."""

    def __init__(self, path: Path, template: JinjaTemplate) -> None:
        self.path = path
        self._template = template

    @classmethod
    def load(cls, path: Path) -> "DocumentTemplate":
        """Parse the template at ``path``.

        Raises:
            TemplateError: If the file is unreadable or not a valid template
        """
        env = _get_environment(path.parent)
        try:
            template = env.get_template(path.name)
        except (OSError, UnicodeDecodeError, JinjaTemplateError) as e:
            raise TemplateError(str(path), str(e) or type(e).__name__) from e
        return cls(path, template)

    def render(self, document: Document, style: Style) -> str:
        """Execute the template against ``document``.

        Raises:
            TemplateError: If rendering fails for any reason
        """
        context = TemplateView.of(document, style).as_context()
        try:
            return self._template.render(**context)
        except Exception as e:
            raise TemplateError(str(self.path), str(e) or type(e).__name__) from e


def find_template(directory: Path) -> Path | None:
    """Return the first conventional template file in ``directory``."""
    for name in TEMPLATE_NAMES:
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return None


def load_template(
    directory: Path,
    explicit: Path | None = None,
    disabled: bool = False,
) -> DocumentTemplate | None:
    """Resolve and parse the template to use, if any.

    Args:
        directory: Package directory probed for conventional template names
        explicit: Template path given by the user; takes precedence
        disabled: Skip templates entirely

    Returns:
        Parsed template, or None to use the default composition
    """
    if disabled:
        return None
    path = explicit if explicit is not None else find_template(directory)
    if path is None:
        return None
    logger.debug("Using template %s", path)
    return DocumentTemplate.load(path)
