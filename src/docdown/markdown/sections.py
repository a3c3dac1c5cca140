"""Per-entity Markdown sections: constants, variables, functions, types."""

from collections.abc import Callable, Sequence
from typing import TypeVar

from docdown.markdown.builders import Blocks
from docdown.markdown.text import format_code, format_doc
from docdown.model import Function, Type, Value
from docdown.style import Style

T = TypeVar("T")


def render_section(entities: Sequence[T], render_entity: Callable[[T], str]) -> str:
    """Render one block per entity, in order; "" for an empty sequence."""
    blocks = Blocks()
    for entity in entities:
        blocks.add(render_entity(entity))
    return blocks.render()


def _code(declaration: str, style: Style) -> str:
    return format_code(
        declaration, plain=style.plain, language=style.language, width=style.code_indent
    )


def _doc(text: str, style: Style) -> str:
    return format_doc(text, width=style.width)


def function_title(function: Function, header: str) -> str:
    """Heading line for a function or method.

    Example:
        function_title(Function(name="Set", receiver="T"), "####")
        # "#### func (T) Set"
    """
    receiver = function.receiver.strip()
    if not receiver:
        return f"{header} func {function.name}"
    if not receiver.startswith("("):
        receiver = f"({receiver})"
    return f"{header} func {receiver} {function.name}"


def _render_value(value: Value, style: Style) -> str:
    return Blocks().extend(_code(value.declaration, style), _doc(value.doc, style)).render()


def _render_function(function: Function, header: str, style: Style) -> str:
    return (
        Blocks()
        .extend(
            function_title(function, header),
            _code(function.declaration, style),
            _doc(function.doc, style),
        )
        .render()
    )


def render_values(values: Sequence[Value], style: Style) -> str:
    """Render a constant or variable group."""
    return render_section(values, lambda value: _render_value(value, style))


def render_functions(functions: Sequence[Function], header: str, style: Style) -> str:
    """Render functions (or methods) under ``header``."""
    return render_section(functions, lambda function: _render_function(function, header, style))


def _render_type(entry: Type, style: Style) -> str:
    header = style.type_function_header
    return (
        Blocks()
        .extend(
            f"{style.type_header} type {entry.name}",
            _code(entry.declaration, style),
            _doc(entry.doc, style),
            render_values(entry.constants, style),
            render_values(entry.variables, style),
            render_functions(entry.functions, header, style),
            render_functions(entry.methods, header, style),
        )
        .render()
    )


def render_types(types: Sequence[Type], style: Style) -> str:
    """Render types, each followed by its own constants, variables, functions and methods."""
    return render_section(types, lambda entry: _render_type(entry, style))
