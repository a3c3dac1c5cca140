"""Shared pytest fixtures for docdown tests.

Provides the example model on disk plus small in-memory documents.
"""

from pathlib import Path

import pytest

from docdown.loader import load_document
from docdown.model import Document, Function, Type, Value
from docdown.style import Style

FIXTURES_DIR = Path(__file__).parent / "docdown" / "fixtures"


@pytest.fixture
def style() -> Style:
    """Default rendering style."""
    return Style()


@pytest.fixture
def example_dir() -> Path:
    """Directory holding the example package model."""
    return FIXTURES_DIR / "example"


@pytest.fixture
def command_dir() -> Path:
    """Directory holding a command model (documentation + main packages)."""
    return FIXTURES_DIR / "command"


@pytest.fixture
def example_document(example_dir: Path) -> Document:
    """The example package loaded from its model file."""
    return load_document(example_dir)


@pytest.fixture
def small_document() -> Document:
    """A compact package with one entity of every kind."""
    return Document(
        name="small",
        import_path="example.com/small",
        synopsis="Package small is small.\n\nOverview\n\nIt has a little of everything.\n",
        constants=[Value(declaration="const Max = 10", doc="Max is the limit.")],
        variables=[Value(declaration="var Debug = false")],
        functions=[
            Function(name="New", declaration="func New() *Thing", doc="New makes a Thing."),
        ],
        types=[
            Type(
                name="Thing",
                declaration="type Thing struct{}",
                doc="Thing is a thing.",
                methods=[
                    Function(
                        name="Close",
                        receiver="*Thing",
                        declaration="func (t *Thing) Close() error",
                    )
                ],
            )
        ],
    )
