"""Tests for document rendering."""

from pathlib import Path

import pytest

from docdown.markdown.builders import Blocks
from docdown.markdown.headings import HeadingStrategy
from docdown.markdown.render import (
    emit,
    emit_header,
    emit_signature,
    emit_synopsis,
    emit_usage,
    render,
)
from docdown.model import Document, Value
from docdown.style import SIGNATURE, Style
from docdown.templates import DocumentTemplate

SMALL_USAGE = """## Usage

```go
const Max = 10
```

Max is the limit.

```go
var Debug = false
```

#### func New

```go
func New() *Thing
```

New makes a Thing.

#### type Thing

```go
type Thing struct{}
```

Thing is a thing.

#### func (*Thing) Close

```go
func (t *Thing) Close() error
```"""


class TestEmitHeader:
    """Tests for the header step."""

    def test_with_import(self, small_document: Document, style: Style) -> None:
        assert emit_header(small_document, style) == (
            '# small\n---\n    import "example.com/small"'
        )

    def test_import_disabled(self, small_document: Document) -> None:
        style = Style(include_import=False)
        assert emit_header(small_document, style) == "# small\n---"

    def test_no_import_path(self, style: Style) -> None:
        assert emit_header(Document(name="x"), style) == "# x\n---"

    def test_command_has_no_import(self, small_document: Document, style: Style) -> None:
        command = small_document.model_copy(update={"is_command": True})
        assert emit_header(command, style) == "# small\n---"


class TestEmitSynopsis:
    """Tests for the synopsis step."""

    def test_headlines_marked(self, small_document: Document, style: Style) -> None:
        assert emit_synopsis(small_document, style) == (
            "Package small is small.\n\n### Overview\n\nIt has a little of everything."
        )

    def test_detection_disabled(self, small_document: Document) -> None:
        style = Style(heading=HeadingStrategy.NONE)
        assert "### " not in emit_synopsis(small_document, style)

    def test_example_synopsis(self, example_document: Document, style: Style) -> None:
        assert emit_synopsis(example_document, style) == (
            "Package example is an example package with documentation\n"
            "\n"
            "    // Here is some code\n"
            "    func example() {\n"
            "        abc := 1 + 1\n"
            "    }()\n"
            "\n"
            "### Installation\n"
            "\n"
            "    # This is how to install it:\n"
            "    $ curl http://example.com\n"
            "    $ tar xf example.tar.gz -C .\n"
            "    $ ./example &"
        )


class TestEmitUsage:
    """Tests for the usage step."""

    def test_full_usage(self, small_document: Document, style: Style) -> None:
        assert emit_usage(small_document, style) == SMALL_USAGE

    def test_empty_model_has_only_header(self, style: Style) -> None:
        assert emit_usage(Document(name="empty"), style) == "## Usage"

    def test_example_filters_hidden_fields(self, example_document: Document, style: Style) -> None:
        usage = emit_usage(example_document, style)
        assert "contains filtered" not in usage
        assert "#### func (ExampleType) Set" in usage
        assert "#### func NewExample" in usage
        assert usage.index("const Other = 3") < usage.index("var (")
        assert usage.index("var (") < usage.index("#### func Example")
        assert usage.index("#### func Example") < usage.index("#### type ExampleType")


class TestEmitSignature:
    """Tests for the signature step."""

    def test_disabled_by_default(self, style: Style) -> None:
        assert emit_signature(style) == ""

    def test_enabled(self) -> None:
        assert emit_signature(Style(include_signature=True)) == f"---\n{SIGNATURE}"


class TestRender:
    """Tests for full composition."""

    @pytest.mark.parametrize("signature", [False, True])
    def test_steps_compose_to_render(self, small_document: Document, signature: bool) -> None:
        style = Style(include_signature=signature)
        joined = (
            Blocks()
            .extend(
                emit_header(small_document, style),
                emit_synopsis(small_document, style),
                emit_usage(small_document, style),
                emit_signature(style),
            )
            .render()
        )
        assert render(small_document, style) == joined

    def test_render_layout(self, small_document: Document, style: Style) -> None:
        expected = (
            '# small\n---\n    import "example.com/small"\n\n'
            "Package small is small.\n\n### Overview\n\nIt has a little of everything.\n\n"
            + SMALL_USAGE
        )
        assert render(small_document, style) == expected

    def test_command_renders_header_synopsis_signature(self) -> None:
        document = Document(
            name="tool",
            is_command=True,
            synopsis="Command tool does things.",
            constants=[Value(declaration="const Hidden = 1")],
        )
        style = Style(include_signature=True)
        assert render(document, style) == (
            f"# tool\n---\n\nCommand tool does things.\n\n---\n{SIGNATURE}"
        )
        assert emit(document, style) == "# tool\n---\n\nCommand tool does things."

    def test_render_is_trimmed(self, example_document: Document, style: Style) -> None:
        result = render(example_document, style)
        assert result == result.strip()
        assert result.startswith("# example\n---")

    def test_render_does_not_mutate_model(self, example_document: Document, style: Style) -> None:
        before = example_document.model_dump()
        render(example_document, style)
        assert example_document.model_dump() == before

    def test_template_replaces_composition(self, small_document: Document, tmp_path: Path) -> None:
        path = tmp_path / ".docdown.md"
        path.write_text("{{ emit_header() }}\n\nCustom body\n")
        template = DocumentTemplate.load(path)
        style = Style(include_signature=True)
        assert render(small_document, style, template=template) == (
            f'# small\n---\n    import "example.com/small"\n\nCustom body\n\n---\n{SIGNATURE}'
        )
