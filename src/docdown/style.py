"""Rendering style configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from docdown.exceptions import InvalidArgumentError
from docdown.markdown.headings import HeadingStrategy

SIGNATURE = "**docdown** generated documentation"


class Style(BaseModel):
    """Header markers, heading detection and code rendering mode.

    Built once (defaults, then .docdown.yaml, then CLI flags) and passed
    explicitly to every rendering call. Frozen, so a render never sees it
    change underneath it.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    include_import: bool = Field(default=True, description="Emit the import line")
    include_signature: bool = Field(default=False, description="Append the docdown signature")

    synopsis_header: str = Field(default="###", description="Marker for detected headlines")
    heading: HeadingStrategy = Field(
        default=HeadingStrategy.TITLE_CASE_1WORD, description="Headline detection method"
    )

    usage_header: str = "## Usage"
    function_header: str = "####"
    type_header: str = "####"
    type_function_header: str = "####"

    plain: bool = Field(default=False, description="Indent code instead of fencing it")
    language: str = Field(default="go", description="Language tag for fenced code")
    code_indent: int = Field(default=4, ge=0, description="Indent width for plain code")
    width: int = Field(default=80, gt=0, description="Column width for doc text")

    @field_validator("heading", mode="before")
    @classmethod
    def _parse_heading(cls, value: object) -> object:
        if isinstance(value, str) and not isinstance(value, HeadingStrategy):
            try:
                return HeadingStrategy.parse(value)
            except InvalidArgumentError as e:
                raise ValueError(e.reason) from e
        if value is None:
            return HeadingStrategy.NONE
        return value


DEFAULT_STYLE = Style()
