"""Pydantic models for the documentation model consumed by the renderer."""

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class Value(_Frozen):
    """A constant or variable declaration group."""

    declaration: str = ""
    doc: str = ""


class Function(_Frozen):
    """A function, or a method when ``receiver`` is set."""

    name: str
    receiver: str = ""
    declaration: str = ""
    doc: str = ""


class Type(_Frozen):
    """A type declaration with the members grouped under it."""

    name: str
    declaration: str = ""
    doc: str = ""
    constants: list[Value] = Field(default_factory=list)
    variables: list[Value] = Field(default_factory=list)
    functions: list[Function] = Field(default_factory=list)
    methods: list[Function] = Field(default_factory=list)


class Package(_Frozen):
    """One parsed package as it appears in a model file."""

    name: str
    doc: str = ""
    import_path: str = ""
    constants: list[Value] = Field(default_factory=list)
    variables: list[Value] = Field(default_factory=list)
    functions: list[Function] = Field(default_factory=list)
    types: list[Type] = Field(default_factory=list)


class Document(_Frozen):
    """Everything the renderer needs for one package or command."""

    name: str
    import_path: str = ""
    is_command: bool = False
    synopsis: str = ""
    constants: list[Value] = Field(default_factory=list)
    variables: list[Value] = Field(default_factory=list)
    functions: list[Function] = Field(default_factory=list)
    types: list[Type] = Field(default_factory=list)

    @classmethod
    def from_package(
        cls,
        package: Package,
        *,
        name: str | None = None,
        import_path: str | None = None,
        is_command: bool = False,
    ) -> "Document":
        return cls(
            name=name if name is not None else package.name,
            import_path=import_path if import_path is not None else package.import_path,
            is_command=is_command,
            synopsis=package.doc,
            constants=package.constants,
            variables=package.variables,
            functions=package.functions,
            types=package.types,
        )
