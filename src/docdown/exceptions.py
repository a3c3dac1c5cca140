"""docdown exception hierarchy.

Every error the CLI can report derives from ``DocdownError`` so callers can
catch them with a single except clause:

    from docdown.exceptions import DocdownError, TemplateError

    try:
        output = render(document, style, template=template)
    except TemplateError as e:
        print(f"Template failed: {e.path}")
    except DocdownError as e:
        print(f"docdown error: {e}")
"""


class DocdownError(Exception):
    """Base exception for all docdown errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


# Configuration Errors


class ConfigurationError(DocdownError):
    """Error in docdown configuration.

    Raised when .docdown.yaml is invalid or contains unknown style settings.
    """

    pass


class InvalidArgumentError(ConfigurationError):
    """Invalid option value.

    Raised when a CLI option or config value cannot be interpreted.
    """

    def __init__(self, argument: str, reason: str) -> None:
        self.argument = argument
        self.reason = reason
        super().__init__(f"Invalid argument '{argument}': {reason}")


# Model Errors


class PackageNotFoundError(DocdownError):
    """No documentation model found at the given target."""

    def __init__(self, target: str) -> None:
        self.target = target
        super().__init__(f"Could not find package: {target}")


class ModelError(DocdownError):
    """Documentation model file is unreadable or malformed."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f'Could not load model "{path}": {reason}')


# Template Errors


class TemplateError(DocdownError):
    """Template could not be parsed or executed.

    Always fatal: a failing template never produces partial output.
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f'Error running template "{path}": {reason}')
