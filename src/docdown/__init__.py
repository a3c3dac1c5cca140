"""docdown - Markdown documentation for source packages.

Renders a package documentation model (synopsis, constants, variables,
functions, types) as GitHub-friendly Markdown, optionally through a
user-supplied Jinja2 template.
"""

from docdown.exceptions import (
    ConfigurationError,
    DocdownError,
    InvalidArgumentError,
    ModelError,
    PackageNotFoundError,
    TemplateError,
)

__version__ = "0.1.0"

__all__ = [
    # Base exception
    "DocdownError",
    # Configuration
    "ConfigurationError",
    "InvalidArgumentError",
    # Model
    "PackageNotFoundError",
    "ModelError",
    # Template
    "TemplateError",
]
