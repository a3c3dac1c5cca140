"""Style configuration loading.

Precedence for every style setting:
1. CLI flags (highest)
2. ``.docdown.yaml`` in the package directory, under ``style:``
3. Defaults (lowest)
"""

from pathlib import Path

import yaml
from pydantic import ValidationError

from docdown.exceptions import ConfigurationError
from docdown.markdown.headings import HeadingStrategy
from docdown.style import Style

CONFIG_NAME = ".docdown.yaml"


def load_style(directory: Path | None = None) -> Style:
    """Load the style from ``.docdown.yaml``.

    Args:
        directory: Package directory. Defaults to cwd.

    Returns:
        Style with values from file or defaults

    Example:
        style = load_style(Path("example"))
        print(style.heading.value)
    """
    if directory is None:
        directory = Path.cwd()

    config_path = directory / CONFIG_NAME

    # Return defaults if no config file
    if not config_path.exists():
        return Style()

    try:
        with open(config_path) as f:
            raw_config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(raw_config, dict):
        raise ConfigurationError(f"Invalid config in {config_path}: expected a mapping")

    style_section = raw_config.get("style") or {}

    try:
        return Style.model_validate(style_section)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid style config in {config_path}: {e}") from e


def merge_cli_overrides(
    style: Style,
    heading: str | None = None,
    plain: bool | None = None,
    signature: bool | None = None,
) -> Style:
    """Merge CLI flag overrides into a style.

    Args:
        style: Base style from file
        heading: Heading detection method name
        plain: Emit indented instead of fenced code
        signature: Append the signature footer

    Returns:
        New Style with overrides applied

    Raises:
        InvalidArgumentError: If ``heading`` names no known method
    """
    updates: dict[str, object] = {}

    if heading is not None:
        updates["heading"] = HeadingStrategy.parse(heading)

    if plain is not None:
        updates["plain"] = plain

    if signature is not None:
        updates["include_signature"] = signature

    return style.model_copy(update=updates)
