"""Documentation model loading.

Source parsing happens elsewhere: a parser writes the package model to a
YAML or JSON file (``docdown.yaml`` by convention) and this module reads it
back, applies the ``.docdown.import`` marker and picks the package to
document.

A model file holds either a single package mapping or a list of them:

    packages:
      - name: example
        import_path: github.com/robertkrimen/godocdown/example
        doc: |
          Package example is an example package with documentation
        constants:
          - declaration: const Other = 3
            doc: Constantly, changing.
"""

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from docdown.exceptions import ModelError, PackageNotFoundError
from docdown.model import Document, Package

logger = logging.getLogger(__name__)

MODEL_NAMES = ("docdown.yaml", "docdown.yml", "docdown.json")
IMPORT_MARKER = ".docdown.import"

# Packages that carry command documentation rather than a library API,
# in order of preference
COMMAND_PACKAGES = ("documentation", "main")


def package_directory(target: Path) -> Path:
    """Directory holding the model, template and marker files for ``target``."""
    return target if target.is_dir() else target.parent


def find_model(directory: Path) -> Path | None:
    """Return the first model file present in ``directory``."""
    for name in MODEL_NAMES:
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return None


def read_import_marker(directory: Path) -> str | None:
    """Return the import path override from ``.docdown.import``, if present.

    A marker that cannot be read counts as absent.
    """
    marker = directory / IMPORT_MARKER
    try:
        content = marker.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Ignoring unreadable import marker %s: %s", marker, e)
        return None
    lines = content.split("\n")
    return lines[0].strip()


def read_packages(path: Path) -> list[Package]:
    """Parse every package in a model file.

    ``.json`` files are read as JSON, anything else as YAML.

    Raises:
        ModelError: If the file is unreadable, not YAML/JSON, or invalid
    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ModelError(str(path), e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise ModelError(str(path), f"not UTF-8 text: {e}") from e

    data: Any
    if path.suffix == ".json":
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ModelError(str(path), f"invalid JSON: {e}") from e
    else:
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ModelError(str(path), f"invalid YAML: {e}") from e

    if isinstance(data, dict) and "packages" in data:
        data = data["packages"]
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        raise ModelError(str(path), "expected a package mapping or a list of packages")

    try:
        return [Package.model_validate(entry) for entry in data]
    except ValidationError as e:
        raise ModelError(str(path), str(e)) from e


def select_package(packages: list[Package], directory: Path) -> Document | None:
    """Choose the package to document.

    A ``documentation`` package wins over ``main``; either one makes the
    document a command named after its directory. Otherwise the first
    package is documented under its own name.
    """
    by_name = {package.name: package for package in reversed(packages)}
    for name in COMMAND_PACKAGES:
        if name in by_name:
            command_name = directory.resolve().name
            logger.debug("Documenting %s as command %s", name, command_name)
            return Document.from_package(by_name[name], name=command_name, is_command=True)
    if packages:
        return Document.from_package(packages[0])
    return None


def load_document(target: Path) -> Document:
    """Load the documentation model for ``target``.

    Args:
        target: A model file, or a package directory containing one

    Returns:
        Document ready for rendering

    Raises:
        PackageNotFoundError: If no model file or no package is found
        ModelError: If the model file cannot be parsed
    """
    directory = package_directory(target)
    if target.is_dir():
        path = find_model(target)
    elif target.is_file():
        path = target
    else:
        path = None
    if path is None:
        raise PackageNotFoundError(str(target))

    logger.debug("Loading model from %s", path)
    document = select_package(read_packages(path), directory)
    if document is None:
        raise PackageNotFoundError(str(target))

    import_path = read_import_marker(directory)
    if import_path is not None:
        document = document.model_copy(update={"import_path": import_path})
    return document
