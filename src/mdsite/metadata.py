"""Load the documented project's metadata."""

from __future__ import annotations

import tomllib
from pathlib import Path

from pydantic import ValidationError

from mdsite.exceptions import ConfigError
from mdsite.schemas import ProjectMetadata


def load_project_metadata(path: Path) -> ProjectMetadata:
    """Read the ``[project]`` table of a ``pyproject.toml`` file.

    Args:
        path: Location of the project file.

    Returns:
        The parsed metadata, shared by every node of a build.

    Raises:
        ConfigError: If the file is missing, is not valid TOML, or has no
            usable ``[project]`` table.
    """
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except FileNotFoundError as exc:
        raise ConfigError(f"Project file not found: {path}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc

    project = data.get("project")
    if not isinstance(project, dict):
        raise ConfigError(f"No [project] table in {path}")

    try:
        return ProjectMetadata.model_validate(project)
    except ValidationError as exc:
        raise ConfigError(f"Invalid [project] table in {path}: {exc}") from exc
