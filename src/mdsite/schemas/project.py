"""Project metadata model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ProjectMetadata(BaseModel):
    """The ``[project]`` table of the documented project.

    Loaded once per build and shared by every node in the site tree.
    Unknown keys (``urls``, ``authors``, ...) are kept so themes can use them.
    """

    model_config = ConfigDict(extra="allow")

    name: str
    version: str | None = None
    description: str | None = None
