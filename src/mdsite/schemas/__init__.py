"""Shared schemas for mdsite."""

from mdsite.schemas.nodes import CategoryNode, PageNode, SiteNode, SiteTree
from mdsite.schemas.project import ProjectMetadata

__all__ = ["CategoryNode", "PageNode", "ProjectMetadata", "SiteNode", "SiteTree"]
