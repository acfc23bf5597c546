"""mdsite: build a static documentation site from a tree of Markdown files."""

from mdsite.exceptions import (
    AssetError,
    BuildError,
    ConfigError,
    MdsiteError,
    RenderError,
    UnresolvableLinkError,
)
from mdsite.schemas import CategoryNode, PageNode, ProjectMetadata, SiteTree
from mdsite.slugs import resolve_slug_path, slugify_segment
from mdsite.tree import BuildContext, build_category, build_page, build_site_tree

__all__ = [
    "AssetError",
    "BuildContext",
    "BuildError",
    "CategoryNode",
    "ConfigError",
    "MdsiteError",
    "PageNode",
    "ProjectMetadata",
    "RenderError",
    "SiteTree",
    "UnresolvableLinkError",
    "build_category",
    "build_page",
    "build_site_tree",
    "resolve_slug_path",
    "slugify_segment",
]
