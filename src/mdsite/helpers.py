"""Template helpers available to every theme template.

Helpers are registered from the static ``HELPERS`` mapping, both as Jinja
filters and as globals, under their mapping key.
"""

from __future__ import annotations

from typing import Any, Callable

from mdsite.schemas import CategoryNode, PageNode, SiteNode


def root_url(depth: int) -> str:
    """Relative prefix from a page at ``depth`` back to the output root."""
    return "../" * depth or "./"


def relative_url(link: str | None, depth: int) -> str:
    """Turn a root-relative ``link`` into one usable from a page at ``depth``."""
    return "../" * depth + (link or "") or "./"


def is_current(node: SiteNode, page: PageNode) -> bool:
    """True when ``node`` is ``page`` or navigates to the same place."""
    return node.id == page.id or (node.link is not None and node.link == page.link)


def in_path(category: CategoryNode, page: PageNode) -> bool:
    """True when ``category`` is an ancestor of ``page``."""
    return category.id in page.path_ids


def page_title(page: PageNode) -> str:
    """Display title, falling back to the project name for the root index."""
    return page.title or page.pkg.name


HELPERS: dict[str, Callable[..., Any]] = {
    "root_url": root_url,
    "relative_url": relative_url,
    "is_current": is_current,
    "in_path": in_path,
    "page_title": page_title,
}
