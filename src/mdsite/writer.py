"""Write a built site tree to the output directory."""

from __future__ import annotations

import logging
from typing import Callable

from mdsite.schemas import CategoryNode, PageNode

logger = logging.getLogger(__name__)


def render_tree(root: CategoryNode, render_page: Callable[[PageNode], str]) -> int:
    """Create every category directory and write every page under ``root``.

    Categories are visited in pre-order; within a category its pages are
    written before any sub-category is entered. Nothing is rolled back if a
    write fails partway.

    Args:
        root: Category whose subtree is written.
        render_page: Template callable producing the final HTML for a page.

    Returns:
        Number of pages written.

    Raises:
        OSError: If a directory cannot be created (other than already
            existing) or a page cannot be written.
    """
    written = 0
    stack = [root]
    while stack:
        category = stack.pop()
        category.target.mkdir(parents=category.parent_id is None, exist_ok=True)

        for page in category.pages:
            write_page(page, render_page)
            written += 1

        stack.extend(reversed(category.categories))

    logger.info("Wrote %d pages to %s", written, root.target)
    return written


def write_page(page: PageNode, render_page: Callable[[PageNode], str]) -> None:
    """Render ``page`` and overwrite its target file."""
    page.target.write_text(render_page(page), encoding="utf-8")
    logger.debug("Wrote %s -> %s", page.source, page.target)
