"""Build the navigational site tree from a directory of Markdown files."""

from __future__ import annotations

import logging
import os
import posixpath
import stat
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Sequence

from mdsite.exceptions import BuildError, UnresolvableLinkError
from mdsite.schemas import CategoryNode, PageNode, ProjectMetadata, SiteTree
from mdsite.slugs import HTML_EXTENSION, MARKDOWN_EXTENSION, Slugger, resolve_slug_path, slugify_segment

logger = logging.getLogger(__name__)

INDEX_NAME = "index"


@dataclass
class BuildContext:
    """Values shared by every node of one build.

    Attributes:
        source_dir: Root of the Markdown source tree.
        target_dir: Output root; node targets are placed under it.
        pkg: Project metadata, loaded once and shared by reference.
        render_text: Text renderer turning raw page source into HTML.
        slugger: Segment normalizer used for slug paths.
        tree: Arena collecting the nodes; its first node is ``toplevel``.
    """

    source_dir: Path
    target_dir: Path
    pkg: ProjectMetadata
    render_text: Callable[[str], str]
    slugger: Slugger = slugify_segment
    tree: SiteTree = field(init=False)

    def __post_init__(self) -> None:
        self.source_dir = Path(self.source_dir).resolve()
        self.target_dir = Path(self.target_dir).resolve()
        self.tree = SiteTree(pkg=self.pkg)

    def slug_for(self, path: Path) -> str:
        return resolve_slug_path(os.path.relpath(path, self.source_dir), self.slugger)


def build_site_tree(context: BuildContext) -> SiteTree:
    """Build the whole tree rooted at ``context.source_dir``."""
    root = build_category(context.source_dir, None, (), context)
    tree = context.tree
    logger.info(
        "Built site tree: %d categories, %d pages (root link %r)",
        len(tree.categories),
        len(tree.pages),
        root.link,
    )
    return tree


def build_page(
    file_path: Path,
    parent: CategoryNode,
    ancestry: Sequence[CategoryNode],
    context: BuildContext,
) -> PageNode:
    """Build the page node for one source file and attach it to ``parent``.

    Content is decoded as UTF-8 with undecodable bytes replaced, so binary
    files next to the Markdown still become pages.

    Raises:
        OSError: If the file cannot be read.
    """
    file_path = Path(file_path)
    slug = context.slug_for(file_path)
    is_index = _strip_suffix(posixpath.basename(slug), HTML_EXTENSION) == INDEX_NAME

    if is_index:
        directory = posixpath.dirname(slug)
        link = f"{directory}/" if directory else ""
        title = parent.title
    else:
        link = slug
        title = _strip_suffix(file_path.name, MARKDOWN_EXTENSION)

    content = context.render_text(file_path.read_text(encoding="utf-8", errors="replace"))

    page = PageNode(
        id=context.tree.next_id,
        parent_id=parent.id,
        path_ids=[node.id for node in ancestry],
        depth=parent.depth,
        source=file_path,
        target=context.target_dir / slug,
        slug=slug,
        title=title,
        link=link,
        index=is_index,
        content=content,
    )
    context.tree.add(page)
    parent.page_ids.append(page.id)
    return page


def build_category(
    dir_path: Path,
    parent: CategoryNode | None,
    ancestry: Sequence[CategoryNode],
    context: BuildContext,
) -> CategoryNode:
    """Build the category for ``dir_path`` together with all of its descendants.

    Directories are walked with an explicit worklist, so nesting depth is not
    limited by the interpreter stack. Every category gets its ``link`` once
    all of its children exist.

    Raises:
        UnresolvableLinkError: If any category has neither pages nor
            sub-categories.
        OSError: If a directory or file cannot be read.
    """
    if parent is None and len(context.tree):
        raise BuildError("The site tree already has a root category")

    created: list[CategoryNode] = []
    pending: list[tuple[Path, CategoryNode | None, tuple[CategoryNode, ...]]] = [
        (Path(dir_path), parent, tuple(ancestry))
    ]
    while pending:
        directory, owner, trail = pending.pop()
        category = _create_category(directory, owner, trail, context)
        created.append(category)

        subdirectories, files = _scan_directory(directory)
        child_trail = (*trail, category)
        for file_path in files:
            build_page(file_path, category, child_trail, context)
        # Reversed so the first sub-directory is popped, and numbered, first.
        for subdirectory in reversed(subdirectories):
            pending.append((subdirectory, category, child_trail))

    # Children are always created after their parent, so walking backwards
    # resolves every child link before the parent needs it.
    for category in reversed(created):
        category.link = resolve_category_link(category)

    return created[0]


def resolve_category_link(category: CategoryNode) -> str:
    """Return the link of the index page, else the first page, else the first sub-category.

    Raises:
        UnresolvableLinkError: If the category has no pages and no
            sub-categories.
    """
    pages = category.pages
    for page in pages:
        if page.index:
            return page.link or ""
    if pages:
        return pages[0].link or ""

    categories = category.categories
    if categories and categories[0].link is not None:
        return categories[0].link

    raise UnresolvableLinkError(
        f"Cannot resolve navigation link for {category.source}: "
        "directory has no pages and no sub-directories"
    )


def _create_category(
    directory: Path,
    parent: CategoryNode | None,
    ancestry: tuple[CategoryNode, ...],
    context: BuildContext,
) -> CategoryNode:
    slug = context.slug_for(directory)
    category = CategoryNode(
        id=context.tree.next_id,
        parent_id=parent.id if parent is not None else None,
        path_ids=[node.id for node in ancestry],
        depth=parent.depth + 1 if parent is not None else 0,
        source=directory,
        target=context.target_dir / slug if slug else context.target_dir,
        slug=slug,
        title=directory.name if parent is not None else None,
    )
    context.tree.add(category)
    if parent is not None:
        parent.category_ids.append(category.id)
    return category


def _scan_directory(directory: Path) -> tuple[list[Path], list[Path]]:
    """Split directory entries into sub-directories and files, in listing order."""
    subdirectories: list[Path] = []
    files: list[Path] = []
    for name in os.listdir(directory):
        entry = directory / name
        mode = os.stat(entry).st_mode
        if stat.S_ISDIR(mode):
            subdirectories.append(entry)
        elif stat.S_ISREG(mode):
            files.append(entry)
    return subdirectories, files


def _strip_suffix(name: str, suffix: str) -> str:
    if name.endswith(suffix) and name != suffix:
        return name[: -len(suffix)]
    return name
