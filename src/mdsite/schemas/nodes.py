"""Site tree models.

Nodes live in a :class:`SiteTree` arena and refer to each other by id.
Parent, ancestry and child lookups go through the arena, so a node never
owns its relatives and the whole tree dumps to plain data.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterator, Literal

from pydantic import BaseModel, Field, PrivateAttr

from mdsite.schemas.project import ProjectMetadata


class SiteNode(BaseModel):
    """Fields shared by categories and pages."""

    id: int = Field(..., ge=0)
    parent_id: int | None = None
    path_ids: list[int] = Field(default_factory=list)
    depth: int = Field(..., ge=0)
    source: Path
    target: Path
    slug: str
    title: str | None = None
    link: str | None = None

    _tree: Any = PrivateAttr(default=None)

    @property
    def tree(self) -> "SiteTree":
        if self._tree is None:
            raise LookupError(f"Node {self.id} is not attached to a site tree")
        return self._tree

    @property
    def parent(self) -> "CategoryNode | None":
        if self.parent_id is None:
            return None
        return self.tree.get(self.parent_id)

    @property
    def path(self) -> list["CategoryNode"]:
        """Ancestor categories from the root down to the direct parent."""
        return [self.tree.get(node_id) for node_id in self.path_ids]

    @property
    def toplevel(self) -> "CategoryNode":
        return self.tree.root

    @property
    def pkg(self) -> ProjectMetadata:
        return self.tree.pkg


class CategoryNode(SiteNode):
    """A source directory."""

    kind: Literal["category"] = "category"
    category_ids: list[int] = Field(default_factory=list)
    page_ids: list[int] = Field(default_factory=list)

    @property
    def categories(self) -> list["CategoryNode"]:
        return [self.tree.get(node_id) for node_id in self.category_ids]

    @property
    def pages(self) -> list["PageNode"]:
        return [self.tree.get(node_id) for node_id in self.page_ids]


class PageNode(SiteNode):
    """A single rendered source file."""

    kind: Literal["page"] = "page"
    index: bool = False
    content: str = ""


class SiteTree:
    """Arena holding every node of one build.

    The first node added is the root category and acts as ``toplevel`` for
    the whole tree. ``pkg`` is loaded once by the caller and shared.
    """

    def __init__(self, pkg: ProjectMetadata) -> None:
        self.pkg = pkg
        self._nodes: list[SiteNode] = []

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[SiteNode]:
        return iter(self._nodes)

    @property
    def next_id(self) -> int:
        return len(self._nodes)

    @property
    def root(self) -> CategoryNode:
        if not self._nodes:
            raise LookupError("Site tree is empty")
        root = self._nodes[0]
        if not isinstance(root, CategoryNode):
            raise TypeError(f"Site tree root must be a category, got {type(root).__name__}")
        return root

    @property
    def categories(self) -> list[CategoryNode]:
        return [node for node in self._nodes if isinstance(node, CategoryNode)]

    @property
    def pages(self) -> list[PageNode]:
        return [node for node in self._nodes if isinstance(node, PageNode)]

    def add(self, node: SiteNode) -> SiteNode:
        """Register ``node`` in the arena; its id must be ``next_id``."""
        if node.id != self.next_id:
            raise ValueError(f"Expected node id {self.next_id}, got {node.id}")
        node._tree = self
        self._nodes.append(node)
        return node

    def get(self, node_id: int) -> Any:
        return self._nodes[node_id]

    def dump(self) -> list[dict[str, Any]]:
        """Serialize every node to JSON-compatible dicts, in id order."""
        return [node.model_dump(mode="json") for node in self._nodes]
