"""Slug derivation for source paths."""

from __future__ import annotations

import os
from typing import Callable

from markdown.extensions.toc import slugify

MARKDOWN_EXTENSION = ".md"
HTML_EXTENSION = ".html"
URL_SEPARATOR = "/"

Slugger = Callable[[str], str]


def slugify_segment(segment: str) -> str:
    """Normalize one path segment into a URL-safe lowercase token.

    Accents are folded to ASCII, characters other than word characters,
    whitespace and hyphens are dropped, and runs of whitespace or hyphens
    collapse to a single ``-``. Distinct names can collide: ``"My Notes"``
    and ``"my  notes"`` both become ``"my-notes"``; the later one written
    wins.
    """
    return slugify(segment, "-")


def resolve_slug_path(relative_path: str | os.PathLike[str], slugger: Slugger = slugify_segment) -> str:
    """Convert a path relative to the source root into its output slug path.

    Every directory segment is slugged on its own, so directory boundaries
    survive. A ``.md`` extension becomes ``.html``; other extensions are kept.
    The result is lowercase, ``/``-separated, and ``""`` for the root itself.
    """
    directory, name = os.path.split(os.fspath(relative_path))
    stem, extension = os.path.splitext(name)

    parts = []
    for segment in os.path.normpath(directory).split(os.sep):
        if segment in ("", os.curdir):
            continue
        slugged = slugger(segment)
        if slugged:
            parts.append(slugged)

    if extension == MARKDOWN_EXTENSION:
        extension = HTML_EXTENSION
    base = slugger(stem) + extension if stem else extension
    if base:
        parts.append(base)

    return URL_SEPARATOR.join(parts).lower()
