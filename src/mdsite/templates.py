"""Theme loading and page templating with Jinja2."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Mapping

from jinja2 import (
    ChoiceLoader,
    DictLoader,
    Environment,
    FileSystemLoader,
    TemplateError,
    select_autoescape,
)

from mdsite.exceptions import RenderError
from mdsite.helpers import HELPERS
from mdsite.schemas import PageNode

PAGE_TEMPLATE = "page.html"
PARTIALS_DIR = "partials"

PageTemplate = Callable[[PageNode], str]


def load_partials(partials_dir: Path) -> dict[str, str]:
    """Map each file in ``partials_dir`` to its source, keyed by file stem."""
    if not partials_dir.is_dir():
        return {}
    return {
        path.stem: path.read_text(encoding="utf-8")
        for path in sorted(partials_dir.iterdir())
        if path.is_file()
    }


def create_environment(
    templates_dir: Path,
    *,
    helpers: Mapping[str, Callable[..., Any]] = HELPERS,
) -> Environment:
    """Create the Jinja environment for a theme's ``templates`` directory.

    Partials can be included by stem (``{% include "nav" %}``) as well as by
    relative path. Every helper is registered as both a filter and a global.
    """
    env = Environment(
        loader=ChoiceLoader(
            [
                FileSystemLoader(str(templates_dir)),
                DictLoader(load_partials(templates_dir / PARTIALS_DIR)),
            ]
        ),
        autoescape=select_autoescape(["html"], default=True),
        keep_trailing_newline=True,
    )
    env.filters.update(helpers)
    env.globals.update(helpers)
    return env


def load_page_template(theme_dir: Path) -> PageTemplate:
    """Compile the theme's page template into a ``page -> html`` callable."""
    env = create_environment(theme_dir / "templates")
    template = env.get_template(PAGE_TEMPLATE)

    def render(page: PageNode) -> str:
        try:
            return template.render(page=page, toplevel=page.toplevel, pkg=page.pkg)
        except TemplateError as exc:
            raise RenderError(f"Failed to render {page.source}: {exc}") from exc

    return render
