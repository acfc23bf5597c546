"""Command-line entry point: build the documentation site in the current directory."""

from __future__ import annotations

import argparse
import asyncio
from pathlib import Path
from typing import Sequence

from mdsite.assets import copy_assets
from mdsite.config import (
    DOCS_IN_ENV,
    DOCS_OUT_ENV,
    LOG_LEVEL_ENV,
    PROJECT_FILE_ENV,
    STRICT_ASSETS_ENV,
    THEME_DIR_ENV,
    SiteSettings,
    load_settings,
)
from mdsite.metadata import load_project_metadata
from mdsite.renderer import MarkdownRenderer
from mdsite.schemas import SiteTree
from mdsite.templates import load_page_template
from mdsite.tree import BuildContext, build_site_tree
from mdsite.utils.logging_config import configure_logging, get_logger
from mdsite.writer import render_tree

logger = get_logger(__name__)


def build_site(settings: SiteSettings) -> SiteTree:
    """Build the site tree and write every page. Failures propagate."""
    context = BuildContext(
        source_dir=settings.source_dir,
        target_dir=settings.target_dir,
        pkg=load_project_metadata(settings.project_file),
        render_text=MarkdownRenderer(),
    )
    tree = build_site_tree(context)
    render_tree(tree.root, load_page_template(settings.theme_dir))
    return tree


def main(argv: Sequence[str] | None = None, *, cwd: Path | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="mdsite",
        description="Build a static HTML site from <docs>/md into <docs_out>.",
        epilog=(
            f"Configured through {DOCS_IN_ENV}, {DOCS_OUT_ENV}, {PROJECT_FILE_ENV}, "
            f"{THEME_DIR_ENV}, {STRICT_ASSETS_ENV} and {LOG_LEVEL_ENV}."
        ),
    )
    parser.parse_args(argv)

    settings = load_settings(cwd)
    configure_logging(settings.log_level)
    logger.info("Building %s -> %s", settings.source_dir, settings.target_dir)

    build_site(settings)

    completed = asyncio.run(
        copy_assets(
            static_dir=settings.static_dir,
            asset_dir=settings.asset_dir,
            target_dir=settings.target_dir,
            change_file=settings.change_file,
            strict=settings.strict_assets,
        )
    )
    if not completed:
        logger.warning("Site pages were written but assets are incomplete")
    return 0
