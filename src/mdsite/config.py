"""Local configuration for mdsite."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping


DEFAULT_DOCS_IN = "docs"
DEFAULT_DOCS_OUT = "docs_out"
DEFAULT_PROJECT_FILE = "pyproject.toml"
DEFAULT_THEME_DIR = Path(__file__).resolve().parent / "theme"
DEFAULT_LOG_LEVEL = "INFO"

DOCS_IN_ENV = "MDSITE_DOCS_IN"
DOCS_OUT_ENV = "MDSITE_DOCS_OUT"
PROJECT_FILE_ENV = "MDSITE_PROJECT_FILE"
THEME_DIR_ENV = "MDSITE_THEME_DIR"
STRICT_ASSETS_ENV = "MDSITE_STRICT_ASSETS"
LOG_LEVEL_ENV = "MDSITE_LOG_LEVEL"

SOURCE_SUBDIR = "md"
ASSET_SUBDIR = "assets"
CHANGE_FILE_NAME = "change"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class SiteSettings:
    """Resolved filesystem layout and switches for one build.

    Attributes:
        docs_dir: Input root holding the ``md`` and ``assets`` directories.
        target_dir: Output root written by the build.
        project_file: File providing the shared project metadata.
        theme_dir: Theme root with ``templates`` and ``static``.
        strict_assets: If True, asset pipeline failures abort with an error.
        log_level: Level name passed to the logging configuration.
    """

    docs_dir: Path
    target_dir: Path
    project_file: Path
    theme_dir: Path = DEFAULT_THEME_DIR
    strict_assets: bool = False
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def source_dir(self) -> Path:
        return self.docs_dir / SOURCE_SUBDIR

    @property
    def asset_dir(self) -> Path:
        return self.docs_dir / ASSET_SUBDIR

    @property
    def change_file(self) -> Path:
        return self.target_dir / CHANGE_FILE_NAME

    @property
    def static_dir(self) -> Path:
        return self.theme_dir / "static"


def load_settings(
    cwd: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> SiteSettings:
    """Build settings from environment variables, relative to ``cwd``."""
    base = Path(cwd) if cwd is not None else Path.cwd()
    env = os.environ if environ is None else environ

    theme_dir = env.get(THEME_DIR_ENV)
    return SiteSettings(
        docs_dir=(base / env.get(DOCS_IN_ENV, DEFAULT_DOCS_IN)).resolve(),
        target_dir=(base / env.get(DOCS_OUT_ENV, DEFAULT_DOCS_OUT)).resolve(),
        project_file=(base / env.get(PROJECT_FILE_ENV, DEFAULT_PROJECT_FILE)).resolve(),
        theme_dir=(base / theme_dir).resolve() if theme_dir else DEFAULT_THEME_DIR,
        strict_assets=env.get(STRICT_ASSETS_ENV, "").strip().lower() in _TRUE_VALUES,
        log_level=env.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper(),
    )
