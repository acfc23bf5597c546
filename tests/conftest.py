"""Test setup for mdsite."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Iterable

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from mdsite.schemas import ProjectMetadata  # noqa: E402
from mdsite.tree import BuildContext  # noqa: E402


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for pytest.

    This allows running the end-to-end builds selectively:
        pytest -m integration       # run only full CLI builds
        pytest -m "not integration" # skip them
    """
    config.addinivalue_line(
        "markers",
        "integration: marks tests that run a full site build through the CLI",
    )


def fake_render_text(text: str) -> str:
    """Stand-in text renderer that keeps page content easy to assert on."""
    return f"<p>{text.strip()}</p>"


@pytest.fixture
def pkg() -> ProjectMetadata:
    """Project metadata shared by a test build."""
    return ProjectMetadata(name="demo", version="1.0.0", description="Demo docs")


@pytest.fixture
def make_source(tmp_path: Path) -> Callable[..., Path]:
    """Create a Markdown source tree under ``tmp_path/md``.

    Files are given as ``{relative_path: text}``; extra empty directories as
    relative paths.
    """

    def _make(files: dict[str, str], dirs: Iterable[str] = ()) -> Path:
        source = tmp_path / "md"
        source.mkdir(exist_ok=True)
        for relative, text in files.items():
            path = source / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        for relative in dirs:
            (source / relative).mkdir(parents=True, exist_ok=True)
        return source

    return _make


@pytest.fixture
def make_context(tmp_path: Path, pkg: ProjectMetadata) -> Callable[[Path], BuildContext]:
    """Build contexts writing to ``tmp_path/out`` with the fake text renderer."""

    def _make(source_dir: Path) -> BuildContext:
        return BuildContext(
            source_dir=source_dir,
            target_dir=tmp_path / "out",
            pkg=pkg,
            render_text=fake_render_text,
        )

    return _make


@pytest.fixture
def example_source(make_source: Callable[..., Path]) -> Path:
    """Root index plus a ``guide`` category with an index and one page."""
    return make_source(
        {
            "index.md": "# Home",
            "guide/index.md": "# Guide",
            "guide/setup.md": "# Setup",
        }
    )
