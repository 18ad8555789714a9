"""Shared pytest fixtures for the projstarter test suite.

Provides:
- Generators bound to a temporary output directory
- A frozen calendar year for license rendering
- Helpers to snapshot a directory tree
"""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from projstarter.scaffolder import GoGenerator, ViteElmGenerator


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Empty directory that generated projects are written into."""
    out = tmp_path / "workspace"
    out.mkdir()
    return out


@pytest.fixture(autouse=True)
def _clean_proj_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's PROJ_* variables out of the tests."""
    monkeypatch.delenv("PROJ_OUTPUT_DIR", raising=False)
    monkeypatch.delenv("PROJ_QUIET", raising=False)


# ---------------------------------------------------------------------------
# Generators
# ---------------------------------------------------------------------------

@pytest.fixture
def go_generator(output_dir: Path) -> GoGenerator:
    return GoGenerator(output_dir=output_dir)


@pytest.fixture
def vite_elm_generator(output_dir: Path) -> ViteElmGenerator:
    return ViteElmGenerator(output_dir=output_dir)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

@pytest.fixture
def current_year() -> int:
    return date.today().year


def snapshot_tree(root: Path) -> set[str]:
    """Return every path under *root* as a POSIX string relative to it."""
    return {p.relative_to(root).as_posix() for p in root.rglob("*")}


@pytest.fixture
def tree_snapshot():
    """Expose :func:`snapshot_tree` to tests without importing conftest."""
    return snapshot_tree
