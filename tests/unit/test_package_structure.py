"""Smoke tests for package structure and basic contracts.

These tests run in pre-commit hooks to catch structural issues quickly.
"""

from __future__ import annotations

import importlib.metadata
from pathlib import Path

import pytest


def _installed_version() -> str:
    try:
        return importlib.metadata.version("shortcheck")
    except importlib.metadata.PackageNotFoundError:
        pytest.skip("shortcheck distribution not installed")


@pytest.mark.smoke
def test_package_metadata_accessible() -> None:
    """Verify the installed distribution exposes a version."""
    assert _installed_version()


@pytest.mark.smoke
def test_version_matches_metadata() -> None:
    import shortcheck

    assert shortcheck.__version__ == _installed_version()


@pytest.mark.smoke
@pytest.mark.parametrize("subpackage", ["generators", "utils"])
def test_src_directory_structure(subpackage: str) -> None:
    """Verify the src/ layout and its subpackages exist."""
    project_root = Path(__file__).parent.parent.parent
    src_dir = project_root / "src" / "shortcheck"
    assert (src_dir / "__init__.py").exists(), f"Package __init__.py not found in {src_dir}"
    assert (src_dir / subpackage / "__init__.py").exists(), f"Subpackage {subpackage!r} missing"
