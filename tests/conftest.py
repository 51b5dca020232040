"""Pytest configuration and shared fixtures."""

import os
from pathlib import Path
from typing import Iterator

import pytest

from urikit.config import reset_config


@pytest.fixture(autouse=True)
def reset_config_fixture() -> Iterator[None]:
    """Reset config singleton between tests for isolation."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def project_tree(tmp_path: Path) -> Path:
    """Create a small directory tree with files to point URIs at."""
    project_dir = tmp_path / "project"
    (project_dir / "docs").mkdir(parents=True)
    (project_dir / "docs" / "index.xml").write_text("<doc/>")
    (project_dir / "my notes.txt").write_text("notes")
    return project_dir


@pytest.fixture
def symlinked_tree(project_tree: Path) -> Path:
    """Return a symlink pointing at project_tree."""
    link = project_tree.parent / "link"
    try:
        link.symlink_to(project_tree, target_is_directory=True)
    except OSError:
        # Symlink creation might fail on some systems (e.g., Windows without admin)
        pytest.skip("Symlink creation not supported")
    return link


@pytest.fixture
def set_env_vars():
    """Fixture to temporarily set environment variables."""

    def _set_env_vars(**kwargs: str) -> None:
        for key, value in kwargs.items():
            os.environ[key] = value

    yield _set_env_vars

    # Cleanup: remove all URIKIT_ env vars
    keys_to_remove = [key for key in os.environ if key.startswith("URIKIT_")]
    for key in keys_to_remove:
        del os.environ[key]
