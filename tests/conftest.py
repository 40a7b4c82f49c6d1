"""Shared test fixtures for best tests."""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
import structlog

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def clean_logging() -> Generator[None]:
    """Reset logging configuration after each test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def temp_dir() -> Generator[Path]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_tree(temp_dir: Path) -> Path:
    """Create a small directory tree for listing tests.

    Layout:
        root/
        ├── Photo.JPG
        ├── notes.txt
        ├── photos/
        │   └── holiday.png
        └── zeta/
            └── deep/
                └── photo.jpg
    """
    root = temp_dir / "root"
    (root / "photos").mkdir(parents=True)
    (root / "zeta" / "deep").mkdir(parents=True)
    (root / "Photo.JPG").write_text("")
    (root / "notes.txt").write_text("")
    (root / "photos" / "holiday.png").write_text("")
    (root / "zeta" / "deep" / "photo.jpg").write_text("")
    return root
