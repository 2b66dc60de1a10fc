"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest
from helpers import FaultyPrimitives, RecordingSink


@pytest.fixture
def sink() -> RecordingSink:
    """Recording diagnostics sink."""
    return RecordingSink()


@pytest.fixture
def faulty() -> FaultyPrimitives:
    """Primitives with no failures configured yet."""
    return FaultyPrimitives()


@pytest.fixture
def mixed_tree(tmp_path: Path) -> tuple[Path, Path]:
    """Build root/{a.txt, b/{c.txt}, d -> outside} and return (root, outside).

    ``outside`` is a directory with one file, living next to ``root``.
    """
    outside = tmp_path / "outside"
    outside.mkdir()
    (outside / "keep.txt").write_text("keep")

    root = tmp_path / "root"
    root.mkdir()
    (root / "a.txt").write_text("a")
    (root / "b").mkdir()
    (root / "b" / "c.txt").write_text("c")
    (root / "d").symlink_to(outside)
    return root, outside
