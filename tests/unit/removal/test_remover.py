"""Unit tests for the removal orchestrator.

Exercises the end-to-end properties: no-op on absence, postcondition,
idempotence, depth tolerance, and error propagation.
"""

import os
import stat
import sys
from pathlib import Path

import pytest
from clonectl.removal import (
    ErrorKind,
    FinalizeError,
    ListingError,
    PathProbe,
    Remover,
    remove,
)
from helpers import FaultyPrimitives, RecordingSink


RUNNING_AS_ROOT = hasattr(os, "geteuid") and os.geteuid() == 0


def _build_tree(root: Path, depth: int, outside: Path) -> None:
    """Build a chain of ``depth`` nested directories with mixed content."""
    current = root
    current.mkdir()
    for level in range(depth):
        (current / f"file{level}.txt").write_text(str(level))
        (current / f"empty{level}").mkdir()
        (current / f"link{level}").symlink_to(outside)
        current = current / f"level{level}"
        current.mkdir()


class TestRemove:
    """Tests for Remover.remove and remove()."""

    def test_missing_target_is_noop(self, tmp_path: Path, faulty: FaultyPrimitives) -> None:
        """A missing target is success and only probed."""
        report = remove(tmp_path / "missing", primitives=faulty)

        assert report.existed is False
        assert report.leaf_count == 0
        assert {op for op, _ in faulty.calls} == {"realpath"}

    def test_mixed_content(
        self, mixed_tree: tuple[Path, Path], faulty: FaultyPrimitives, sink: RecordingSink
    ) -> None:
        """root/{a.txt, b/{c.txt}, d -> outside} is removed; outside survives."""
        root, outside = mixed_tree

        report = remove(root, sink=sink, primitives=faulty)

        assert report.existed is True
        assert not root.exists()
        assert not root.is_symlink()
        assert (outside / "keep.txt").read_text() == "keep"
        assert len(report.removed) == 3
        assert faulty.count("force_remove_tree") == 1
        assert faulty.calls[-1] == ("force_remove_tree", str(root))

    def test_postcondition(self, mixed_tree: tuple[Path, Path]) -> None:
        """After a successful remove the target no longer probes as existing."""
        root, _ = mixed_tree

        remove(root)

        assert PathProbe().exists(str(root)) is False

    def test_idempotent(self, mixed_tree: tuple[Path, Path]) -> None:
        """Removing twice never fails and leaves the same end state."""
        root, _ = mixed_tree

        first = remove(root)
        second = remove(root)

        assert first.existed is True
        assert second.existed is False
        assert not root.exists()

    @pytest.mark.parametrize("depth", [0, 1, 5, 40])
    def test_depth_tolerance(self, tmp_path: Path, depth: int) -> None:
        """Trees of any depth with files, empty dirs and links are removed."""
        outside = tmp_path / "outside"
        outside.mkdir()
        root = tmp_path / "root"
        _build_tree(root, depth, outside)

        report = remove(root)

        assert not root.exists()
        assert outside.exists()
        assert len(report.removed) == 2 * depth

    def test_deeper_than_recursion_limit(self, tmp_path: Path) -> None:
        """Nesting deeper than the interpreter's recursion limit is removed."""
        root = tmp_path / "root"
        depth = 350
        current = root
        for _ in range(depth):
            current.mkdir()
            (current / "f").write_text("x")
            current = current / "d"

        previous = sys.getrecursionlimit()
        sys.setrecursionlimit(300)
        try:
            assert depth > sys.getrecursionlimit()
            report = remove(root)
        finally:
            sys.setrecursionlimit(previous)

        assert not root.exists()
        assert len(report.removed) == depth

    @pytest.mark.skipif(RUNNING_AS_ROOT, reason="root ignores permission bits")
    def test_parent_permissions_untouched(self, tmp_path: Path) -> None:
        """A read-only parent is never widened; the purge reports the failure."""
        parent = tmp_path / "parent"
        dest = parent / "dest"
        dest.mkdir(parents=True)
        (dest / "f").write_text("x")
        parent.chmod(0o555)

        try:
            with pytest.raises(FinalizeError) as exc_info:
                remove(dest)
            mode = stat.S_IMODE(parent.stat().st_mode)
        finally:
            parent.chmod(0o755)

        assert mode == 0o555
        assert exc_info.value.kind == ErrorKind.PERMISSION_DENIED
        assert not (dest / "f").exists()

    def test_single_file_target(self, tmp_path: Path) -> None:
        """A target that is a plain file cannot be listed."""
        f = tmp_path / "f"
        f.write_text("x")

        with pytest.raises(ListingError) as exc_info:
            remove(f)

        assert exc_info.value.kind == ErrorKind.NOT_A_DIRECTORY

    def test_leaf_retry(self, mixed_tree: tuple[Path, Path], faulty: FaultyPrimitives) -> None:
        """A leaf denied once is force-removed and no error is raised."""
        root, _ = mixed_tree
        faulty.fail("unlink", root / "a.txt", ErrorKind.PERMISSION_DENIED)

        report = remove(root, primitives=faulty)

        assert report.retried == [str(root / "a.txt")]
        assert not root.exists()

    def test_warnings_do_not_abort(
        self, mixed_tree: tuple[Path, Path], faulty: FaultyPrimitives
    ) -> None:
        """Leaf failures are compensated for by the purge."""
        root, _ = mixed_tree
        faulty.fail("unlink", root / "b" / "c.txt", ErrorKind.OTHER)

        report = remove(root, primitives=faulty)

        assert len(report.warnings) == 1
        assert report.success is False
        assert not root.exists()

    def test_top_level_listing_failure_propagates(
        self, mixed_tree: tuple[Path, Path], faulty: FaultyPrimitives
    ) -> None:
        """An unlistable target raises ListingError and is not purged."""
        root, _ = mixed_tree
        faulty.fail("scandir", str(root), ErrorKind.PERMISSION_DENIED)

        with pytest.raises(ListingError) as exc_info:
            remove(root, primitives=faulty)

        assert exc_info.value.kind == ErrorKind.PERMISSION_DENIED
        assert faulty.count("force_remove_tree") == 0
        assert root.exists()

    def test_finalize_failure_propagates(
        self, mixed_tree: tuple[Path, Path], faulty: FaultyPrimitives
    ) -> None:
        """A purge failure raises FinalizeError after the walk."""
        root, _ = mixed_tree
        faulty.fail("force_remove_tree", str(root), ErrorKind.BUSY)

        with pytest.raises(FinalizeError) as exc_info:
            remove(root, primitives=faulty)

        assert exc_info.value.kind == ErrorKind.BUSY
        assert not (root / "a.txt").exists()

    def test_phase_lines_reported(
        self, mixed_tree: tuple[Path, Path], sink: RecordingSink
    ) -> None:
        """Phase transitions reach the sink."""
        root, _ = mixed_tree

        remove(root, sink=sink)

        info = sink.messages("info")
        assert any("Pre-existing directory found" in line for line in info)
        assert any(line.startswith("Purging") for line in sink.messages("debug"))

    def test_accepts_logger_as_sink(self, mixed_tree: tuple[Path, Path]) -> None:
        """A stdlib logger is a valid diagnostics sink."""
        import logging

        root, _ = mixed_tree

        remove(root, sink=logging.getLogger("clonectl.test"))

        assert not root.exists()


class TestPlan:
    """Tests for Remover.plan."""

    def test_plan_lists_without_deleting(self, mixed_tree: tuple[Path, Path]) -> None:
        """plan returns top-level entries and touches nothing."""
        root, _ = mixed_tree

        entries = Remover().plan(root)

        assert {e.name for e in entries} == {"a.txt", "b", "d"}
        assert (root / "a.txt").exists()

    def test_plan_missing_target(self, tmp_path: Path) -> None:
        """plan on a missing target is empty."""
        assert Remover().plan(tmp_path / "missing") == []
