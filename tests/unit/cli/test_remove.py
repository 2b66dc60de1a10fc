"""Unit tests for the remove command."""

from pathlib import Path
from unittest.mock import MagicMock, patch

from clonectl.cli.main import app
from clonectl.removal import ErrorKind, FinalizeError, ListingError
from typer.testing import CliRunner

runner = CliRunner()


def _flat(text: str) -> str:
    """Collapse Rich line wrapping so phrases can be matched."""
    return " ".join(text.split())


class TestRemoveCommand:
    """Tests for clonectl remove."""

    def test_removes_with_yes(self, mixed_tree: tuple[Path, Path]) -> None:
        """--yes removes without prompting."""
        root, outside = mixed_tree

        result = runner.invoke(app, ["remove", "--yes", str(root)])

        assert result.exit_code == 0
        assert not root.exists()
        assert outside.exists()
        assert "Removed" in result.stdout
        assert "3 removed" in _flat(result.stdout)

    def test_prompt_declined(self, mixed_tree: tuple[Path, Path]) -> None:
        """Declining the prompt leaves everything in place."""
        root, _ = mixed_tree

        result = runner.invoke(app, ["remove", str(root)], input="n\n")

        assert result.exit_code == 0
        assert "Aborted" in result.stdout
        assert root.exists()

    def test_prompt_accepted(self, mixed_tree: tuple[Path, Path]) -> None:
        """Accepting the prompt removes the path."""
        root, _ = mixed_tree

        result = runner.invoke(app, ["remove", str(root)], input="y\n")

        assert result.exit_code == 0
        assert not root.exists()

    def test_missing_path(self, tmp_path: Path) -> None:
        """A missing path is reported, not an error."""
        result = runner.invoke(app, ["remove", "-y", str(tmp_path / "missing")])

        assert result.exit_code == 0
        assert "nothing to remove" in _flat(result.stdout)

    def test_details_table(self, mixed_tree: tuple[Path, Path]) -> None:
        """--details prints the per-leaf table."""
        root, _ = mixed_tree

        result = runner.invoke(app, ["remove", "-y", "--details", str(root)])

        assert result.exit_code == 0
        assert "Removal of" in _flat(result.stdout)

    def test_dry_run_deletes_nothing(self, mixed_tree: tuple[Path, Path]) -> None:
        """--dry-run lists top-level entries and leaves them alone."""
        root, _ = mixed_tree

        result = runner.invoke(app, ["remove", "--dry-run", str(root)])

        assert result.exit_code == 0
        assert "Dry Run" in _flat(result.stdout)
        assert "symlink" in result.stdout
        assert (root / "a.txt").exists()

    def test_dry_run_missing(self, tmp_path: Path) -> None:
        """--dry-run on a missing path says so."""
        result = runner.invoke(app, ["remove", "--dry-run", str(tmp_path / "missing")])

        assert result.exit_code == 0
        assert "does not exist" in _flat(result.stdout)

    def test_listing_error_exits_1(self, tmp_path: Path) -> None:
        """A ListingError is reported and exits with code 1."""
        mock_remover = MagicMock()
        mock_remover.remove.side_effect = ListingError(
            "Cannot list directory /x: permission_denied",
            path="/x",
            kind=ErrorKind.PERMISSION_DENIED,
        )

        with patch("clonectl.cli.commands.remove.Remover", return_value=mock_remover):
            result = runner.invoke(app, ["remove", "-y", "/x"])

        assert result.exit_code == 1
        assert "Could not enumerate" in result.output

    def test_finalize_error_exits_1(self, tmp_path: Path) -> None:
        """A FinalizeError is reported distinctly and exits with code 1."""
        mock_remover = MagicMock()
        mock_remover.remove.side_effect = FinalizeError(
            "Cannot guarantee removal of /x", path="/x", kind=ErrorKind.BUSY
        )

        with patch("clonectl.cli.commands.remove.Remover", return_value=mock_remover):
            result = runner.invoke(app, ["remove", "-y", "/x"])

        assert result.exit_code == 1
        assert "Could not destroy" in result.output

    def test_continues_after_failure(self, tmp_path: Path) -> None:
        """One failing path does not stop the others."""
        good = tmp_path / "good"
        good.mkdir()
        bad = tmp_path / "bad.txt"
        bad.write_text("not a directory")

        result = runner.invoke(app, ["remove", "-y", str(bad), str(good)])

        assert result.exit_code == 1
        assert not good.exists()
        assert bad.exists()
