"""Tests for CLI interface."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from backup_selector.app.cli import build_options, cli
from backup_selector.config import AppConfig
from backup_selector.core.options import FilterMode, SelectionDefaults

from tests.fixtures.filesystem import TreeFactory, ZipFactory

pytestmark = pytest.mark.usefixtures("restore_root_logger")


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click test runner."""
    return CliRunner()


def listed_names(output: str) -> list[str]:
    """Extract the listed item names from CLI output, dropping the summary line."""
    lines = [line for line in output.splitlines() if line.strip()]
    return [line.split("  ")[-1].replace("\\", "/").rsplit("/", 1)[-1] for line in lines[:-1]]


class TestCLIBasicFunctionality:
    """Test basic CLI functionality."""

    def test_cli_help_command(self, runner: CliRunner) -> None:
        """Test CLI help command displays correctly."""
        result = runner.invoke(cli, ['--help'])

        assert result.exit_code == 0
        assert 'List the files of ROOT' in result.output
        for option in ('--archive', '--recursive', '--extensions', '--exclude', '--size-limit', '--count-limit'):
            assert option in result.output

    def test_cli_version_command(self, runner: CliRunner) -> None:
        """Test CLI version command displays correctly."""
        result = runner.invoke(cli, ['--version'])

        assert result.exit_code == 0
        assert 'version' in result.output.lower()

    def test_directory_listing(self, runner: CliRunner, make_tree: TreeFactory) -> None:
        """Test the include filter example end to end."""
        root = make_tree({"x.log": 50, "y.txt": 20})

        result = runner.invoke(cli, [str(root), '--extensions', '.txt'])

        assert result.exit_code == 0, result.output
        assert listed_names(result.stdout) == ["y.txt"]
        assert "1 file(s) selected, 20 Bytes total" in result.stdout

    def test_recursive_exclude(self, runner: CliRunner, make_tree: TreeFactory) -> None:
        """Test recursion and exclude mode flags."""
        root = make_tree({"a.txt": 1, "sub/b.log": 1, "sub/c.txt": 1})

        result = runner.invoke(cli, [str(root), '-r', '-e', '.TXT', '--exclude'])

        assert result.exit_code == 0, result.output
        assert listed_names(result.stdout) == ["b.log"]

    def test_archive_with_limits(self, runner: CliRunner, make_zip: ZipFactory) -> None:
        """Test archive mode with size and count limits."""
        archive = make_zip({"big.bin": 4096, "a.bin": 10, "b.bin": 10, "c.bin": 10})

        result = runner.invoke(cli, [str(archive), '--archive', '--size-limit', '1K', '--count-limit', '2'])

        assert result.exit_code == 0, result.output
        assert listed_names(result.stdout) == ["a.bin", "b.bin"]
        assert "2 file(s) selected, 20 Bytes total" in result.stdout

    def test_missing_root_fails(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test a missing root exits with an error."""
        result = runner.invoke(cli, [str(tmp_path / "missing")])

        assert result.exit_code == 1
        assert "Root directory not found" in result.output

    def test_corrupt_archive_fails(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test a corrupt archive exits with an error."""
        bogus = tmp_path / "bogus.zip"
        _ = bogus.write_bytes(b"nope")

        result = runner.invoke(cli, [str(bogus), '--archive'])

        assert result.exit_code == 1
        assert "not a valid zip archive" in result.output

    def test_invalid_size_limit(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test a malformed size is a usage error."""
        result = runner.invoke(cli, [str(tmp_path), '--size-limit', 'huge'])

        assert result.exit_code == 2
        assert "Invalid size" in result.output

    def test_invalid_log_level(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test an unknown log level is a usage error."""
        result = runner.invoke(cli, [str(tmp_path), '--log-level', 'LOUD'])

        assert result.exit_code == 2
        assert "Invalid log level" in result.output

    def test_root_required_without_config(self, runner: CliRunner) -> None:
        """Test ROOT must come from somewhere."""
        result = runner.invoke(cli, [])

        assert result.exit_code == 2
        assert "ROOT is required" in result.output

    def test_config_file_supplies_options(self, runner: CliRunner, make_tree: TreeFactory, tmp_path: Path) -> None:
        """Test selection options are read from the configuration file."""
        root = make_tree({"a.txt": 1, "b.md": 1, "sub/c.txt": 1})
        config_path = tmp_path / "config.yaml"
        _ = config_path.write_text(
            f"selection:\n  root: {root.as_posix()}\n  include_subfolders: true\n  extension_filters: .txt\n"
        )

        result = runner.invoke(cli, ['--config', str(config_path)])

        assert result.exit_code == 0, result.output
        assert listed_names(result.stdout) == ["c.txt", "a.txt"]

    def test_cli_flags_override_config(self, runner: CliRunner, make_tree: TreeFactory, tmp_path: Path) -> None:
        """Test command-line flags take precedence over the configuration file."""
        root = make_tree({"a.txt": 1, "b.md": 1, "sub/c.txt": 1})
        config_path = tmp_path / "config.yaml"
        _ = config_path.write_text("selection:\n  root: /nowhere\n  include_subfolders: true\n  extension_filters: .txt\n")

        result = runner.invoke(cli, [str(root), '--config', str(config_path), '--no-recursive', '-e', ''])

        assert result.exit_code == 0, result.output
        assert listed_names(result.stdout) == ["a.txt", "b.md"]

    def test_config_without_root_uses_cli_root(
        self, runner: CliRunner, make_tree: TreeFactory, tmp_path: Path
    ) -> None:
        """Test configured filters apply when only the command line names ROOT."""
        root = make_tree({"a.txt": 1, "b.md": 1, "sub/c.txt": 1})
        config_path = tmp_path / "config.yaml"
        _ = config_path.write_text("selection:\n  include_subfolders: true\n  extension_filters: .txt\n")

        result = runner.invoke(cli, [str(root), "--config", str(config_path)])

        assert result.exit_code == 0, result.output
        assert listed_names(result.stdout) == ["c.txt", "a.txt"]

    def test_config_without_root_still_needs_root(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test a rootless configuration without ROOT is a usage error."""
        config_path = tmp_path / "config.yaml"
        _ = config_path.write_text("selection:\n  extension_filters: .txt\n")

        result = runner.invoke(cli, ["--config", str(config_path)])

        assert result.exit_code == 2
        assert "ROOT is required" in result.output

    def test_critical_log_level_accepted(self, runner: CliRunner, make_tree: TreeFactory) -> None:
        """Test every level the configuration file accepts is accepted on the command line."""
        root = make_tree({"a.txt": 1})

        result = runner.invoke(cli, [str(root), "--log-level", "critical"])

        assert result.exit_code == 0, result.output
        assert listed_names(result.stdout) == ["a.txt"]

    def test_broken_config_fails(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test configuration errors are reported."""
        config_path = tmp_path / "config.yaml"
        _ = config_path.write_text("- not\n- a mapping\n")

        result = runner.invoke(cli, [str(tmp_path), '--config', str(config_path)])

        assert result.exit_code == 1
        assert "Expected YAML dictionary" in result.output


class TestBuildOptions:
    """Test merging of configuration and command-line options."""

    def test_overrides_ignore_none(self) -> None:
        """Test unset command-line values keep configuration values."""
        config = AppConfig(selection=SelectionDefaults(root=Path("/cfg"), count_limit=7, filter_mode=FilterMode.EXCLUDE))

        options = build_options(config, Path("/cli"), {"count_limit": None, "size_limit": 10})

        assert options.root == Path("/cli")
        assert options.count_limit == 7
        assert options.size_limit == 10
        assert options.filter_mode is FilterMode.EXCLUDE

    def test_rootless_defaults_take_cli_root(self) -> None:
        """Test configuration defaults without a root merge with the command-line root."""
        config = AppConfig(selection=SelectionDefaults(extension_filters=".txt", include_subfolders=True))

        options = build_options(config, Path("/cli"), {"extension_filters": None})

        assert options.root == Path("/cli")
        assert options.extension_filters == (".txt",)
        assert options.include_subfolders is True
