"""Test module imports and package functionality."""

from __future__ import annotations

from types import ModuleType


class TestCoreImports:
    """Test that core modules can be imported successfully."""

    def test_import_main_package(self) -> None:
        """Test that main package can be imported."""
        import backup_selector

        assert isinstance(backup_selector, ModuleType)

    def test_import_submodules(self) -> None:
        """Test that every subpackage can be imported."""
        import backup_selector.app
        import backup_selector.config
        import backup_selector.core
        import backup_selector.core.data.archive
        import backup_selector.core.data.filesystem
        import backup_selector.exceptions
        import backup_selector.types
        import backup_selector.utils.formatting
        import backup_selector.utils.logging

        assert backup_selector.core.data.archive.ArchiveReader is not None
        assert backup_selector.core.data.filesystem.DirectoryScanner is not None

    def test_public_api(self) -> None:
        """Test that the package re-exports its public API."""
        import backup_selector

        for name in backup_selector.__all__:
            assert hasattr(backup_selector, name), name

    def test_exception_hierarchy(self) -> None:
        """Test that scan source errors share the package base exception."""
        from backup_selector.exceptions import (
            BackupSelectorError,
            ConfigurationError,
            InvalidArchiveError,
            ScanSourceError,
            SourceNotFoundError,
        )

        assert issubclass(SourceNotFoundError, ScanSourceError)
        assert issubclass(InvalidArchiveError, ScanSourceError)
        assert issubclass(ScanSourceError, BackupSelectorError)
        assert issubclass(ConfigurationError, BackupSelectorError)
