"""Directory scanner for backup candidate discovery."""

from __future__ import annotations

import errno
import logging
import os
from collections.abc import Iterator
from pathlib import Path

from backup_selector.exceptions import ScanSourceError, SourceNotFoundError

logger = logging.getLogger(__name__)


def is_tolerated_error(exc: OSError) -> bool:
    """Check whether a subdirectory failure should be treated as an empty subtree.

    Args:
        exc: Error raised while listing a subdirectory

    Returns:
        True for access-denied and path-too-long conditions, False otherwise
    """
    return isinstance(exc, PermissionError) or exc.errno == errno.ENAMETOOLONG


class DirectoryScanner:
    """Scanner for traversing directory trees with per-subtree failure tolerance.

    Provides lazy directory traversal with support for:
    - Optional recursion (depth-first, subdirectories before own files)
    - Deterministic order (entries sorted by name)
    - Access-denied and path-too-long subdirectories skipped as empty
    - Configurable symlink handling with loop detection

    Failures on the root directory are never tolerated.
    """

    def __init__(self, recursive: bool = False, follow_symlinks: bool = False) -> None:
        """Initialize the directory scanner.

        Args:
            recursive: Whether to descend into subdirectories
            follow_symlinks: Whether to descend into symlinked directories
        """
        self.recursive: bool = recursive
        self.follow_symlinks: bool = follow_symlinks

    def scan_directory(self, path: Path) -> Iterator[Path]:
        """Yield files in the directory tree.

        Args:
            path: Root directory to scan

        Yields:
            Path objects for all files found

        Raises:
            SourceNotFoundError: If the root does not exist or is not a directory
            ScanSourceError: If the root cannot be listed
        """
        try:
            subdirectories, files = self._list_directory(path)
        except FileNotFoundError as exc:
            raise SourceNotFoundError(f"Root directory not found: {path}", source=str(path)) from exc
        except NotADirectoryError as exc:
            raise SourceNotFoundError(f"Root is not a directory: {path}", source=str(path)) from exc
        except OSError as exc:
            raise ScanSourceError(f"Cannot read root directory {path}: {exc}", source=str(path)) from exc

        # Track visited paths to detect symlink loops
        visited_paths: set[str] = {os.path.realpath(path)}

        if self.recursive:
            for subdirectory in subdirectories:
                yield from self._scan_subdirectory(subdirectory, visited_paths)
        yield from files

    def _scan_subdirectory(self, path: Path, visited_paths: set[str]) -> Iterator[Path]:
        """Perform depth-first traversal of a subdirectory.

        Args:
            path: Directory path to scan
            visited_paths: Set of visited real paths to detect symlink loops

        Yields:
            Path objects for all files found
        """
        if not self._should_enter(path, visited_paths):
            return

        try:
            subdirectories, files = self._list_directory(path)
        except OSError as exc:
            if not is_tolerated_error(exc):
                raise
            logger.debug(
                "Skipping unreadable subdirectory",
                extra={"path": str(path), "error": exc.strerror},
            )
            return

        for subdirectory in subdirectories:
            yield from self._scan_subdirectory(subdirectory, visited_paths)
        yield from files

    def _list_directory(self, path: Path) -> tuple[list[Path], list[Path]]:
        """List the immediate subdirectories and files of a directory.

        The listing is materialized so that errors surface here and not
        halfway through the caller's iteration.

        Args:
            path: Directory to list

        Returns:
            Tuple of (subdirectories, files), each sorted by name
        """
        subdirectories: list[Path] = []
        files: list[Path] = []

        with os.scandir(path) as entries:
            for entry in entries:
                if entry.is_dir(follow_symlinks=True):
                    subdirectories.append(Path(entry.path))
                elif entry.is_file(follow_symlinks=True):
                    files.append(Path(entry.path))

        subdirectories.sort(key=lambda p: p.name)
        files.sort(key=lambda p: p.name)
        return subdirectories, files

    def _should_enter(self, path: Path, visited_paths: set[str]) -> bool:
        """Check if a subdirectory should be traversed, preventing loops.

        Symlinked directories are entered only when following symlinks. While
        following, every entered directory records its real path, so a link
        to any ancestor or to an already scanned directory is skipped.

        Args:
            path: Subdirectory path to check
            visited_paths: Set of visited real paths

        Returns:
            True if the subdirectory should be traversed, False otherwise
        """
        if not self.follow_symlinks:
            return not path.is_symlink()

        resolved_path = os.path.realpath(path)
        if resolved_path in visited_paths:
            return False

        visited_paths.add(resolved_path)
        return True
