"""Data models for backup-selector.

This module defines the immutable dataclasses that represent selectable
backup candidates. Both item variants share the size/identity contract of
the ``Item`` protocol, so downstream code never branches on source kind.
"""

import shutil
from dataclasses import dataclass
from pathlib import Path
from zipfile import ZipFile


@dataclass(slots=True, frozen=True)
class ArchiveEntry:
    """Raw entry listed from a zip archive.

    ``name`` is the bare file name and is empty for directory placeholders.
    ``full_name`` is the path-qualified name stored in the archive.
    """

    name: str
    full_name: str
    size: int


@dataclass(slots=True, frozen=True)
class PhysicalItem:
    """Backup candidate backed by a file on disk."""

    path: Path
    size: int

    @classmethod
    def from_path(cls, path: Path) -> "PhysicalItem":
        """Build an item from filesystem metadata.

        Args:
            path: File to describe

        Returns:
            Item with the absolute path and the size reported by ``stat``

        Raises:
            OSError: If the file cannot be stat'ed
        """
        absolute = path.absolute()
        return cls(path=absolute, size=absolute.stat().st_size)

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def full_name(self) -> str:
        return str(self.path)

    def read_bytes(self) -> bytes:
        return self.path.read_bytes()

    def copy_to(self, destination: Path) -> Path:
        """Copy the file content to ``destination``.

        Args:
            destination: Target file path

        Returns:
            The destination path
        """
        destination.parent.mkdir(parents=True, exist_ok=True)
        _ = shutil.copyfile(self.path, destination)
        return destination


@dataclass(slots=True, frozen=True)
class ArchiveItem:
    """Backup candidate backed by one entry of a zip archive."""

    entry_name: str
    size: int
    archive_path: Path

    @classmethod
    def from_entry(cls, entry: ArchiveEntry, archive_path: Path) -> "ArchiveItem":
        return cls(entry_name=entry.full_name, size=entry.size, archive_path=archive_path)

    @property
    def name(self) -> str:
        return self.entry_name.replace("\\", "/").rpartition("/")[2]

    @property
    def full_name(self) -> str:
        return self.entry_name

    def read_bytes(self) -> bytes:
        with ZipFile(self.archive_path) as archive:
            return archive.read(self.entry_name)

    def copy_to(self, destination: Path) -> Path:
        """Extract the entry content to ``destination``.

        Args:
            destination: Target file path

        Returns:
            The destination path
        """
        destination.parent.mkdir(parents=True, exist_ok=True)
        with ZipFile(self.archive_path) as archive, archive.open(self.entry_name) as source:
            with destination.open("wb") as target:
                shutil.copyfileobj(source, target)
        return destination
