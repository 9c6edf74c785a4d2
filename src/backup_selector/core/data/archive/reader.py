"""Zip archive entry listing for backup candidate discovery."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from zipfile import BadZipFile, ZipFile, ZipInfo

from backup_selector.exceptions import InvalidArchiveError, ScanSourceError, SourceNotFoundError
from backup_selector.types.models import ArchiveEntry

logger = logging.getLogger(__name__)


def entry_from_info(info: ZipInfo) -> ArchiveEntry:
    """Describe a zip member as an archive entry.

    Args:
        info: Member metadata from the archive's central directory

    Returns:
        Entry with bare name, full name and uncompressed size. The bare name
        is empty for directory placeholders such as ``"folder/"``.
    """
    full_name = info.filename
    name = full_name.replace("\\", "/").rpartition("/")[2]
    return ArchiveEntry(name=name, full_name=full_name, size=info.file_size)


class ArchiveReader:
    """Reader listing the entries of a zip archive in archive order."""

    def __init__(self, path: Path) -> None:
        """Initialize the archive reader.

        Args:
            path: Zip archive to read
        """
        self.path: Path = path

    def iter_entries(self) -> Iterator[ArchiveEntry]:
        """Yield the archive's entries lazily.

        The archive handle stays open only while the generator is alive. It
        is released when iteration completes, raises, or is abandoned by the
        caller.

        Yields:
            ArchiveEntry objects in archive order

        Raises:
            SourceNotFoundError: If the archive does not exist
            InvalidArchiveError: If the file is not a readable zip archive
            ScanSourceError: If the archive cannot be opened
        """
        with self._open() as archive:
            logger.debug("Opened archive", extra={"archive": str(self.path)})
            for info in archive.infolist():
                yield entry_from_info(info)

    def _open(self) -> ZipFile:
        try:
            return ZipFile(self.path)
        except FileNotFoundError as exc:
            raise SourceNotFoundError(f"Archive not found: {self.path}", source=str(self.path)) from exc
        except BadZipFile as exc:
            raise InvalidArchiveError(
                f"{self.path} is not a valid zip archive", source=str(self.path)
            ) from exc
        except OSError as exc:
            raise ScanSourceError(f"Cannot open archive {self.path}: {exc}", source=str(self.path)) from exc
