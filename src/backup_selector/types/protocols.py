"""Protocol definitions for component interfaces.

This module defines structural subtyping protocols that establish
contracts for selectable items without requiring inheritance.
"""

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class Item(Protocol):
    """Protocol for a single selectable backup candidate.

    Implemented by files on disk and by entries inside a zip archive. The
    size is fixed when the item is constructed.
    """

    @property
    def name(self) -> str:
        """Bare file name of the item."""
        ...

    @property
    def full_name(self) -> str:
        """Identity of the item (absolute path or path inside the archive)."""
        ...

    @property
    def size(self) -> int:
        """Size in bytes (uncompressed size for archive entries)."""
        ...

    def read_bytes(self) -> bytes:
        """Materialize the full item content.

        Returns:
            Raw item content
        """
        ...

    def copy_to(self, destination: Path) -> Path:
        """Write the item content to a file.

        Args:
            destination: Target file path

        Returns:
            The destination path
        """
        ...
