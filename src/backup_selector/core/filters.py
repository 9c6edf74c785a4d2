"""Extension filter for backup candidates."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from .options import FilterMode

if TYPE_CHECKING:
    from .options import SelectionOptions


def get_extension(name: str) -> str:
    """Return the extension of a file name, including the leading dot.

    Only the last path component is considered. Case is preserved.

    Args:
        name: File name or path (``/`` or ``\\`` separated)

    Returns:
        Extension such as ``".txt"``, or an empty string when there is none

    Examples:
        >>> get_extension("folder/Report.TXT")
        '.TXT'
        >>> get_extension("archive.tar.gz")
        '.gz'
        >>> get_extension(".bashrc")
        '.bashrc'
        >>> get_extension("README")
        ''
        >>> get_extension("trailing.")
        ''
    """
    base = name.replace("\\", "/").rpartition("/")[2]
    index = base.rfind(".")
    if index == -1 or index == len(base) - 1:
        return ""
    return base[index:]


class ExtensionFilter:
    """Case-insensitive extension filter with include or exclude mode."""

    def __init__(
        self,
        extensions: Iterable[str] | None = None,
        mode: FilterMode = FilterMode.INCLUDE,
    ) -> None:
        """Initialize the extension filter.

        Args:
            extensions: Extensions to match; None accepts every name
            mode: Whether matching names are kept or dropped
        """
        self.mode: FilterMode = mode
        self._extensions: frozenset[str] | None = (
            None if extensions is None else frozenset(ext.strip().casefold() for ext in extensions)
        )

    @classmethod
    def from_options(cls, options: SelectionOptions) -> ExtensionFilter:
        return cls(options.get_extension_filters(), options.filter_mode)

    @property
    def is_active(self) -> bool:
        return self._extensions is not None

    def accepts_extension(self, extension: str) -> bool:
        """Check an extension against the filter.

        Args:
            extension: Extension including the leading dot

        Returns:
            True if a file with this extension should be kept
        """
        if self._extensions is None:
            return True

        contained = extension.casefold() in self._extensions
        return contained if self.mode is FilterMode.INCLUDE else not contained

    def accepts(self, name: str) -> bool:
        return self.accepts_extension(get_extension(name))
