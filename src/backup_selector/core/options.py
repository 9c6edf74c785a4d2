"""Selection options describing what to scan and how to filter it.

Options are a plain pydantic model. The root path is not validated here;
a missing or unreadable root only surfaces when the engine scans it.
"""

from collections.abc import Sequence
from enum import Enum
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FilterMode(str, Enum):
    """Whether the extension list names the files to keep or to drop."""

    INCLUDE = "include"
    EXCLUDE = "exclude"


def parse_extension_filters(text: str | None) -> tuple[str, ...] | None:
    """Split comma separated extension text into trimmed tokens.

    Args:
        text: Text such as ``".txt, .md"``

    Returns:
        Tuple of tokens, or None when the text is empty or whitespace only

    Examples:
        >>> parse_extension_filters(" .txt , .MD ")
        ('.txt', '.MD')
        >>> parse_extension_filters("   ") is None
        True
    """
    if text is None or not text.strip():
        return None
    return tuple(token.strip() for token in text.split(","))


class _SelectionFields(BaseModel):
    """Source kind, recursion, extension filter and limits."""

    model_config = ConfigDict(validate_assignment=True)

    archive_root: Annotated[
        bool,
        Field(description="Treat the root as a zip archive"),
    ] = False
    include_subfolders: Annotated[
        bool,
        Field(description="Recurse into subdirectories or nested archive folders"),
    ] = False
    extension_filters: Annotated[
        tuple[str, ...] | None,
        Field(description="Extensions compared case-insensitively; None accepts any"),
    ] = None
    filter_mode: Annotated[
        FilterMode,
        Field(description="Keep only listed extensions or drop them"),
    ] = FilterMode.INCLUDE
    size_limit: Annotated[
        int,
        Field(ge=0, description="Per-item size ceiling in bytes (0 = unlimited)"),
    ] = 0
    count_limit: Annotated[
        int,
        Field(ge=0, description="Maximum number of accepted items (0 = unlimited)"),
    ] = 0

    @field_validator("extension_filters", mode="before")
    @classmethod
    def normalize_extension_filters(cls, v: object) -> object:
        """Accept comma separated text or a sequence of extensions.

        Args:
            v: Raw field value

        Returns:
            Tuple of trimmed tokens or None
        """
        if v is None or isinstance(v, str):
            return parse_extension_filters(v)
        if isinstance(v, Sequence):
            tokens = tuple(str(token).strip() for token in v)  # pyright: ignore[reportUnknownVariableType, reportUnknownArgumentType]  # YAML boundary
            return tokens or None
        return v


class SelectionDefaults(_SelectionFields):
    """Selection options read from a configuration file.

    Every field is optional, the root included, so a file can hold default
    filters and limits while the root comes from the command line.
    """

    root: Annotated[
        Path | None,
        Field(description="Directory or zip archive to scan"),
    ] = None


class SelectionOptions(_SelectionFields):
    """Configuration for one enumeration pass.

    Defines the scan root, the source kind (directory tree or zip archive),
    recursion, the extension filter and the per-item and item-count limits.
    """

    root: Annotated[Path, Field(description="Directory or zip archive to scan")]

    def set_extension_filters(self, text: str | None) -> None:
        """Replace the extension filter from comma separated text.

        Args:
            text: Comma separated extensions; empty text clears the filter
        """
        self.extension_filters = parse_extension_filters(text)

    def get_extension_filters(self) -> tuple[str, ...] | None:
        return self.extension_filters
