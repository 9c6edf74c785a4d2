"""Pure formatting utilities for human-readable sizes.

Uses binary units (1024-based) for consistency with system tools.
"""

import re
from typing import Final

_UNITS: Final[tuple[str, ...]] = ("Bytes", "KB", "MB", "GB", "TB")
_UNIT_FACTORS: Final[dict[str, int]] = {
    "": 1,
    "B": 1,
    "K": 1024,
    "KB": 1024,
    "M": 1024**2,
    "MB": 1024**2,
    "G": 1024**3,
    "GB": 1024**3,
    "T": 1024**4,
    "TB": 1024**4,
}
_SIZE_PATTERN: Final[re.Pattern[str]] = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*([A-Za-z]*)\s*$")


def format_size(size: int, *, precision: int = 1) -> str:
    """Convert bytes to human-readable size format.

    Args:
        size: Number of bytes to format (must be non-negative)
        precision: Number of decimal places for KB and larger units

    Returns:
        Human-readable string representation of the size

    Examples:
        >>> format_size(512)
        '512 Bytes'
        >>> format_size(1536)
        '1.5 KB'
        >>> format_size(10737418240)
        '10.0 GB'
    """
    if size < 0:
        msg = "size must be non-negative"
        raise ValueError(msg)

    if size < 1024:
        return f"{size} Bytes"

    value = float(size)
    unit = _UNITS[0]
    for unit in _UNITS[1:]:
        value /= 1024.0
        if value < 1024.0:
            break

    return f"{value:.{precision}f} {unit}"


def parse_size(text: str) -> int:
    """Parse a size such as ``"500"``, ``"64K"`` or ``"1.5 GB"`` into bytes.

    Args:
        text: Size with an optional binary unit suffix (case-insensitive)

    Returns:
        Size in bytes, truncated to an integer

    Raises:
        ValueError: If the text is not a valid size

    Examples:
        >>> parse_size("64K")
        65536
        >>> parse_size("1.5 mb")
        1572864
    """
    match = _SIZE_PATTERN.match(text)
    if match is None:
        msg = f"Invalid size: {text!r}"
        raise ValueError(msg)

    number, unit = match.groups()
    factor = _UNIT_FACTORS.get(unit.upper())
    if factor is None:
        msg = f"Unknown size unit {unit!r} in {text!r}"
        raise ValueError(msg)

    return int(float(number) * factor)
