"""Type definitions and protocols for backup-selector.

This package provides:
- Data models (immutable dataclasses)
- Protocol definitions (structural subtyping interfaces)
- Type aliases (PEP 695 modern syntax)
"""

from backup_selector.types.aliases import ItemStream, SelectedItem
from backup_selector.types.models import ArchiveEntry, ArchiveItem, PhysicalItem
from backup_selector.types.protocols import Item

__all__ = [
    # Type aliases
    "ItemStream",
    "SelectedItem",
    # Data models
    "ArchiveEntry",
    "ArchiveItem",
    "PhysicalItem",
    # Protocols
    "Item",
]
