"""Backup Selector - enumerate candidate files for a backup.

This package scans a directory tree or a zip archive, applies an extension
filter, a per-item size limit and an item-count limit, and keeps a running
total of the selected size.
"""

from backup_selector.core import (
    EnumerationEngine,
    FilterMode,
    ItemCollection,
    SelectionOptions,
    enumerate_items,
)
from backup_selector.types import ArchiveItem, Item, PhysicalItem

__all__ = [
    "ArchiveItem",
    "EnumerationEngine",
    "FilterMode",
    "Item",
    "ItemCollection",
    "PhysicalItem",
    "SelectionOptions",
    "enumerate_items",
]
