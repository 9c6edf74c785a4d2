"""Type aliases using modern PEP 695 syntax.

This module defines the type aliases shared between the scanners, the
engine and the CLI.
"""

from collections.abc import Iterator

from backup_selector.types.models import ArchiveItem, PhysicalItem

# Concrete item variants produced by the enumeration engine
type SelectedItem = PhysicalItem | ArchiveItem

# Lazy, pull-driven stream of accepted items
type ItemStream = Iterator[SelectedItem]
