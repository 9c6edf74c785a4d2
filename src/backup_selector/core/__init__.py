"""Core selection logic: options, filters, collection and enumeration engine."""

from __future__ import annotations

from .collection import ItemCollection
from .engine import MAX_ITEM_SIZE, EnumerationEngine, enumerate_items
from .filters import ExtensionFilter, get_extension
from .options import FilterMode, SelectionDefaults, SelectionOptions, parse_extension_filters

__all__ = [
    "MAX_ITEM_SIZE",
    "EnumerationEngine",
    "ExtensionFilter",
    "FilterMode",
    "ItemCollection",
    "SelectionDefaults",
    "SelectionOptions",
    "enumerate_items",
    "get_extension",
    "parse_extension_filters",
]
