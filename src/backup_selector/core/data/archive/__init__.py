"""Zip archive listing."""

from __future__ import annotations

from .reader import ArchiveReader, entry_from_info

__all__ = [
    "ArchiveReader",
    "entry_from_info",
]
