"""Filesystem operations module for directory scanning."""

from __future__ import annotations

from .scanner import DirectoryScanner, is_tolerated_error

__all__ = [
    "DirectoryScanner",
    "is_tolerated_error",
]
