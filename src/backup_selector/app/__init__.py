"""Command-line application layer."""

from __future__ import annotations

from .cli import cli, main

__all__ = ["cli", "main"]
