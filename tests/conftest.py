"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from zipfile import ZipFile

import pytest

from tests.fixtures.filesystem import TreeFactory, ZipFactory, write_sized_file


@pytest.fixture
def make_tree(tmp_path: Path) -> TreeFactory:
    """Build a directory tree from a mapping of relative file path to size."""

    def factory(files: Mapping[str, int]) -> Path:
        root = tmp_path / "tree"
        root.mkdir(exist_ok=True)
        for relative, size in files.items():
            _ = write_sized_file(root / relative, size)
        return root

    return factory


@pytest.fixture
def make_zip(tmp_path: Path) -> ZipFactory:
    """Build a zip archive from a mapping of entry name to size.

    Names ending with ``/`` become directory placeholder entries. Entries are
    written in mapping order, which is the archive order.
    """

    def factory(entries: Mapping[str, int]) -> Path:
        archive_path = tmp_path / "archive.zip"
        with ZipFile(archive_path, "w") as archive:
            for name, size in entries.items():
                if name.endswith("/"):
                    archive.mkdir(name.rstrip("/"))
                else:
                    archive.writestr(name, b"x" * size)
        return archive_path

    return factory


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    """Restore root logger handlers and level changed by configure_logging."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
