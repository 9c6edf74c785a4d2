"""Enumeration engine producing backup candidates from a directory or archive.

The engine walks the configured source, applies the extension filter, the
item-count limit and the per-item size limits, and yields each accepted item
as soon as it is found. Production is pull-driven: nothing is scanned ahead
of the caller, and abandoning the iterator releases any open archive.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Final

from backup_selector.core.collection import ItemCollection
from backup_selector.core.data.archive.reader import ArchiveReader
from backup_selector.core.data.filesystem.scanner import DirectoryScanner
from backup_selector.core.filters import ExtensionFilter
from backup_selector.core.options import SelectionOptions
from backup_selector.types.aliases import ItemStream, SelectedItem
from backup_selector.types.models import ArchiveItem, PhysicalItem
from backup_selector.utils.logging import get_scan_id, new_scan_id

logger = logging.getLogger(__name__)

# Internal safety bound on a single item's size, independent of the
# configured size limit.
MAX_ITEM_SIZE: Final[int] = 2**31 - 1


class EnumerationEngine:
    """Engine that enumerates, filters and collects backup candidates.

    Every accepted item is appended to the engine's collection before it is
    yielded. Repeated passes accumulate into the same collection unless the
    caller clears it first.
    """

    def __init__(self, collection: ItemCollection | None = None) -> None:
        """Initialize the enumeration engine.

        Args:
            collection: Collection receiving accepted items (new one if omitted)
        """
        self.collection: ItemCollection = collection if collection is not None else ItemCollection()

    def enumerate(self, options: SelectionOptions) -> ItemStream:
        """Lazily yield the items accepted under ``options``.

        Args:
            options: Scan root, source kind, filter and limits (read only)

        Yields:
            Accepted items in discovery order

        Raises:
            ScanSourceError: If the root directory or archive cannot be read
        """
        scan_id = get_scan_id() or new_scan_id()
        extension_filter = ExtensionFilter.from_options(options)
        candidates = self._archive_candidates if options.archive_root else self._directory_candidates

        logger.info(
            "Scan started",
            extra={
                "scan_id": scan_id,
                "root": str(options.root),
                "archive": options.archive_root,
                "recursive": options.include_subfolders,
                "filtered": extension_filter.is_active,
            },
        )

        accepted = 0
        stream = candidates(options, extension_filter, scan_id)
        try:
            for item in stream:
                self.collection.append(item)
                accepted += 1
                yield item
                # Stop before the source is resumed
                if self._count_limit_reached(options):
                    logger.debug("Count limit reached", extra={"scan_id": scan_id})
                    break
        finally:
            stream.close()

        logger.info(
            "Scan finished",
            extra={
                "scan_id": scan_id,
                "accepted": accepted,
                "count": self.collection.count,
                "total_size": self.collection.total_size,
            },
        )

    def _archive_candidates(
        self,
        options: SelectionOptions,
        extension_filter: ExtensionFilter,
        scan_id: str,
    ) -> Iterator[ArchiveItem]:
        reader = ArchiveReader(options.root)
        entries = reader.iter_entries()
        try:
            for entry in entries:
                if self._count_limit_reached(options):
                    logger.debug("Count limit reached", extra={"scan_id": scan_id})
                    break

                # Empty names are directory placeholders
                if not entry.name:
                    continue
                if not options.include_subfolders and entry.full_name != entry.name:
                    continue

                if extension_filter.accepts(entry.name):
                    item = ArchiveItem.from_entry(entry, options.root)
                    if self._check_size(item, options, scan_id):
                        yield item
        finally:
            # Release the archive even when the consumer abandons the scan
            entries.close()

    def _directory_candidates(
        self,
        options: SelectionOptions,
        extension_filter: ExtensionFilter,
        scan_id: str,
    ) -> Iterator[PhysicalItem]:
        scanner = DirectoryScanner(recursive=options.include_subfolders)
        for path in scanner.scan_directory(options.root):
            if self._count_limit_reached(options):
                logger.debug("Count limit reached", extra={"scan_id": scan_id})
                break

            if not extension_filter.accepts(path.name):
                continue

            try:
                item = PhysicalItem.from_path(path)
            except OSError as exc:
                logger.debug(
                    "Skipping file that cannot be stat'ed",
                    extra={"scan_id": scan_id, "path": str(path), "error": exc.strerror},
                )
                continue

            if self._check_size(item, options, scan_id):
                yield item

    def _count_limit_reached(self, options: SelectionOptions) -> bool:
        return options.count_limit != 0 and self.collection.count >= options.count_limit

    def _check_size(self, item: SelectedItem, options: SelectionOptions, scan_id: str) -> bool:
        """Check an item against the configured size limit and the internal cap.

        Args:
            item: Candidate item
            options: Options holding the configured size limit
            scan_id: Id of the current scan for log correlation

        Returns:
            True if the item may be accepted
        """
        if options.size_limit != 0 and item.size > options.size_limit:
            logger.debug(
                "Item exceeds size limit",
                extra={"scan_id": scan_id, "item": item.full_name, "size": item.size},
            )
            return False
        if item.size > MAX_ITEM_SIZE:
            logger.debug(
                "Item exceeds maximum supported size",
                extra={"scan_id": scan_id, "item": item.full_name, "size": item.size},
            )
            return False
        return True


def enumerate_items(
    options: SelectionOptions,
    collection: ItemCollection | None = None,
) -> ItemStream:
    """Enumerate items under ``options`` into ``collection``.

    Args:
        options: Selection options
        collection: Collection receiving accepted items

    Returns:
        Lazy iterator of accepted items
    """
    return EnumerationEngine(collection).enumerate(options)
