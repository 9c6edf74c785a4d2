"""Ordered collection of accepted backup candidates with a running size total."""

from __future__ import annotations

from collections.abc import Iterator
from typing import overload, override

from backup_selector.types.aliases import SelectedItem


class ItemCollection:
    """Accepted items in discovery order plus the sum of their sizes.

    The total is maintained incrementally, so it always equals the sum of
    the sizes of the items currently held. The collection is not safe for
    concurrent population; scans against one instance must be serialized.
    """

    def __init__(self) -> None:
        self._items: list[SelectedItem] = []
        self._total_size: int = 0

    @property
    def count(self) -> int:
        return len(self._items)

    @property
    def total_size(self) -> int:
        return self._total_size

    @overload
    def __getitem__(self, index: int) -> SelectedItem: ...

    @overload
    def __getitem__(self, index: slice) -> list[SelectedItem]: ...

    def __getitem__(self, index: int | slice) -> SelectedItem | list[SelectedItem]:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[SelectedItem]:
        return iter(self._items)

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}(count={self.count}, total_size={self._total_size})"

    def append(self, item: SelectedItem) -> None:
        """Add an accepted item and its size to the running total.

        Args:
            item: Item that passed every filter and limit
        """
        self._items.append(item)
        self._total_size += item.size

    def remove_at(self, index: int) -> SelectedItem:
        """Remove the item at ``index`` and subtract its size from the total.

        Args:
            index: Position of the item to remove

        Returns:
            The removed item

        Raises:
            IndexError: If index is out of range
        """
        item = self._items.pop(index)
        self._total_size -= item.size
        return item

    def clear(self) -> None:
        """Remove all items and reset the total to zero."""
        self._items.clear()
        self._total_size = 0
