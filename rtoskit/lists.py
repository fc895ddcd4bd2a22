"""Circular doubly linked lists with an end marker, ordered by item value."""

from __future__ import annotations

from typing import Any, Iterator, Optional

USE_16_BIT_TICKS = False
PORT_MAX_DELAY = 0xFFFF if USE_16_BIT_TICKS else 0xFFFFFFFF


class ListItem:
    """A node that can be linked into one :class:`List` at a time."""

    __slots__ = ("_value", "owner", "next", "previous", "container")

    def __init__(self, value: int = 0, owner: Any = None) -> None:
        self.value = value
        self.owner = owner
        self.next: Optional[ListItem] = None
        self.previous: Optional[ListItem] = None
        self.container: Optional[List] = None

    @property
    def value(self) -> int:
        return self._value

    @value.setter
    def value(self, value: int) -> None:
        if not isinstance(value, int) or not 0 <= value <= PORT_MAX_DELAY:
            raise ValueError(f"item value must be a tick count in 0..{PORT_MAX_DELAY:#x}")
        self._value = value

    def remove(self) -> int:
        """Unlink the item from its list and return how many items remain there."""
        if self.container is None:
            raise ValueError("item is not in a list")
        return self.container._unlink(self)

    def __repr__(self) -> str:
        return f"ListItem(value={self._value!r}, owner={self.owner!r})"


class List:
    """A list whose items are kept between an end marker holding the maximum value."""

    def __init__(self) -> None:
        end = ListItem(PORT_MAX_DELAY)
        end.next = end
        end.previous = end
        self._end = end
        self._index = end
        self._count = 0

    def _link_after(self, anchor: ListItem, item: ListItem) -> None:
        item.next = anchor.next
        item.previous = anchor
        anchor.next.previous = item
        anchor.next = item
        item.container = self
        self._count += 1

    def _unlink(self, item: ListItem) -> int:
        item.next.previous = item.previous
        item.previous.next = item.next
        if self._index is item:
            self._index = item.previous
        item.container = None
        item.next = None
        item.previous = None
        self._count -= 1
        return self._count

    @staticmethod
    def _check_free(item: ListItem) -> None:
        if item.container is not None:
            raise ValueError("item is already in a list")

    def insert_end(self, item: ListItem) -> None:
        """Insert the item just before the list's current index position."""
        self._check_free(item)
        self._link_after(self._index.previous, item)

    def insert(self, item: ListItem) -> None:
        """Insert the item in ascending value order, after any equal values."""
        self._check_free(item)
        value = item.value
        if value == PORT_MAX_DELAY:
            anchor = self._end.previous
        else:
            anchor = self._end
            while anchor.next.value <= value:
                anchor = anchor.next
        self._link_after(anchor, item)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[ListItem]:
        node = self._end.next
        while node is not self._end:
            following = node.next
            yield node
            node = following

    def is_empty(self) -> bool:
        return self._count == 0

    def head_entry(self) -> ListItem:
        """Return the first item."""
        if self.is_empty():
            raise IndexError("list is empty")
        return self._end.next

    def head_value(self) -> int:
        """Return the value of the first item, or the maximum delay if empty."""
        return self._end.next.value

    def head_owner(self) -> Any:
        return self.head_entry().owner

    def next_owner(self) -> Any:
        """Advance the index round robin, skipping the end marker, and return its owner."""
        if self.is_empty():
            raise IndexError("list is empty")
        self._index = self._index.next
        if self._index is self._end:
            self._index = self._index.next
        return self._index.owner