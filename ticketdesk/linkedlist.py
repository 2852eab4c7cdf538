"""A doubly linked list with a movable cursor."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Optional


class _Node:
    __slots__ = ("item", "next", "prev")

    def __init__(self, item: Any) -> None:
        self.item = item
        self.next: Optional[_Node] = None
        self.prev: Optional[_Node] = None


class LinkedList:
    """Doubly linked list that keeps a cursor on a "current" element.

    ``first``, ``next`` and ``prev`` move the cursor and return the item under
    it, or ``None`` when there is nowhere to move.
    """

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._current: Optional[_Node] = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.item
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    # Cursor movement

    def first(self) -> Any:
        """Move the cursor to the head and return its item."""
        if self._head is None:
            return None
        self._current = self._head
        return self._current.item

    def next(self) -> Any:
        """Advance the cursor and return its item, or None at the end."""
        if self._current is None or self._current.next is None:
            return None
        self._current = self._current.next
        return self._current.item

    def prev(self) -> Any:
        """Move the cursor back and return its item, or None at the start."""
        if self._current is None or self._current.prev is None:
            return None
        self._current = self._current.prev
        return self._current.item

    # Insertion

    def push_back(self, item: Any) -> None:
        """Append an item at the tail."""
        node = _Node(item)
        if self._tail is None:
            self._head = self._tail = node
        else:
            node.prev = self._tail
            self._tail.next = node
            self._tail = node
        self._size += 1

    def push_front(self, item: Any) -> None:
        """Insert an item at the head; on an empty list the cursor lands on it."""
        node = _Node(item)
        if self._head is None:
            self._head = self._tail = self._current = node
        else:
            node.next = self._head
            self._head.prev = node
            self._head = node
        self._size += 1

    def push_current(self, item: Any) -> None:
        """Insert an item right after the cursor."""
        current = self._current
        if current is None:
            raise IndexError("the list has no current element")
        node = _Node(item)
        node.prev = current
        node.next = current.next
        if current.next is None:
            self._tail = node
        else:
            current.next.prev = node
        current.next = node
        self._size += 1

    def sorted_insert(self, item: Any, lower_than: Callable[[Any, Any], bool]) -> None:
        """Insert before the first element that ``item`` is lower than.

        Items that compare equal keep their insertion order.
        """
        if self._head is None or lower_than(item, self._head.item):
            self.push_front(item)
            return
        node = self._head
        while node.next is not None and not lower_than(item, node.next.item):
            node = node.next
        self._current = node
        self.push_current(item)

    # Removal

    def _unlink(self, node: _Node) -> Any:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.next = node.prev = None
        self._size -= 1
        return node.item

    def pop_front(self) -> Any:
        """Remove and return the head item."""
        node = self._head
        if node is None:
            raise IndexError("pop from an empty list")
        if self._current is node:
            self._current = None
        return self._unlink(node)

    def pop_back(self) -> Any:
        """Remove and return the tail item."""
        if self._tail is None:
            raise IndexError("pop from an empty list")
        self._current = self._tail
        return self.pop_current()

    def pop_current(self) -> Any:
        """Remove and return the item under the cursor; the cursor is cleared."""
        node = self._current
        if node is None:
            raise IndexError("the list has no current element")
        self._current = None
        return self._unlink(node)

    def clear(self) -> None:
        """Remove every item."""
        self._head = self._tail = self._current = None
        self._size = 0