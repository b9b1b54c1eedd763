"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

__all__ = ["Node", "LinkedList"]


@dataclass(eq=False)
class Node:
    """One link of a :class:`LinkedList`."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list that keeps its head, tail and length."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for item in items:
            self.push_back(item)

    @property
    def head(self) -> Optional[Node]:
        """The first node, or ``None`` for an empty list."""
        return self._head

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the front and return its node."""
        node = Node(content, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` at the back and return its node."""
        node = Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Any:
        """Return the content of the last node."""
        if self._tail is None:
            raise IndexError("last() on an empty list")
        return self._tail.content

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def clear(self, delete: Optional[Callable[[Any], None]] = None) -> None:
        """Remove every node, front to back, passing each content to ``delete``."""
        node = self._head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            self._head = following
            self._size -= 1
            node = following
        self._tail = None

    def for_each(self, func: Callable[[Any], None]) -> None:
        """Call ``func`` on every content in order."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any]) -> "LinkedList":
        """Return a new list holding ``func`` applied to every content."""
        return LinkedList(func(content) for content in self)