"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class Node:
    """One link of a list: its content and the node after it."""

    content: Any
    next: Node | None = None


class LinkedList:
    """Singly linked list with front insertion, appending and mapping."""

    def __init__(self, contents: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self._tail: Node | None = None
        for content in contents:
            self.append(content)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        return node

    def append(self, content: Any) -> Node:
        """Add ``content`` at the back and return its node."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        return node

    def last(self) -> Node | None:
        """Return the last node, or ``None`` for an empty list."""
        return self._tail

    def clear(self, delete: Callable[[Any], None] | None = None) -> None:
        """Remove every node, passing each content to ``delete`` first."""
        node = self.head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following
        self.head = None
        self._tail = None

    def for_each(self, func: Callable[[Any], None]) -> None:
        """Call ``func`` on each content from front to back."""
        for node in self._nodes():
            func(node.content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Callable[[Any], None] | None = None,
    ) -> LinkedList:
        """Return a new list holding ``func(content)`` for each content.

        If ``func`` raises, the contents built so far are passed to
        ``delete`` and the exception propagates.
        """
        result = LinkedList()
        try:
            for node in self._nodes():
                result.append(func(node.content))
        except BaseException:
            result.clear(delete)
            raise
        return result

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"