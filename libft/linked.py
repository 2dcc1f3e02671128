"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """One element of a linked list."""

    content: Any
    next: Node | None = None


class LinkedList:
    """Singly linked list that keeps a reference to its first node."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        for item in items:
            self.push_back(item)

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` at the end and return its node."""
        node = Node(content)
        last = self.last()
        if last is None:
            self.head = node
        else:
            last.next = node
        return node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def last(self) -> Node | None:
        """The final node, or None for an empty list."""
        last = None
        for last in self._nodes():
            pass
        return last

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Remove every node, passing each content to ``delete`` when given."""
        if delete is not None:
            for content in list(self):
                delete(content)
        self.head = None

    def for_each(self, f: Callable[[Any], Any]) -> None:
        """Call ``f`` on the content of every node, front to back."""
        for content in self:
            f(content)

    def map(
        self, f: Callable[[Any], Any], delete: Callable[[Any], Any] | None = None
    ) -> LinkedList:
        """Return a new list holding ``f(content)`` for every node.

        If ``f`` raises, the contents mapped so far are passed to ``delete``
        and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(f(content))
        except BaseException:
            result.clear(delete)
            raise
        return result