"""A singly linked list of nodes holding arbitrary content."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["Node", "LinkedList"]


@dataclass(eq=False)
class Node:
    """One link: its content and the node after it."""

    content: Any
    next: Node | None = None

    def release(self, delete: Callable[[Any], Any] | None) -> None:
        """Hand the content to ``delete`` and unlink the node.

        Nothing happens when ``delete`` is None.
        """
        if delete is None:
            return
        delete(self.content)
        self.next = None


def _require_callable(value: Any, name: str) -> None:
    if not callable(value):
        raise TypeError(f"{name} must be callable")


class LinkedList:
    """A chain of nodes reached from ``head``."""

    def __init__(self, head: Node | None = None) -> None:
        self.head = head

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def add_front(self, node: Node) -> None:
        """Make ``node`` the new head."""
        if self.head is not None:
            node.next = self.head
        self.head = node

    def add_back(self, node: Node) -> None:
        """Attach ``node`` after the last node."""
        last = self.last()
        if last is None:
            self.head = node
        else:
            last.next = node

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        """Yield the content of each node in order."""
        return (node.content for node in self._nodes())

    def last(self) -> Node | None:
        """The last node, or None for an empty list."""
        last = None
        for last in self._nodes():
            pass
        return last

    def clear(self, delete: Callable[[Any], Any]) -> None:
        """Pass every content to ``delete`` in order and empty the list."""
        _require_callable(delete, "delete")
        while self.head is not None:
            node = self.head
            self.head = node.next
            node.release(delete)

    def iterate(self, f: Callable[[Any], Any] | None) -> None:
        """Call ``f`` on every content in order; nothing happens when ``f`` is None."""
        if f is None:
            return
        for content in self:
            f(content)

    def map(
        self, f: Callable[[Any], Any], delete: Callable[[Any], Any]
    ) -> LinkedList:
        """A new list holding ``f`` applied to each content.

        Raises ValueError when ``f`` returns None for some content.
        """
        _require_callable(f, "f")
        _require_callable(delete, "delete")
        mapped = LinkedList()
        tail: Node | None = None
        for content in self:
            result = f(content)
            if result is None:
                raise ValueError("mapping function returned None")
            node = Node(result)
            if tail is None:
                mapped.head = node
            else:
                tail.next = node
            tail = node
        return mapped