"""A singly linked list whose additions go to the front."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass
class Node:
    """One element of a :class:`LinkedList`."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list with push and pop at the head.

    Built from an iterable, the list iterates in the iterable's order.
    """

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        self._size = 0
        for content in reversed(list(items)):
            self.push(content)

    def push(self, content: Any) -> Node:
        """Add ``content`` at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        self._size += 1
        return node

    def pop(self) -> Any:
        """Remove the front element and return its content."""
        if self.head is None:
            raise IndexError("pop from an empty list")
        node = self.head
        self.head = node.next
        node.next = None
        self._size -= 1
        return node.content

    def map(self, f: Callable[[Any], Any]) -> "LinkedList":
        """Return a new list holding ``f`` applied to each content, in order."""
        return LinkedList(f(content) for content in self)

    def clear(self) -> None:
        """Remove every element."""
        while self.head is not None:
            self.pop()

    def nodes(self) -> Iterator[Node]:
        """Iterate over the nodes from front to back."""
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self.nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"