"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One element of a linked list."""

    content: Any = None
    next: Optional["Node"] = None

    def last(self) -> "Node":
        """Return the final node of the chain starting here."""
        node = self
        while node.next is not None:
            node = node.next
        return node


def delone(node: Optional[Node], delete: Optional[Callable[[Any], None]]) -> None:
    """Release a single node's content with delete, leaving its successor alone."""
    if node is None or delete is None:
        return
    delete(node.content)
    node.content = None


class LinkedList:
    """A singly linked list held by its first node."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        tail: Optional[Node] = None
        for item in items:
            node = Node(item)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def add_front(self, node: Optional[Node]) -> None:
        """Put node at the front of the list."""
        if node is None:
            return
        node.next = self.head
        self.head = node

    def add_back(self, node: Optional[Node]) -> None:
        """Attach node (and anything chained after it) at the end of the list."""
        if node is None:
            return
        if self.head is None:
            self.head = node
        else:
            self.head.last().next = node

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def last(self) -> Optional[Node]:
        """Return the last node, or None for an empty list."""
        return None if self.head is None else self.head.last()

    def clear(self, delete: Optional[Callable[[Any], None]]) -> None:
        """Release every content with delete, in order, and empty the list.

        Without a delete function the list is left untouched.
        """
        if delete is None:
            return
        node = self.head
        while node is not None:
            following = node.next
            delone(node, delete)
            node.next = None
            node = following
        self.head = None

    def iterate(self, f: Optional[Callable[[Any], None]]) -> None:
        """Call f on each content, front to back."""
        if f is None:
            return
        for node in self._nodes():
            f(node.content)

    def map(
        self,
        f: Callable[[Any], Any],
        delete: Callable[[Any], None],
    ) -> "LinkedList":
        """Return a new list of f applied to each content.

        If f raises, the contents already produced are released with delete
        and the exception propagates.
        """
        if f is None or delete is None:
            raise TypeError("map needs both a mapping and a delete function")
        result = LinkedList()
        tail: Optional[Node] = None
        for content in self:
            try:
                node = Node(f(content))
            except BaseException:
                result.clear(delete)
                raise
            if tail is None:
                result.head = node
            else:
                tail.next = node
            tail = node
        return result