"""A doubly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class Node:
    """One link of a LinkedList, holding its content and its neighbours."""

    content: Any
    next: Node | None = field(default=None, repr=False)
    prev: Node | None = field(default=None, repr=False)


class LinkedList:
    """A doubly linked list whose iteration yields the contents of its nodes."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def push_front(self, content: Any) -> Node:
        """Add a new node holding content at the front and return it."""
        node = Node(content, next=self.head)
        if self.head is None:
            self._tail = node
        else:
            self.head.prev = node
        self.head = node
        self._size += 1
        return node

    def push_back(self, content: Any) -> Node:
        """Add a new node holding content at the back and return it."""
        node = Node(content, prev=self._tail)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Node | None:
        """Return the last node, or None when the list is empty."""
        return self._tail

    def nodes(self) -> Iterator[Node]:
        """Yield the nodes from front to back."""
        node = self.head
        while node is not None:
            following = node.next
            yield node
            node = following

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for node in self.nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def clear(self, delete: Callable[[Any], object] | None = None) -> None:
        """Empty the list, passing each content to delete from front to back."""
        for node in self.nodes():
            if delete is not None:
                delete(node.content)
            node.next = node.prev = None
        self.head = None
        self._tail = None
        self._size = 0

    def for_each(self, func: Callable[[Any], object]) -> None:
        """Call func on each content from front to back."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Callable[[Any], object] | None = None,
    ) -> LinkedList:
        """Return a new list holding func applied to each content.

        If func raises, the contents already mapped are passed to delete
        and the exception propagates.
        """
        mapped = LinkedList()
        try:
            for content in self:
                mapped.push_back(func(content))
        except BaseException:
            mapped.clear(delete)
            raise
        return mapped