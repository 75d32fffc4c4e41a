"""A singly linked list of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass
class Node:
    """One cell of a LinkedList."""

    content: Any
    next: Optional["Node"] = None


Deleter = Optional[Callable[[Any], None]]


class LinkedList:
    """A singly linked list holding its first node in ``head``."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for item in items:
            self.add_back(item)

    def add_front(self, content: Any) -> Node:
        """Insert content as the new first element and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def add_back(self, content: Any) -> Node:
        """Append content as the new last element and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """Return the last node, or None for an empty list."""
        node = self.head
        if node is None:
            return None
        while node.next is not None:
            node = node.next
        return node

    def remove_first(self, delete: Deleter = None) -> Any:
        """Unlink the first node, pass its content to delete, and return the content.

        Raises IndexError when the list is empty.
        """
        if self.head is None:
            raise IndexError("remove from empty list")
        node = self.head
        self.head = node.next
        node.next = None
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Deleter = None) -> None:
        """Remove every node, passing each content to delete in order."""
        while self.head is not None:
            self.remove_first(delete)

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call func on every content in order."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any], delete: Deleter = None) -> "LinkedList":
        """Return a new list of func(content) for every content.

        If func raises, the contents built so far are passed to delete and
        the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.add_back(func(content))
        except BaseException:
            result.clear(delete)
            raise
        return result

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"