"""A singly linked list of nodes that carry arbitrary content.

A :class:`LinkedList` holds a reference to its head :class:`Node`. The
same nodes can be shared between lists: a list built on a node in the
middle of another list sees that list's tail.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

Deleter = Callable[[Any], Any]


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the node that follows it."""

    content: Any = None
    next: Optional[Node] = None

    def release(self, delete: Optional[Deleter]) -> None:
        """Hand the content to *delete* and detach the node from its successor.

        Nothing happens when *delete* is ``None``.
        """
        if delete is None:
            return
        delete(self.content)
        self.next = None


class LinkedList:
    """A list reached through its head node."""

    def __init__(self, head: Optional[Node] = None) -> None:
        self.head = head

    def _nodes(self) -> Iterator[Node]:
        current = self.head
        while current is not None:
            # Read the successor first so callers may detach the node.
            following = current.next
            yield current
            current = following

    def push_front(self, node: Optional[Node]) -> None:
        """Make *node* the new head; ``None`` is ignored."""
        if node is None:
            return
        node.next = self.head
        self.head = node

    def push_back(self, node: Optional[Node]) -> None:
        """Attach *node* after the current last node."""
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        """Yield the content of every node, from the head onwards."""
        for node in self._nodes():
            yield node.content

    def last(self) -> Optional[Node]:
        """The last node, or ``None`` for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def second_to_last(self) -> Optional[Node]:
        """The node just before the last one, or ``None`` for an empty list.

        Raises ``ValueError`` when the list holds a single node.
        """
        if self.head is None:
            return None
        if self.head.next is None:
            raise ValueError("a list of one node has no second to last node")
        current = self.head
        while current.next.next is not None:
            current = current.next
        return current

    def clear(self, delete: Optional[Deleter]) -> None:
        """Release every node with *delete* and empty the list.

        Nothing happens when *delete* is ``None``.
        """
        if delete is None:
            return
        for node in self._nodes():
            node.release(delete)
        self.head = None

    def for_each(self, f: Optional[Callable[[Any], Any]]) -> None:
        """Call *f* on the content of every node; ``None`` does nothing."""
        if f is None:
            return
        for content in self:
            f(content)

    def map(self, f: Callable[[Any], Any], delete: Deleter) -> LinkedList:
        """A new list whose contents are ``f(content)`` for every node.

        If *f* raises part of the way, the contents already produced are
        handed to *delete* before the exception propagates.
        """
        result = LinkedList()
        tail: Optional[Node] = None
        try:
            for content in self:
                node = Node(f(content))
                if tail is None:
                    result.head = node
                else:
                    tail.next = node
                tail = node
        except BaseException:
            result.clear(delete)
            raise
        return result