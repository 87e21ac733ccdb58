"""A singly linked list of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Optional[Callable[[Any], None]]


@dataclass(eq=False)
class Node:
    """One cell of a linked list: a value and the node after it."""

    content: Any
    next: Optional[Node] = None


def _check_node(node: object) -> Node:
    if not isinstance(node, Node):
        raise TypeError(f"expected a Node, got {type(node).__name__}")
    return node


class LinkedList:
    """A singly linked list reached through its first node, ``head``."""

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

    def push_front(self, node: Node) -> None:
        """Make ``node`` the first node; whatever followed it before is dropped."""
        node = _check_node(node)
        node.next = self.head
        self.head = node

    def push_back(self, node: Node) -> None:
        """Attach ``node``, and any nodes already chained after it, at the end."""
        node = _check_node(node)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node

    def last(self) -> Optional[Node]:
        """The final node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def for_each(self, f: Callable[[Any], Any]) -> None:
        """Call ``f`` on every value, first to last."""
        for value in self:
            f(value)

    def map(self, f: Callable[[Any], Any], delete: Deleter = None) -> LinkedList:
        """A new list of ``f(value)`` for every value.

        If ``f`` raises part way through, ``delete`` is called on each value
        already produced before the exception propagates.
        """
        result = LinkedList()
        tail: Optional[Node] = None
        try:
            for value in self:
                node = Node(f(value))
                if tail is None:
                    result.head = node
                else:
                    tail.next = node
                tail = node
        except BaseException:
            result.clear(delete)
            raise
        return result

    def clear(self, delete: Deleter = None) -> None:
        """Remove every node, calling ``delete`` on each value first to last."""
        node = self.head
        self.head = None
        while node is not None:
            following = node.next
            node.next = None
            if delete is not None:
                delete(node.content)
            node = following

    def delete_node(self, node: Node, delete: Deleter = None) -> None:
        """Unlink ``node`` from the list and call ``delete`` on its value.

        Raises ``ValueError`` when ``node`` is not in the list.
        """
        node = _check_node(node)
        previous: Optional[Node] = None
        for current in self._nodes():
            if current is node:
                if previous is None:
                    self.head = node.next
                else:
                    previous.next = node.next
                node.next = None
                if delete is not None:
                    delete(node.content)
                return
            previous = current
        raise ValueError("node is not in this list")