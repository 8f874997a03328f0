"""Singly-linked node cell backing SortedLinkedList."""

from typing import Generic

from sortedlinkedlist.types import T


class Node(Generic[T]):
    """A node in the singly-linked chain. Only ``next`` is ever rewritten."""

    __slots__ = ("value", "next")

    def __init__(self, value: T) -> None:
        self.value = value
        self.next: Node[T] | None = None
