"""Main SortedLinkedList implementation."""

import logging
from typing import Generic, Iterable, Iterator

from sortedlinkedlist.comparator import Comparator, DefaultComparator
from sortedlinkedlist.errors import EmptyListError, TypeMismatchError
from sortedlinkedlist.linkedlist import Node
from sortedlinkedlist.types import T, ValueType

log = logging.getLogger(__name__)


class SortedLinkedList(Generic[T]):
    """
    Singly-linked list that keeps its values sorted at all times.

    A list holds values of one kind (ints or strs) chosen at construction and
    orders them with an injected comparator. Inserting, removing and searching
    are linear; searches stop at the first value ordered after the target.
    Appending a value ordered at or after the current last value, and reading
    either end, are O(1).

    The list is not thread-safe and its iterators are live views: mutating a
    list while iterating over it gives unspecified results.
    """

    def __init__(
        self,
        value_type: ValueType,
        comparator: Comparator[T] | None = None,
    ) -> None:
        """
        Initialize an empty list.

        Args:
            value_type: Kind of value the list accepts.
            comparator: Ordering for the list. Defaults to natural ascending
                order. Must be a strict weak ordering; this is not checked.

        Raises:
            TypeError: If value_type is not a ValueType member
        """
        if not isinstance(value_type, ValueType):
            raise TypeError(f"value_type must be a ValueType, got {value_type!r}")
        self._value_type = value_type
        self._comparator: Comparator[T] = (
            comparator if comparator is not None else DefaultComparator()
        )
        self._head: Node[T] | None = None
        self._tail: Node[T] | None = None  # Last node of the chain owned by _head
        self._count = 0
        log.debug(
            "Created %s list ordered by %r", value_type.value, self._comparator
        )

    @property
    def value_type(self) -> ValueType:
        """The kind of value this list accepts."""
        return self._value_type

    @property
    def comparator(self) -> Comparator[T]:
        """The ordering used by this list."""
        return self._comparator

    @property
    def count(self) -> int:
        """Number of values in the list."""
        return self._count

    def insert(self, value: T) -> "SortedLinkedList[T]":
        """
        Insert a value at its sorted position.

        A value that orders together with existing values goes in front of
        them, unless it orders at or after the last value, in which case it
        is appended.

        Args:
            value: The value to insert

        Returns:
            This list, for chaining

        Raises:
            TypeMismatchError: If value is not of the list's kind
        """
        self._check_type(value)
        node = Node(value)

        if self._head is None or self._tail is None:
            self._head = node
            self._tail = node
        elif self._compare(value, self._head.value) <= 0:
            node.next = self._head
            self._head = node
        elif self._compare(value, self._tail.value) >= 0:
            # Fast path for ascending loads
            self._tail.next = node
            self._tail = node
        else:
            # Head < value < tail, so the scan stops before the tail
            current = self._head
            while current.next is not None and self._compare(value, current.next.value) > 0:
                current = current.next
            node.next = current.next
            current.next = node

        self._count += 1
        return self

    def insert_all(self, values: Iterable[T]) -> "SortedLinkedList[T]":
        """
        Insert every value from an iterable.

        All values are type-checked before the first insert, so a value of
        the wrong kind leaves the list unchanged.

        Raises:
            TypeMismatchError: If any value is not of the list's kind
        """
        pending = list(values)
        for value in pending:
            self._check_type(value)
        for value in pending:
            self.insert(value)
        return self

    def remove(self, value: T) -> bool:
        """
        Remove the first value that compares equal to value.

        Args:
            value: The value to remove

        Returns:
            True if a value was removed, False otherwise

        Raises:
            TypeMismatchError: If value is not of the list's kind
        """
        self._check_type(value)

        if self._head is None:
            return False

        if self._compare(self._head.value, value) == 0:
            self._unlink_head()
            return True

        current = self._head
        while current.next is not None:
            cmp = self._compare(current.next.value, value)
            if cmp == 0:
                self._unlink_after(current)
                return True
            if cmp > 0:
                # Everything further on orders after value
                return False
            current = current.next

        return False

    def remove_all(self, value: T) -> int:
        """
        Remove every value that compares equal to value.

        Returns:
            The number of values removed

        Raises:
            TypeMismatchError: If value is not of the list's kind
        """
        self._check_type(value)
        removed = 0

        while self._head is not None and self._compare(self._head.value, value) == 0:
            self._unlink_head()
            removed += 1

        current = self._head
        while current is not None and current.next is not None:
            cmp = self._compare(current.next.value, value)
            if cmp > 0:
                break
            if cmp == 0:
                self._unlink_after(current)
                removed += 1
            else:
                current = current.next

        return removed

    def remove_first(self) -> T:
        """
        Remove and return the first (smallest) value.

        Raises:
            EmptyListError: If the list is empty
        """
        if self._head is None:
            raise EmptyListError("Cannot remove_first() on an empty list")
        value = self._head.value
        self._unlink_head()
        return value

    def remove_last(self) -> T:
        """
        Remove and return the last (largest) value. O(n).

        Raises:
            EmptyListError: If the list is empty
        """
        if self._head is None or self._tail is None:
            raise EmptyListError("Cannot remove_last() on an empty list")

        value = self._tail.value
        if self._head is self._tail:
            self._head = None
            self._tail = None
        else:
            current = self._head
            while current.next is not None and current.next is not self._tail:
                current = current.next
            current.next = None
            self._tail = current
        self._count -= 1
        return value

    def clear(self) -> None:
        """Remove all values."""
        log.debug("Clearing %s list of %d values", self._value_type.value, self._count)
        self._head = None
        self._tail = None
        self._count = 0

    def merge(self, other: "SortedLinkedList[T]") -> "SortedLinkedList[T]":
        """
        Return a new list holding the values of this list and other. O(n+m).

        The result is ordered by this list's comparator and uses it. When two
        values compare equal, the one from this list comes first. Neither
        operand is modified and no node is shared with the result.

        Args:
            other: A list of the same kind

        Raises:
            TypeMismatchError: If other holds a different kind of value
        """
        if not isinstance(other, SortedLinkedList):
            raise TypeError(f"Cannot merge with {type(other).__name__}")
        if other.value_type is not self._value_type:
            raise TypeMismatchError(
                f"Cannot merge a list of type {self._value_type.value!r} "
                f"with a list of type {other.value_type.value!r}"
            )

        log.debug("Merging lists of %d and %d values", self._count, other.count)
        result: SortedLinkedList[T] = SortedLinkedList(self._value_type, self._comparator)

        a = self._head
        b = other._head
        while a is not None and b is not None:
            if self._compare(a.value, b.value) <= 0:
                result._append(a.value)
                a = a.next
            else:
                result._append(b.value)
                b = b.next

        rest = a if a is not None else b
        while rest is not None:
            result._append(rest.value)
            rest = rest.next

        return result

    def contains(self, value: T) -> bool:
        """
        Check if a value comparing equal to value is in the list.

        Raises:
            TypeMismatchError: If value is not of the list's kind
        """
        self._check_type(value)
        current = self._head
        while current is not None:
            cmp = self._compare(current.value, value)
            if cmp == 0:
                return True
            if cmp > 0:
                return False
            current = current.next
        return False

    def count_of(self, value: T) -> int:
        """
        Count the values that compare equal to value.

        Raises:
            TypeMismatchError: If value is not of the list's kind
        """
        self._check_type(value)
        found = 0
        current = self._head
        while current is not None:
            cmp = self._compare(current.value, value)
            if cmp == 0:
                found += 1
            elif cmp > 0:
                break
            current = current.next
        return found

    def first(self) -> T:
        """
        Return the first (smallest) value.

        Raises:
            EmptyListError: If the list is empty
        """
        if self._head is None:
            raise EmptyListError("Cannot get first() of an empty list")
        return self._head.value

    def last(self) -> T:
        """
        Return the last (largest) value.

        Raises:
            EmptyListError: If the list is empty
        """
        if self._tail is None:
            raise EmptyListError("Cannot get last() of an empty list")
        return self._tail.value

    def peek_first(self) -> T | None:
        """Return the first value, or None if the list is empty."""
        return self._head.value if self._head is not None else None

    def peek_last(self) -> T | None:
        """Return the last value, or None if the list is empty."""
        return self._tail.value if self._tail is not None else None

    def is_empty(self) -> bool:
        """Return True if the list has no values."""
        return self._head is None

    def to_list(self) -> list[T]:
        """Return the values in order as a new Python list."""
        return list(self)

    def __iter__(self) -> Iterator[T]:
        """Yield values from first to last, starting at the current head."""
        current = self._head
        while current is not None:
            yield current.value
            current = current.next

    def __contains__(self, value: object) -> bool:
        """Support ``value in lst``; raises TypeMismatchError for the wrong kind."""
        return self.contains(value)  # type: ignore[arg-type]

    def __len__(self) -> int:
        """Return the number of values in the list."""
        return self._count

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self._count > 0

    def __repr__(self) -> str:
        """Return ``SortedLinkedList(<kind>)[<v1>, <v2>, ...]``."""
        values = ", ".join(str(value) for value in self)
        return f"SortedLinkedList({self._value_type.value})[{values}]"

    def _check_type(self, value: object) -> None:
        """Raise TypeMismatchError unless value is of the list's kind."""
        if self._value_type.accepts(value):
            return
        actual = ValueType.of(value)
        given = actual.value if actual is not None else type(value).__name__
        raise TypeMismatchError(
            f"List accepts values of type {self._value_type.value!r}, "
            f"but {given!r} was given"
        )

    def _compare(self, a: T, b: T) -> int:
        return self._comparator.compare(a, b)

    def _append(self, value: T) -> None:
        """Link a new node after the tail without comparing. Caller keeps order."""
        node = Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._count += 1

    def _unlink_head(self) -> None:
        """Drop the head node, if any."""
        if self._head is None:
            return
        self._head = self._head.next
        if self._head is None:
            self._tail = None
        self._count -= 1

    def _unlink_after(self, node: Node[T]) -> None:
        """Drop node.next, if any."""
        target = node.next
        if target is None:
            return
        if target is self._tail:
            self._tail = node
        node.next = target.next
        self._count -= 1
