"""Shortcuts for building SortedLinkedList instances."""

from typing import Iterable

from sortedlinkedlist.comparator import Comparator
from sortedlinkedlist.core import SortedLinkedList
from sortedlinkedlist.types import T, ValueType


def of_integers(comparator: Comparator[int] | None = None) -> SortedLinkedList[int]:
    """Create an empty list of ints."""
    return SortedLinkedList(ValueType.INT, comparator)


def of_strings(comparator: Comparator[str] | None = None) -> SortedLinkedList[str]:
    """Create an empty list of strs."""
    return SortedLinkedList(ValueType.STRING, comparator)


def from_iterable(
    value_type: ValueType,
    values: Iterable[T],
    comparator: Comparator[T] | None = None,
) -> SortedLinkedList[T]:
    """
    Create a list of value_type holding every value from values.

    Raises:
        TypeMismatchError: If any value is not of value_type
    """
    lst: SortedLinkedList[T] = SortedLinkedList(value_type, comparator)
    return lst.insert_all(values)
