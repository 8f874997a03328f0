"""sortedlinkedlist - Singly-linked list that keeps int or str values sorted."""

from sortedlinkedlist.comparator import (
    Comparator,
    DefaultComparator,
    KeyComparator,
    ReverseComparator,
)
from sortedlinkedlist.core import SortedLinkedList
from sortedlinkedlist.errors import (
    EmptyListError,
    SerializationError,
    SortedLinkedListError,
    TypeMismatchError,
)
from sortedlinkedlist.factory import from_iterable, of_integers, of_strings
from sortedlinkedlist.serializer import from_json, to_json, to_string
from sortedlinkedlist.types import ValueType

__version__ = "0.0.1"

__all__ = [
    "SortedLinkedList",
    "ValueType",
    "Comparator",
    "DefaultComparator",
    "ReverseComparator",
    "KeyComparator",
    "SortedLinkedListError",
    "TypeMismatchError",
    "EmptyListError",
    "SerializationError",
    "of_integers",
    "of_strings",
    "from_iterable",
    "to_string",
    "to_json",
    "from_json",
]
