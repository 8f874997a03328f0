"""Exception classes for sortedlinkedlist."""


class SortedLinkedListError(Exception):
    """Base exception for all sortedlinkedlist errors."""


class TypeMismatchError(SortedLinkedListError, TypeError):
    """Raised when a value or list of the wrong element kind is given to a list."""


class EmptyListError(SortedLinkedListError, IndexError):
    """Raised when reading or popping an end of an empty list."""


class SerializationError(SortedLinkedListError, ValueError):
    """Raised when a serialized list cannot be decoded."""
