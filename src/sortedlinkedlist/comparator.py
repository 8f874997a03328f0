"""Ordering strategies for SortedLinkedList."""

from typing import Any, Callable, Protocol, runtime_checkable

from sortedlinkedlist.types import T_contra, Value


@runtime_checkable
class Comparator(Protocol[T_contra]):
    """
    Three-way ordering between two values of the same kind.

    ``compare(a, b)`` returns a negative number if ``a`` orders before ``b``,
    zero if they order together and a positive number if ``a`` orders after
    ``b``. Implementations must be a strict weak ordering (transitive and
    consistent); lists rely on it for early-exit searches and never check it.
    """

    def compare(self, a: T_contra, b: T_contra) -> int: ...


class DefaultComparator:
    """Natural ascending order."""

    __slots__ = ()

    def compare(self, a: Value, b: Value) -> int:
        return (a > b) - (a < b)  # type: ignore[operator]

    def __repr__(self) -> str:
        return "DefaultComparator()"


class ReverseComparator:
    """Natural descending order."""

    __slots__ = ()

    def compare(self, a: Value, b: Value) -> int:
        return (b > a) - (b < a)  # type: ignore[operator]

    def __repr__(self) -> str:
        return "ReverseComparator()"


class KeyComparator:
    """
    Ascending order of ``key(value)``.

    Values whose keys are equal order together, so ``KeyComparator(str.casefold)``
    treats ``"Apple"`` and ``"apple"`` as equal for insert, remove and lookup.
    """

    __slots__ = ("key",)

    def __init__(self, key: Callable[[Any], Any]) -> None:
        self.key = key

    def compare(self, a: Value, b: Value) -> int:
        ka = self.key(a)
        kb = self.key(b)
        return (ka > kb) - (ka < kb)

    def __repr__(self) -> str:
        return f"KeyComparator({self.key!r})"
