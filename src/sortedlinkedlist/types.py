"""Type definitions for sortedlinkedlist."""

from enum import Enum
from typing import TypeAlias, TypeVar

# Element type variable; a list holds either ints or strs, never both
T = TypeVar("T", int, str)

# Comparators accept anything at least as general as the element type
T_contra = TypeVar("T_contra", contravariant=True)

# Anything a list can hold
Value: TypeAlias = int | str


class ValueType(Enum):
    """The element kind a list accepts, fixed at construction."""

    INT = "int"
    STRING = "string"

    @classmethod
    def of(cls, value: object) -> "ValueType | None":
        """Classify a runtime value, or return None if it is not supported."""
        # bool is an int subclass but never a valid element
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return cls.INT
        if isinstance(value, str):
            return cls.STRING
        return None

    def accepts(self, value: object) -> bool:
        """Return True if value is of this kind."""
        return ValueType.of(value) is self
