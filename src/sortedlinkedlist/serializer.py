"""Text and JSON forms of a SortedLinkedList."""

import json
import logging
from typing import Any

from sortedlinkedlist.comparator import Comparator
from sortedlinkedlist.core import SortedLinkedList
from sortedlinkedlist.errors import SerializationError
from sortedlinkedlist.factory import from_iterable
from sortedlinkedlist.types import ValueType

log = logging.getLogger(__name__)


def to_string(lst: SortedLinkedList[Any]) -> str:
    """Render a list as ``SortedLinkedList(<kind>)[<v1>, <v2>, ...]``."""
    return repr(lst)


def to_json(lst: SortedLinkedList[Any]) -> str:
    """Encode the values of a list, in order, as a compact JSON array."""
    return json.dumps(lst.to_list(), separators=(",", ":"))


def from_json(
    value_type: ValueType,
    text: str,
    comparator: Comparator[Any] | None = None,
) -> SortedLinkedList[Any]:
    """
    Build a list of value_type from a JSON array.

    The array does not need to be sorted.

    Raises:
        SerializationError: If text is not valid JSON or not a JSON array
        TypeMismatchError: If an element is not of value_type
    """
    try:
        values = json.loads(text)
    except json.JSONDecodeError as e:
        log.debug("Rejected JSON payload: %s", e)
        raise SerializationError(f"Invalid JSON: {e}") from e

    if not isinstance(values, list):
        raise SerializationError(
            f"Expected a JSON array, got {type(values).__name__}"
        )

    return from_iterable(value_type, values, comparator)
