"""Basic usage example for sortedlinkedlist."""

from sortedlinkedlist import (
    EmptyListError,
    TypeMismatchError,
    ValueType,
    from_iterable,
    of_integers,
    to_json,
)


def main() -> None:
    """Demonstrate basic list operations."""
    print("=== Sorted Insert Example ===\n")

    scores = of_integers()
    for score in [72, 95, 88, 72, 60]:
        scores.insert(score)
    print(f"Scores: {scores}")
    print(f"Lowest: {scores.first()}, highest: {scores.last()}")
    print(f"Times 72 was scored: {scores.count_of(72)}\n")

    # Kinds never mix
    try:
        scores.insert("100")  # type: ignore[arg-type]
    except TypeMismatchError as e:
        print(f"Rejected: {e}\n")

    print("=== Removal Example ===\n")
    print(f"Removed one 72: {scores.remove(72)}")
    print(f"Removed all 72s: {scores.remove_all(72)}")
    print(f"Popped lowest: {scores.remove_first()}")
    print(f"Popped highest: {scores.remove_last()}")
    print(f"Left: {scores}\n")

    print("=== Merge Example ===\n")
    morning = from_iterable(ValueType.INT, [9, 11, 13])
    evening = from_iterable(ValueType.INT, [10, 12, 14])
    day = morning.merge(evening)
    print(f"Merged: {day}")
    print(f"As JSON: {to_json(day)}")
    print(f"Operands untouched: {morning.to_list()} {evening.to_list()}\n")

    day.clear()
    print(f"After clear, peek_first() -> {day.peek_first()}")
    try:
        day.first()
    except EmptyListError as e:
        print(f"first() -> {e}")


if __name__ == "__main__":
    main()
