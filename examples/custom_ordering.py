"""Custom comparator example for sortedlinkedlist."""

from sortedlinkedlist import KeyComparator, ReverseComparator, of_integers, of_strings


class ByLength:
    """Orders strings by length; equal lengths order together."""

    def compare(self, a: str, b: str) -> int:
        return len(a) - len(b)


def main() -> None:
    """Demonstrate lists with non-default orderings."""
    print("=== Descending Order ===\n")
    countdown = of_integers(ReverseComparator())
    countdown.insert(3).insert(10).insert(1).insert(7)
    print(f"Countdown: {countdown.to_list()}\n")

    print("=== Case-Insensitive Strings ===\n")
    names = of_strings(KeyComparator(str.casefold))
    names.insert_all(["bob", "Alice", "carol", "alice"])
    print(f"Names: {names.to_list()}")
    print(f"Contains 'ALICE': {'ALICE' in names}")
    print(f"Copies of 'ALICE': {names.count_of('ALICE')}\n")

    print("=== Custom Comparator Class ===\n")
    words = of_strings(ByLength())
    words.insert_all(["pear", "fig", "banana", "kiwi"])
    print(f"Words by length: {words.to_list()}")


if __name__ == "__main__":
    main()
