"""Tests for removing values from a SortedLinkedList."""

import pytest

from sortedlinkedlist import EmptyListError, TypeMismatchError, of_integers, of_strings


def test_remove_returns_true_when_found() -> None:
    """Test removing a present value."""
    lst = of_integers()
    lst.insert(1).insert(2).insert(3)
    assert lst.remove(2)
    assert lst.to_list() == [1, 3]
    assert lst.count == 2


def test_remove_returns_false_when_missing() -> None:
    """Test removing an absent value."""
    lst = of_integers()
    lst.insert(1).insert(3)
    assert not lst.remove(2)
    assert not lst.remove(10)
    assert not lst.remove(0)
    assert lst.to_list() == [1, 3]
    assert lst.count == 2


def test_remove_from_empty_list() -> None:
    """Test removing from an empty list."""
    lst = of_integers()
    assert not lst.remove(1)


def test_remove_first_occurrence_only() -> None:
    """Test that remove drops a single value."""
    lst = of_integers()
    lst.insert(1).insert(2).insert(2).insert(3)
    assert lst.remove(2)
    assert lst.to_list() == [1, 2, 3]


def test_remove_head() -> None:
    """Test removing the first value."""
    lst = of_integers()
    lst.insert(1).insert(2).insert(3)
    assert lst.remove(1)
    assert lst.first() == 2
    assert lst.to_list() == [2, 3]


def test_remove_tail_updates_last() -> None:
    """Test removing the last value."""
    lst = of_integers()
    lst.insert(1).insert(2).insert(3)
    assert lst.remove(3)
    assert lst.last() == 2

    # The new tail must accept appends
    lst.insert(4)
    assert lst.to_list() == [1, 2, 4]


def test_remove_single_element() -> None:
    """Test removing the only value."""
    lst = of_integers()
    lst.insert(1)
    assert lst.remove(1)
    assert lst.is_empty()
    assert lst.peek_first() is None
    assert lst.peek_last() is None


def test_remove_type_mismatch() -> None:
    """Test removing a value of the wrong kind."""
    lst = of_integers()
    lst.insert(1)
    with pytest.raises(TypeMismatchError):
        lst.remove("1")  # type: ignore[arg-type]
    assert lst.to_list() == [1]


def test_remove_all() -> None:
    """Test removing every occurrence."""
    lst = of_integers()
    lst.insert(1).insert(2).insert(2).insert(3)
    assert lst.remove_all(2) == 2
    assert lst.to_list() == [1, 3]
    assert lst.count == 2


def test_remove_all_when_missing() -> None:
    """Test removing every occurrence of an absent value."""
    lst = of_integers()
    lst.insert(1).insert(3)
    assert lst.remove_all(2) == 0
    assert lst.remove_all(5) == 0
    assert lst.to_list() == [1, 3]


def test_remove_all_from_head() -> None:
    """Test removing a run at the front."""
    lst = of_integers()
    lst.insert(1).insert(1).insert(1).insert(2)
    assert lst.remove_all(1) == 3
    assert lst.to_list() == [2]
    assert lst.first() == 2


def test_remove_all_from_tail() -> None:
    """Test removing a run at the back."""
    lst = of_integers()
    lst.insert(1).insert(3).insert(3)
    assert lst.remove_all(3) == 2
    assert lst.to_list() == [1]
    assert lst.last() == 1

    lst.insert(2)
    assert lst.to_list() == [1, 2]


def test_remove_all_entire_list() -> None:
    """Test removing every value."""
    lst = of_integers()
    lst.insert(7).insert(7).insert(7)
    assert lst.remove_all(7) == 3
    assert lst.is_empty()
    assert lst.count == 0
    assert lst.peek_last() is None


def test_remove_all_type_mismatch() -> None:
    """Test removing every occurrence of a value of the wrong kind."""
    lst = of_strings()
    lst.insert("a")
    with pytest.raises(TypeMismatchError):
        lst.remove_all(1)  # type: ignore[arg-type]
    assert lst.to_list() == ["a"]


def test_remove_first() -> None:
    """Test popping the smallest value."""
    lst = of_integers()
    lst.insert(1).insert(2).insert(3)
    assert lst.remove_first() == 1
    assert lst.to_list() == [2, 3]
    assert lst.first() == 2
    assert lst.peek_first() == 2


def test_remove_last() -> None:
    """Test popping the largest value."""
    lst = of_integers()
    lst.insert(1).insert(2).insert(3)
    assert lst.remove_last() == 3
    assert lst.to_list() == [1, 2]
    assert lst.last() == 2
    assert lst.peek_last() == 2


def test_remove_last_single_element() -> None:
    """Test popping the only value from the back."""
    lst = of_integers()
    lst.insert(1)
    assert lst.remove_last() == 1
    assert lst.is_empty()
    assert lst.peek_first() is None
    assert lst.peek_last() is None


def test_remove_last_repeatedly_walks_to_new_tail() -> None:
    """Test popping the back of a long list until it is empty."""
    lst = of_integers()
    lst.insert_all(range(20))
    for expected in range(19, -1, -1):
        assert lst.remove_last() == expected
        assert lst.count == expected
        assert lst.peek_last() == (expected - 1 if expected else None)
    assert lst.is_empty()
    assert lst.peek_first() is None

    # Both ends are reset, so the list fills again from scratch
    lst.insert(3).insert(1)
    assert lst.to_list() == [1, 3]
    assert lst.remove_last() == 3
    assert lst.last() == 1


def test_remove_run_ending_at_tail_moves_tail_back() -> None:
    """Test that unlinking the tail from the middle of a scan updates last()."""
    lst = of_integers()
    lst.insert(1).insert(2).insert(5).insert(5)
    assert lst.remove_all(5) == 2
    assert lst.last() == 2
    assert lst.remove(2)
    assert lst.last() == 1
    assert lst.first() == 1
    lst.insert(9)
    assert lst.to_list() == [1, 9]


def test_remove_first_then_last_leaves_empty() -> None:
    """Test popping both ends of a two-value list."""
    lst = of_integers()
    lst.insert(1).insert(2)
    assert lst.remove_first() == 1
    assert lst.remove_last() == 2
    assert lst.is_empty()
    assert lst.count == 0


def test_pop_on_empty_list() -> None:
    """Test popping from an empty list."""
    lst = of_integers()
    with pytest.raises(EmptyListError):
        lst.remove_first()
    with pytest.raises(EmptyListError):
        lst.remove_last()


def test_clear() -> None:
    """Test removing everything."""
    lst = of_integers()
    lst.insert(1).insert(2).insert(3)
    lst.clear()
    assert lst.is_empty()
    assert lst.count == 0
    assert lst.to_list() == []
    with pytest.raises(EmptyListError):
        lst.first()

    # Usable after clearing
    lst.insert(5)
    assert lst.to_list() == [5]
    assert lst.first() == lst.last() == 5
