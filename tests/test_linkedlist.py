"""Tests for the singly-linked node cell."""

import pytest

from sortedlinkedlist.linkedlist import Node


def test_node_creation() -> None:
    """Test creating a node."""
    node = Node(1)
    assert node.value == 1
    assert node.next is None


def test_node_linking() -> None:
    """Test chaining nodes through next."""
    node1 = Node("a")
    node2 = Node("b")
    node1.next = node2

    assert node1.next is node2
    assert node2.next is None


def test_node_has_no_instance_dict() -> None:
    """Test that nodes only carry their slots."""
    node = Node(1)
    with pytest.raises(AttributeError):
        node.prev = None  # type: ignore[attr-defined]
