"""Tests for the Tree aggregate.

Covers construction, the recursive print walk, invariant checking and the
reference lifetime of nodes once a tree is dropped.
"""

import io
import sys
import weakref
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from bintreelib import Tree, MalformedTreeError, CursorConfig
from bintreelib.testing import (
    REFERENCE_IN_ORDER,
    SECOND_ASCENT_IN_ORDER,
    build_reference_tree,
    build_second_ascent_tree,
)


def test_new_creates_leaf_root():
    tree = Tree.new(42)
    assert tree.root.value == 42
    assert tree.root.is_leaf()
    assert tree.root.parent is None
    assert len(tree) == 1


def test_attach_delegates_to_root():
    tree = Tree(8)
    left = tree.attach_left(3)
    right = tree.attach_right(10)

    assert tree.root.left == left
    assert tree.root.right == right
    assert len(tree) == 3


def test_recursive_print_reference_tree(capsys):
    tree = build_reference_tree()
    tree.traverse_in_order_print()

    captured = capsys.readouterr()
    assert captured.out == "1, 3, 4, 6, 7, 8, 10, 13, 14\n"


def test_recursive_print_to_stream():
    tree = build_reference_tree()
    buffer = io.StringIO()
    tree.traverse_in_order_print(file=buffer, sep=" ")
    assert buffer.getvalue() == "1 3 4 6 7 8 10 13 14\n"


def test_in_order_values():
    assert build_reference_tree().in_order_values() == REFERENCE_IN_ORDER
    assert build_second_ascent_tree().in_order_values() == SECOND_ASCENT_IN_ORDER


def test_repr():
    assert repr(build_reference_tree()) == "Tree(root=8, nodes=9)"


class TestInvariants:
    """Invariant checking on well-formed and corrupted trees."""

    def test_reference_tree_is_well_formed(self):
        tree = build_reference_tree()
        assert tree.validate_invariants() == []
        tree.check_invariants()

    def test_corrupted_back_reference_detected(self):
        tree = build_reference_tree()
        node6 = tree.root.left.right
        # Point 6 at the root instead of 3, bypassing the public API
        tree._store.record(node6.node_id).parent = tree.root.node_id

        problems = tree.validate_invariants()
        assert problems == ["right child 6 of 3 has parent 8"]

        with pytest.raises(MalformedTreeError) as exc_info:
            tree.check_invariants()
        assert exc_info.value.problems == problems

    def test_missing_parent_detected(self):
        tree = build_reference_tree()
        node10 = tree.root.right
        tree._store.record(node10.node_id).parent = None

        problems = tree.validate_invariants()
        assert "right child 10 of 8 has parent None" in problems
        assert "non-root node 10 has no parent" in problems

    def test_orphans_are_not_checked(self):
        tree = Tree(8)
        tree.attach_left(3)
        with pytest.warns(UserWarning):
            tree.attach_left(4)
        assert tree.validate_invariants() == []


class TestReferenceLifetime:
    """Dropping a tree and its handles must free every node."""

    def test_store_freed_after_tree_dropped(self):
        tree = build_reference_tree()
        store_ref = weakref.ref(tree._store)

        del tree
        # Records link by id, so no cycle collection is needed
        assert store_ref() is None

    def test_handles_keep_nodes_alive(self):
        tree = build_reference_tree()
        node6 = tree.root.left.right
        store_ref = weakref.ref(tree._store)

        del tree
        assert store_ref() is not None
        assert node6.parent.value == 3
        assert node6.parent.parent.value == 8

        del node6
        assert store_ref() is None

    def test_cursor_released_when_discarded(self):
        tree = build_reference_tree()
        cursor = tree.cursor()
        next(cursor)
        store_ref = weakref.ref(tree._store)

        del tree
        assert store_ref() is not None
        assert cursor.advance().value == 3

        del cursor
        assert store_ref() is None

    def test_finished_cursor_holds_nothing(self):
        tree = build_reference_tree()
        cursor = tree.cursor(CursorConfig.exact())
        list(cursor)
        store_ref = weakref.ref(tree._store)

        del tree
        assert cursor.position is None
        assert store_ref() is None


class TestDeepTrees:
    """Whole-tree helpers must not be bounded by the interpreter's recursion limit."""

    DEPTH = 3000

    @pytest.fixture
    def right_chain(self):
        tree = Tree(0)
        node = tree.root
        for value in range(1, self.DEPTH):
            node = node.attach_right(value)
        return tree

    def test_len_of_deep_chain(self, right_chain):
        assert len(right_chain) == self.DEPTH

    def test_repr_of_deep_chain(self, right_chain):
        assert repr(right_chain) == f"Tree(root=0, nodes={self.DEPTH})"

    def test_invariants_of_deep_chain(self, right_chain):
        assert right_chain.validate_invariants() == []
        right_chain.check_invariants()

    def test_exact_cursor_on_deep_chain(self, right_chain):
        values = [node.value for node in right_chain.cursor(CursorConfig.exact())]
        assert values == list(range(self.DEPTH))
