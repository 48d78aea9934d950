"""Test fixtures for BinTreeLib consumers.

These helpers build the trees the cursor is usually checked against and
record the moves a cursor makes, without exposing cursor internals.
"""

import random
from typing import List, Optional, Tuple

from ..core.cursor import Move
from ..core.node import NodeHandle
from ..core.tree import Tree

# In-order values of build_reference_tree()
REFERENCE_IN_ORDER = [1, 3, 4, 6, 7, 8, 10, 13, 14]

# In-order values of build_second_ascent_tree()
SECOND_ASCENT_IN_ORDER = [1, 3, 4, 6, 7, 8, 12, 15, 17, 20, 25]


def build_reference_tree() -> Tree:
    """Build the standard nine-node tree.

    Structure:
          8
         / \\
        3   10
       / \\    \\
      1   6    14
         / \\   /
        4   7 13
    """
    tree = Tree(8)

    node3 = tree.attach_left(3)
    node3.attach_left(1)
    node6 = node3.attach_right(6)
    node6.attach_left(4)
    node6.attach_right(7)

    tree.attach_right(10).attach_right(14).attach_left(13)
    return tree


def build_second_ascent_tree() -> Tree:
    """Build a tree whose walk needs two climbs back to the root.

    The left subtree matches build_reference_tree(). Leaf 17 is reached by
    a right step after the first climb from 7, so a one-shot ascent latch
    ends the walk there.

    Structure:
              8
           /     \\
          3       20
         / \\     /  \\
        1   6   15   25
           / \\ /  \\
          4  7 12  17
    """
    tree = Tree(8)

    node3 = tree.attach_left(3)
    node3.attach_left(1)
    node6 = node3.attach_right(6)
    node6.attach_left(4)
    node6.attach_right(7)

    node20 = tree.attach_right(20)
    node15 = node20.attach_left(15)
    node15.attach_left(12)
    node15.attach_right(17)
    node20.attach_right(25)
    return tree


def build_random_tree(seed: int, size: int) -> Tree:
    """Build a random tree of ``size`` nodes holding values 0..size-1.

    Each new node fills a random free slot, so shapes range from chains to
    bushy trees. Values are assigned afterwards in in-order sequence, which
    makes the expected cursor output ``list(range(size))``.

    Args:
        seed: Seed for random.Random
        size: Number of nodes (at least 1)
    """
    if size < 1:
        raise ValueError("size must be at least 1")

    rng = random.Random(seed)

    # Shape first: (parent index, side) per node, then number in order
    shape: List[List[Optional[int]]] = [[None, None]]
    free: List[Tuple[int, int]] = [(0, 0), (0, 1)]
    for index in range(1, size):
        parent, side = free.pop(rng.randrange(len(free)))
        shape[parent][side] = index
        shape.append([None, None])
        free.extend([(index, 0), (index, 1)])

    order: List[int] = []

    def _number(index: Optional[int]) -> None:
        if index is None:
            return
        _number(shape[index][0])
        order.append(index)
        _number(shape[index][1])

    _number(0)
    values = {index: position for position, index in enumerate(order)}

    tree = Tree(values[0])

    def _grow(handle: NodeHandle, index: int) -> None:
        left, right = shape[index]
        if left is not None:
            _grow(handle.attach_left(values[left]), left)
        if right is not None:
            _grow(handle.attach_right(values[right]), right)

    _grow(tree.root, 0)
    return tree


class MoveRecorder:
    """``on_move`` hook that records every primitive cursor move.

    Example:
        recorder = MoveRecorder()
        cursor = tree.cursor(CursorConfig(on_move=recorder))
        list(cursor)
        assert recorder.count(Move.STEPPED_UP) > 0
    """

    def __init__(self):
        self.moves: List[Tuple[Move, int]] = []

    def __call__(self, move: Move, node: NodeHandle) -> None:
        self.moves.append((move, node.value))

    def count(self, move: Move) -> int:
        return sum(1 for recorded, _ in self.moves if recorded is move)

    def values_after(self, move: Move) -> List[int]:
        """Values the cursor landed on with the given move."""
        return [value for recorded, value in self.moves if recorded is move]

    def clear(self) -> None:
        self.moves.clear()
