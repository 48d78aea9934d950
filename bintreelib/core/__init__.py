"""Core building blocks for BinTreeLib.

This package contains the node store, node handles, the tree aggregate and
the two traversal styles built on them.
"""

from .store import NodeStore, NodeRecord
from .node import NodeHandle
from .cursor import InOrderCursor, Move
from .tree import Tree
from .traverser import (
    walk_in_order,
    walk_in_order_with_depth,
    iter_in_order_with_depth,
    print_in_order,
)

__all__ = [
    "NodeStore",
    "NodeRecord",
    "NodeHandle",
    "InOrderCursor",
    "Move",
    "Tree",
    "walk_in_order",
    "walk_in_order_with_depth",
    "iter_in_order_with_depth",
    "print_in_order",
]
