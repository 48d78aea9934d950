"""Recursive in-order walk for BinTreeLib.

This is the plain left-self-right recursion used for diagnostics and as the
yardstick the cursor is checked against. It relies on the Python call stack
and shares nothing with InOrderCursor beyond the NodeHandle accessors.

Counting, validation and statistics use the stack-based walk instead, so
they do not depend on the recursion limit.
"""

import sys
from typing import Iterator, List, Optional, TextIO, Tuple

from .node import NodeHandle


def walk_in_order(node: Optional[NodeHandle]) -> Iterator[NodeHandle]:
    """Yield every node of a subtree in in-order sequence.

    Args:
        node: Subtree root (None yields nothing)

    Yields:
        NodeHandle instances, left subtree first
    """
    for handle, _ in walk_in_order_with_depth(node):
        yield handle


def walk_in_order_with_depth(node: Optional[NodeHandle],
                             depth: int = 0) -> Iterator[Tuple[NodeHandle, int]]:
    """Yield (node, depth) pairs in in-order sequence.

    Depth is relative to the node the walk started from.
    """
    if node is None:
        return

    yield from walk_in_order_with_depth(node.left, depth + 1)
    yield (node, depth)
    yield from walk_in_order_with_depth(node.right, depth + 1)


def iter_in_order_with_depth(node: Optional[NodeHandle]) -> Iterator[Tuple[NodeHandle, int]]:
    """Yield (node, depth) pairs in in-order sequence without recursion.

    Keeps an explicit stack of pending ancestors and follows child links
    only, so it works at any depth and on trees whose parent links are
    broken.
    """
    stack: List[Tuple[NodeHandle, int]] = []
    current, depth = node, 0

    while stack or current is not None:
        while current is not None:
            stack.append((current, depth))
            current, depth = current.left, depth + 1

        current, depth = stack.pop()
        yield (current, depth)
        current, depth = current.right, depth + 1


def print_in_order(node: Optional[NodeHandle],
                   file: Optional[TextIO] = None,
                   sep: str = ", ") -> None:
    """Write the in-order values of a subtree on one line.

    Args:
        node: Subtree root
        file: Output stream (default sys.stdout)
        sep: Separator between values
    """
    out = file if file is not None else sys.stdout
    print(sep.join(str(handle.value) for handle in walk_in_order(node)), file=out)
