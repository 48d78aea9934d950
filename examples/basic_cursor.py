#!/usr/bin/env python3
"""
Basic cursor example for BinTreeLib.

This example demonstrates:
- Growing a tree by chaining attach_left/attach_right
- Stepping a cursor by hand with advance()
- Comparing both ascent policies on the same tree
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from bintreelib import Tree, CursorConfig, get_tree_stats


def main():
    """Build a small tree and walk it."""
    tree = Tree(50)
    node30 = tree.attach_left(30)
    node30.attach_left(20)
    node30.attach_right(40).attach_left(35)
    tree.attach_right(70).attach_right(80)

    stats = get_tree_stats(tree)
    print(f"Tree: {stats['total_nodes']} nodes, {stats['leaf_nodes']} leaves, "
          f"depth {stats['max_depth']}")
    print("-" * 50)

    print("Recursive walk:")
    tree.traverse_in_order_print()

    # Manual stepping
    cursor = tree.cursor(CursorConfig.exact())
    print("\nStepping the successor cursor:")
    node = cursor.advance()
    while node is not None:
        print(f"  {node.value:>3}  then {cursor.last_move.name}")
        node = cursor.advance()

    print("\nLatch cursor:")
    print("  " + ", ".join(str(n.value) for n in tree.cursor()))


if __name__ == "__main__":
    main()
