"""BinTreeLib - Binary trees with parent links and a stackless in-order cursor.

BinTreeLib models a binary tree whose nodes can be navigated both top-down
and bottom-up, and walks it in in-order sequence with a cursor that keeps
only its position and the last move it made.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from bintreelib import Tree, CursorConfig

    tree = Tree(8)
    tree.attach_left(3).attach_right(6)
    for node in tree.cursor(CursorConfig.exact()):
        print(node.value)

The default cursor (AscentPolicy.LATCH) follows the original state table,
which is only exact for some tree shapes; see InOrderCursor.
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from .config import AscentPolicy, CursorConfig, parse_policy
from .errors import (
    BinTreeError,
    ConfigurationError,
    MalformedTreeError,
    TraversalLimitError,
    OrphanedChildWarning,
)
from .core import (
    NodeStore,
    NodeRecord,
    NodeHandle,
    InOrderCursor,
    Move,
    Tree,
    walk_in_order,
    walk_in_order_with_depth,
    iter_in_order_with_depth,
    print_in_order,
)
from .api import (
    traverse_in_order,
    collect_values,
    count_nodes,
    find_nodes,
    get_leaf_nodes,
    get_tree_stats,
)

__all__ = [
    "__version__",
    # Config
    "AscentPolicy",
    "CursorConfig",
    "parse_policy",
    # Errors
    "BinTreeError",
    "ConfigurationError",
    "MalformedTreeError",
    "TraversalLimitError",
    "OrphanedChildWarning",
    # Core
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
    # API
    "traverse_in_order",
    "collect_values",
    "count_nodes",
    "find_nodes",
    "get_leaf_nodes",
    "get_tree_stats",
]
