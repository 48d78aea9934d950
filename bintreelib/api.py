"""High-level API for BinTreeLib.

This module provides simple, functional interfaces for common operations on
a Tree. These functions wrap the cursor and config objects for ease of use
in simple cases.
"""

from dataclasses import fields
from typing import Iterator, Optional, Callable, Any, Dict, List

from .config import CursorConfig, parse_policy
from .core.node import NodeHandle
from .core.traverser import iter_in_order_with_depth
from .core.tree import Tree


def traverse_in_order(
    tree: Tree,
    config: Optional[CursorConfig] = None,
    **kwargs
) -> Iterator[NodeHandle]:
    """Simple interface for cursor traversal.

    Args:
        tree: Tree to walk
        config: Complete cursor configuration; mutually exclusive with kwargs
        **kwargs: policy, max_steps, on_move, verbose

    Yields:
        NodeHandle instances in the order the cursor reports them

    Example:
        >>> for node in traverse_in_order(tree, policy="successor"):
        ...     print(node.value)
    """
    if config is not None and kwargs:
        raise TypeError("Pass either config or keyword options, not both")
    if config is None:
        config = _build_config_from_kwargs(**kwargs)

    yield from tree.cursor(config)


def collect_values(tree: Tree, **kwargs) -> List[int]:
    """Return the values reported by a cursor walk.

    Args:
        tree: Tree to walk
        **kwargs: Traversal options (see traverse_in_order)
    """
    return [node.value for node in traverse_in_order(tree, **kwargs)]


def count_nodes(tree: Tree, **kwargs) -> int:
    """Count nodes reported by a cursor walk.

    Example:
        >>> count = count_nodes(tree, policy="successor")
    """
    count = 0
    for _ in traverse_in_order(tree, **kwargs):
        count += 1
    return count


def find_nodes(
    tree: Tree,
    predicate: Callable[[NodeHandle], bool],
    **kwargs
) -> Iterator[NodeHandle]:
    """Find nodes that match a predicate.

    Args:
        tree: Tree to walk
        predicate: Function that returns True for matching nodes
        **kwargs: Traversal options (see traverse_in_order)

    Yields:
        Matching nodes in cursor order
    """
    for node in traverse_in_order(tree, **kwargs):
        if predicate(node):
            yield node


def get_leaf_nodes(tree: Tree, **kwargs) -> Iterator[NodeHandle]:
    """Get all leaf nodes reported by a cursor walk."""
    for node in traverse_in_order(tree, **kwargs):
        if node.is_leaf():
            yield node


def get_tree_stats(tree: Tree) -> Dict[str, Any]:
    """Get statistics about a tree.

    Uses the stack-based walk, so every node reachable from the root is
    counted regardless of cursor policy.

    Returns:
        Dictionary with tree statistics

    Example:
        >>> stats = get_tree_stats(tree)
        >>> print(f"Total nodes: {stats['total_nodes']}")
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'max_depth': 0,
        'depths': {}
    }

    for node, depth in iter_in_order_with_depth(tree.root):
        stats['total_nodes'] += 1

        if node.is_leaf():
            stats['leaf_nodes'] += 1

        stats['max_depth'] = max(stats['max_depth'], depth)

        if depth not in stats['depths']:
            stats['depths'][depth] = 0
        stats['depths'][depth] += 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']

    return stats


# Helper functions

def _build_config_from_kwargs(**kwargs) -> CursorConfig:
    """Build CursorConfig from keyword arguments.

    Args:
        **kwargs: Configuration options

    Returns:
        CursorConfig instance
    """
    config = CursorConfig()

    if 'policy' in kwargs:
        config.ascent_policy = parse_policy(kwargs.pop('policy'))

    # Apply any remaining kwargs directly; only dataclass fields are options
    option_names = {option.name for option in fields(CursorConfig)}
    for key, value in kwargs.items():
        if key not in option_names:
            raise TypeError(f"Unknown cursor option: {key}")
        setattr(config, key, value)

    return config
