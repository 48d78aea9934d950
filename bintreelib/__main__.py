#!/usr/bin/env python
"""
BinTreeLib Demo
===============

Builds a sample tree and prints its recursive in-order walk next to the
cursor walk.

Usage:
    python -m bintreelib                        # Reference tree, latch policy
    python -m bintreelib --policy successor     # Exact successor ascent
    python -m bintreelib --second-ascent        # Tree needing two climbs
    python -m bintreelib --verbose              # Trace cursor moves to stderr
"""

import argparse
import sys

from .config import CursorConfig, parse_policy
from .testing.fixtures import build_reference_tree, build_second_ascent_tree


def run_demo(policy="latch", second_ascent=False, verbose=False, out=None) -> int:
    """Print both walks of a sample tree.

    Returns:
        0 if the walks agree, 1 otherwise
    """
    out = out if out is not None else sys.stdout
    tree = build_second_ascent_tree() if second_ascent else build_reference_tree()
    config = CursorConfig(ascent_policy=parse_policy(policy), verbose=verbose)

    print("Recursive visit", file=out)
    tree.traverse_in_order_print(file=out)

    print(f"Cursor visit ({config.ascent_policy.value})", file=out)
    cursor_values = [node.value for node in tree.cursor(config)]
    print(", ".join(str(value) for value in cursor_values), file=out)

    if cursor_values != tree.in_order_values():
        print("WARNING: cursor walk differs from recursive walk", file=out)
        return 1
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="bintree-demo",
        description="Compare recursive and cursor in-order walks of a sample tree"
    )
    parser.add_argument("--policy", default="latch",
                        choices=["latch", "successor"],
                        help="Ascent policy used by the cursor")
    parser.add_argument("--second-ascent", action="store_true",
                        help="Use the tree that needs two climbs to the root")
    parser.add_argument("--verbose", action="store_true",
                        help="Print every cursor move to stderr")
    args = parser.parse_args(argv)

    return run_demo(policy=args.policy,
                    second_ascent=args.second_ascent,
                    verbose=args.verbose)


if __name__ == "__main__":
    sys.exit(main())
