"""Structural checks for tests and debugging.

Nothing in here is needed to use an AVLTree; these helpers reach into the
tree's internals so that tests can confirm the cached metadata and the AVL
invariant actually hold.
"""
from __future__ import annotations

from typing import Optional, Iterable

from .node import AVLNode
from .tree import AVLTree


def get_root(tree: AVLTree) -> Optional[AVLNode]:
    """Return the tree's root node. For tests only."""
    return tree._root


def verify_node_integrity(cur: AVLNode, seen_values: list, low=None, high=None) -> int:
    """Check the subtree rooted at cur and return its height.

    Every value visited is appended to seen_values in order. low and high are
    exclusive bounds inherited from the ancestors; since they are strict, a
    repeated value or a pointer loop back to an ancestor fails the ordering
    check.
    """
    assert (low is None or low < cur.value) and (
        high is None or cur.value < high
    ), "ordering violated at node {} (bounds {}, {})".format(
        str(cur.value), str(low), str(high)
    )

    if cur.left is not None:
        left_height = verify_node_integrity(cur.left, seen_values, low, cur.value)
    else:
        left_height = -1

    seen_values.append(cur.value)

    if cur.right is not None:
        right_height = verify_node_integrity(cur.right, seen_values, cur.value, high)
    else:
        right_height = -1

    height = max(left_height, right_height) + 1
    balance = left_height - right_height

    assert (
        cur.height == height
    ), "cached height wrong at node {} (got {}, expected {})".format(
        str(cur.value), cur.height, height
    )

    assert (
        cur.balance_factor == balance
    ), "cached balance factor wrong at node {} (got {}, expected {})".format(
        str(cur.value), cur.balance_factor, balance
    )

    assert abs(balance) <= 1, "balance constraint violated at node " + str(
        cur.value
    )

    return height


def verify_tree_integrity(tree: AVLTree, expected: Optional[Iterable] = None):
    seen_values = []
    root = get_root(tree)
    if root is not None:
        verify_node_integrity(root, seen_values)
        assert tree.height() == root.height
    else:
        assert tree.height() == -1

    assert len(tree) == len(
        seen_values
    ), "tree stored length differs from traversed number of nodes (got {}, expected {})".format(
        len(tree), len(seen_values)
    )

    if expected is not None:
        expected = sorted(expected)
        assert (
            seen_values == expected
        ), "tree contents differ from expected values (got {}, expected {})".format(
            seen_values, expected
        )
