from __future__ import annotations

import logging
from collections.abc import Collection
from typing import Generic, TypeVar, Optional, Iterable, List, Tuple

from .iter import TraversalIter
from .node import AVLNode

T = TypeVar("T")

logger = logging.getLogger(__name__)

# (ancestor, direction taken from that ancestor), root first
Path = List[Tuple[AVLNode, int]]


def _check_argument(value):
    if value is None:
        raise ValueError("Argument cannot be None")


class AVLTree(Generic[T], Collection):
    """A set of distinct, mutually comparable values kept in an AVL tree.

    Insertion and removal never recurse: both walk down from the root while
    recording the ancestor path, change the tree at the bottom, then replay
    the path in reverse to refresh each ancestor's cached height and balance
    factor and rotate wherever the AVL invariant was broken.

    The tree is not thread-safe.
    """

    def __init__(self, iterable: Optional[Iterable[T]] = None):
        self._root: Optional[AVLNode[T]] = None
        self._len: int = 0

        if iterable is not None:
            for value in iterable:
                self.add(value)

    def add(self, value: T):
        """Insert a value into the tree.

        Adding a value that is already present does nothing.

        Raises ValueError if value is None.
        """
        _check_argument(value)

        if self._root is None:
            self._root = AVLNode(value)
            self._len = 1
            return

        path: Path = []
        cur = self._root
        while cur is not None:
            if value == cur.value:
                logger.debug("ignoring duplicate value %r", value)
                return
            elif value < cur.value:
                path.append((cur, AVLNode.LEFT))
                cur = cur._left
            else:
                path.append((cur, AVLNode.RIGHT))
                cur = cur._right

        parent, direction = path[-1]
        parent._set_child(direction, AVLNode(value))
        self._len += 1

        self._retrace(path)

    def remove(self, value: T) -> Optional[T]:
        """Remove a value from the tree.

        Returns the stored value that was removed, or None if the tree did not
        contain the value.

        Raises ValueError if value is None.
        """
        _check_argument(value)

        if self._root is None:
            return None

        path: Path = []
        cur = self._root
        while cur is not None and cur.value != value:
            if value < cur.value:
                path.append((cur, AVLNode.LEFT))
                cur = cur._left
            else:
                path.append((cur, AVLNode.RIGHT))
                cur = cur._right

        if cur is None:
            return None

        result = cur.value
        left = cur._left
        right = cur._right

        if left is None and right is None:
            logger.debug("removing leaf %r", result)
            self._replace_slot(path, None)
        elif left is None or right is None:
            logger.debug("removing %r, splicing in its only child", result)
            self._replace_slot(path, left if left is not None else right)
        else:
            # Two children: pull the in-order successor's value up into this
            # node, then unlink the successor, which has no left child.
            path.append((cur, AVLNode.RIGHT))
            successor = right
            while successor._left is not None:
                path.append((successor, AVLNode.LEFT))
                successor = successor._left

            logger.debug(
                "removing %r, replacing it with successor %r", result, successor.value
            )

            cur.value = successor.value
            self._replace_slot(path, successor._right)

        self._len -= 1
        self._retrace(path)
        return result

    def get(self, value: T) -> Optional[T]:
        """Return the stored value equal to the given one, or None.

        Raises ValueError if value is None.
        """
        _check_argument(value)

        cur = self._root
        while cur is not None:
            if value == cur.value:
                return cur.value
            elif value < cur.value:
                cur = cur._left
            else:
                cur = cur._right

        return None

    def contains(self, value: T) -> bool:
        return self.get(value) is not None

    def is_empty(self) -> bool:
        return self._len == 0

    def size(self) -> int:
        return self._len

    def height(self) -> int:
        """Height of the root node; 0 for a single node and -1 if empty."""
        if self._root is None:
            return -1
        return self._root._height

    def clear(self):
        self._root = None
        self._len = 0

    def preorder(self) -> TraversalIter[T]:
        return TraversalIter(TraversalIter.PREORDER, self._root)

    def postorder(self) -> TraversalIter[T]:
        return TraversalIter(TraversalIter.POSTORDER, self._root)

    def inorder(self) -> TraversalIter[T]:
        return TraversalIter(TraversalIter.INORDER, self._root)

    def levelorder(self) -> TraversalIter[T]:
        return TraversalIter(TraversalIter.LEVELORDER, self._root)

    def print(self) -> str:
        if self._root is not None:
            return self._root._print_recursive(0)
        else:
            return "<empty tree>"

    def _replace_slot(self, path: Path, child: Optional[AVLNode[T]]):
        # Put child where the last node of the path points to, or at the root
        # if the path is empty.
        if len(path) > 0:
            parent, direction = path[-1]
            parent._set_child(direction, child)
        else:
            self._root = child

    def _link(
        self, parent: Optional[AVLNode[T]], direction: Optional[int], child: AVLNode[T]
    ):
        if parent is None:
            self._root = child
        else:
            parent._set_child(direction, child)

    def _rotate_right(
        self, target: AVLNode[T], parent: Optional[AVLNode[T]], direction: Optional[int]
    ):
        pivot = target._rotate_right()
        if pivot is not None:
            self._link(parent, direction, pivot)

    def _rotate_left(
        self, target: AVLNode[T], parent: Optional[AVLNode[T]], direction: Optional[int]
    ):
        pivot = target._rotate_left()
        if pivot is not None:
            self._link(parent, direction, pivot)

    def _rebalance(
        self, target: AVLNode[T], parent: Optional[AVLNode[T]], direction: Optional[int]
    ):
        if target._balance > 1:
            # Left-heavy. Left-right case: straighten out the left child first.
            if target._left._balance < 0:
                self._rotate_left(target._left, target, AVLNode.LEFT)
            self._rotate_right(target, parent, direction)
        elif target._balance < -1:
            # Right-heavy. Right-left case: straighten out the right child first.
            if target._right._balance > 0:
                self._rotate_right(target._right, target, AVLNode.RIGHT)
            self._rotate_left(target, parent, direction)

    def _retrace(self, path: Path):
        # Walk back up from the deepest recorded ancestor. Rotations below an
        # ancestor only rewire that ancestor's children, so each (parent,
        # direction) entry still points at the node below it when reached.
        for i in range(len(path) - 1, 0, -1):
            cur = path[i][0]
            parent, direction = path[i - 1]
            cur._update_metadata()
            self._rebalance(cur, parent, direction)

        if self._root is not None:
            self._root._update_metadata()
            self._rebalance(self._root, None, None)

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __iter__(self) -> TraversalIter[T]:
        return self.inorder()

    def __len__(self) -> int:
        return self._len

    def __repr__(self) -> str:
        return "AVLTree({!r})".format(list(self.inorder()))
