from __future__ import annotations

import logging
from collections import deque
from typing import Generic, TypeVar, Optional, List

T = TypeVar("T")

logger = logging.getLogger(__name__)


class AVLNode(Generic[T]):
    LEFT = 0
    RIGHT = 1

    def __init__(self, value: T):
        self.value: T = value

        self._left: Optional[AVLNode[T]] = None
        self._right: Optional[AVLNode[T]] = None
        self._height: int = 0
        self._balance: int = 0

    @property
    def left(self) -> Optional[AVLNode[T]]:
        return self._left

    @property
    def right(self) -> Optional[AVLNode[T]]:
        return self._right

    @property
    def height(self) -> int:
        """Cached height of the subtree rooted at this node.

        A childless node has height 0. Only valid after the node's metadata
        has been recomputed following the last structural change below it.
        """
        return self._height

    @property
    def balance_factor(self) -> int:
        """Cached height(left) - height(right); a missing child counts as -1."""
        return self._balance

    def _set_child(self, direction: int, child: Optional[AVLNode[T]]):
        if direction == AVLNode.LEFT:
            self._left = child
        else:
            self._right = child

    def _update_metadata(self):
        left_height = -1 if self._left is None else self._left._height
        right_height = -1 if self._right is None else self._right._height

        self._balance = left_height - right_height
        self._height = max(left_height, right_height) + 1

    def _rotate_right(self) -> Optional[AVLNode[T]]:
        """Rotate this node clockwise and return the pivot that replaces it.

        The caller is responsible for linking the returned pivot into this
        node's former slot. Returns None (and does nothing) when there is no
        left child to pivot around.
        """
        pivot = self._left
        if pivot is None:
            return None

        logger.debug("right rotation: %r pivots over %r", pivot.value, self.value)

        self._left = pivot._right
        pivot._right = self

        # target before pivot: the pivot's height depends on the target's
        self._update_metadata()
        pivot._update_metadata()
        return pivot

    def _rotate_left(self) -> Optional[AVLNode[T]]:
        pivot = self._right
        if pivot is None:
            return None

        logger.debug("left rotation: %r pivots over %r", pivot.value, self.value)

        self._right = pivot._left
        pivot._left = self

        self._update_metadata()
        pivot._update_metadata()
        return pivot

    def _preorder(self, out: List[T]):
        out.append(self.value)
        if self._left is not None:
            self._left._preorder(out)
        if self._right is not None:
            self._right._preorder(out)

    def _postorder(self, out: List[T]):
        if self._left is not None:
            self._left._postorder(out)
        if self._right is not None:
            self._right._postorder(out)
        out.append(self.value)

    def _inorder(self, out: List[T]):
        if self._left is not None:
            self._left._inorder(out)
        out.append(self.value)
        if self._right is not None:
            self._right._inorder(out)

    def _levelorder(self, out: List[T]):
        queue = deque([self])
        while len(queue) > 0:
            cur = queue.popleft()
            out.append(cur.value)
            if cur._left is not None:
                queue.append(cur._left)
            if cur._right is not None:
                queue.append(cur._right)

    def _print_recursive(self, level: int) -> str:
        ret = ""
        if self._right is not None:
            ret = self._right._print_recursive(level + 1)

        ret += ("    " * level) + self._print_node() + "\n"

        if self._left is not None:
            ret += self._left._print_recursive(level + 1)

        return ret

    def _print_node(self) -> str:
        return "{} (h={}, bf={})".format(self.value, self._height, self._balance)

    def __repr__(self) -> str:
        return "AVLNode({!r})".format(self.value)
