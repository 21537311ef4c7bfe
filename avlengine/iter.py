from __future__ import annotations

from typing import Generic, TypeVar, Optional, List

from . import node

T = TypeVar("T")


class TraversalIter(Generic[T]):
    """A one-shot iterator over a snapshot of a tree's values.

    The values are copied out of the tree when the iterator is created, so
    mutating the tree afterwards does not affect an iterator already in hand.
    Once exhausted, the iterator stays exhausted.
    """

    PREORDER = 0
    POSTORDER = 1
    INORDER = 2
    LEVELORDER = 3

    def __init__(self, mode: int, root: Optional[node.AVLNode[T]]):
        self._mode: int = mode
        self._values: List[T] = []
        self._pos: int = 0
        self._len: int = 0

        if mode not in (
            TraversalIter.PREORDER,
            TraversalIter.POSTORDER,
            TraversalIter.INORDER,
            TraversalIter.LEVELORDER,
        ):
            raise ValueError("Unknown traversal mode: " + str(mode))

        if root is None:
            return

        if mode == TraversalIter.PREORDER:
            root._preorder(self._values)
        elif mode == TraversalIter.POSTORDER:
            root._postorder(self._values)
        elif mode == TraversalIter.INORDER:
            root._inorder(self._values)
        else:
            root._levelorder(self._values)

        self._len = len(self._values)

    @property
    def mode(self) -> int:
        return self._mode

    def __iter__(self) -> TraversalIter[T]:
        return self

    def __next__(self) -> T:
        if self._pos >= self._len:
            # drop the snapshot once it has been consumed
            self._values = []
            raise StopIteration()

        ret = self._values[self._pos]
        self._pos += 1
        return ret

    def __length_hint__(self) -> int:
        return self._len - self._pos
