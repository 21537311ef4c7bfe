import logging

from . import node
from . import iter
from . import tree
from . import verify

from .node import AVLNode
from .iter import TraversalIter
from .tree import AVLTree

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AVLNode",
    "AVLTree",
    "TraversalIter",
]
