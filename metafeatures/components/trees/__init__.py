from .descriptor import DESCRIPTORS, TreeDescriptor, describe
from .induction import from_sklearn, induce_tree
from .types import InducedTree, SplitPredicate, TreeNode

__all__ = [
    "DESCRIPTORS",
    "InducedTree",
    "SplitPredicate",
    "TreeDescriptor",
    "TreeNode",
    "describe",
    "from_sklearn",
    "induce_tree",
]
