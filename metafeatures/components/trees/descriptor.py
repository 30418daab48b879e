from __future__ import annotations

"""Structural descriptors of an induced decision tree.

Everything here is computed by walking the arena of an
:class:`~metafeatures.components.trees.types.InducedTree`; how the tree was
induced does not matter.

Shape measures use the probability of reaching a leaf by a random walk from
the root, ``p = 2 ** -depth``.
"""

from collections import Counter, deque
from typing import Callable, Dict, Iterable, List, Optional

import numpy as np

from .types import InducedTree, TreeNode


class TreeDescriptor:
    """Structural statistics of one tree; the traversal is done once."""

    def __init__(self, tree: InducedTree):
        self.tree = tree
        self._order: List[TreeNode] = list(self._walk())
        self._leaves: List[TreeNode] = [n for n in self._order if n.is_leaf]

    def _walk(self) -> Iterable[TreeNode]:
        # breadth-first from the root
        queue = deque([self.tree.root])
        while queue:
            node = queue.popleft()
            yield node
            queue.extend(self.tree.children_of(node))

    # -- counts ---------------------------------------------------------

    def nodes(self) -> float:
        """Total number of nodes, leaves included."""
        return float(len(self._order))

    def leaves(self) -> float:
        return float(len(self._leaves))

    def nodes_per_attr(self) -> float:
        return self.nodes() / self.tree.n_attributes

    def nodes_per_inst(self) -> float:
        return self.nodes() / self.tree.n_instances

    # -- depth / branch family ------------------------------------------

    def tree_depth(self) -> np.ndarray:
        """Multiset of leaf depths."""
        return np.asarray([n.depth for n in self._leaves], dtype=float)

    def leaves_branch(self) -> np.ndarray:
        """Branch length (edges on the root-to-leaf path) of every leaf."""
        lengths = []
        for leaf in self._leaves:
            steps, node = 0, leaf
            while node.parent is not None:
                node = self.tree.nodes[node.parent]
                steps += 1
            lengths.append(steps)
        return np.asarray(lengths, dtype=float)

    def nodes_per_level(self) -> np.ndarray:
        counts = Counter(n.depth for n in self._order)
        return np.asarray([counts.get(d, 0) for d in range(max(counts) + 1)], dtype=float)

    def tree_shape(self) -> np.ndarray:
        """Per leaf ``-p * log2(p)`` with ``p = 2 ** -depth``."""
        d = self.tree_depth()
        return d * np.power(2.0, -d)

    def tree_imbalance(self) -> np.ndarray:
        """Per distinct leaf depth, ``-q * log2(q)`` of the mass ``q`` reaching it."""
        counts = Counter(n.depth for n in self._leaves)
        out = []
        for depth in sorted(counts):
            q = min(1.0, counts[depth] * 2.0 ** -depth)
            out.append(0.0 if q in (0.0, 1.0) else -q * np.log2(q))
        return np.asarray(out, dtype=float)

    def leaves_homo(self) -> np.ndarray:
        """Number of leaves divided by each leaf's shape value (zero shapes skipped)."""
        shape = self.tree_shape()
        shape = shape[shape > 0]
        return self.leaves() / shape

    # -- leaf contents --------------------------------------------------

    def leaves_corrob(self) -> np.ndarray:
        """Fraction of training instances reaching each leaf."""
        return np.asarray([n.n_samples for n in self._leaves], dtype=float) / self.tree.n_instances

    def leaves_per_class(self) -> np.ndarray:
        """Fraction of leaves predicting each class (tree class order)."""
        counts = Counter(n.prediction for n in self._leaves)
        return np.asarray([counts.get(c, 0) for c in self.tree.classes], dtype=float) / self.leaves()

    # -- attribute usage ------------------------------------------------

    def nodes_repeated(self) -> np.ndarray:
        """Number of split nodes per attribute, for attributes used at least once."""
        counts = Counter(n.split.attribute for n in self._order if n.split is not None)
        return np.asarray([counts[a] for a in sorted(counts)], dtype=float)

    def var_importance(self) -> np.ndarray:
        if self.tree.importances is None:
            raise ValueError("tree carries no attribute importances")
        return np.asarray(self.tree.importances, dtype=float)


# name -> descriptor method, in registration order
DESCRIPTORS: Dict[str, Callable[[TreeDescriptor], object]] = {
    "leaves": TreeDescriptor.leaves,
    "leavesBranch": TreeDescriptor.leaves_branch,
    "leavesCorrob": TreeDescriptor.leaves_corrob,
    "leavesHomo": TreeDescriptor.leaves_homo,
    "leavesPerClass": TreeDescriptor.leaves_per_class,
    "nodes": TreeDescriptor.nodes,
    "nodesPerAttr": TreeDescriptor.nodes_per_attr,
    "nodesPerInst": TreeDescriptor.nodes_per_inst,
    "nodesPerLevel": TreeDescriptor.nodes_per_level,
    "nodesRepeated": TreeDescriptor.nodes_repeated,
    "treeDepth": TreeDescriptor.tree_depth,
    "treeImbalance": TreeDescriptor.tree_imbalance,
    "treeShape": TreeDescriptor.tree_shape,
    "varImportance": TreeDescriptor.var_importance,
}


def describe(tree: InducedTree, features: Optional[Iterable[str]] = None) -> Dict[str, np.ndarray]:
    """Raw structural measures of ``tree`` keyed by feature name."""

    desc = TreeDescriptor(tree)
    names = list(features) if features is not None else list(DESCRIPTORS)
    out: Dict[str, np.ndarray] = {}
    for name in names:
        if name not in DESCRIPTORS:
            raise KeyError(f"unknown tree descriptor {name!r}")
        out[name] = np.atleast_1d(np.asarray(DESCRIPTORS[name](desc), dtype=float))
    return out
