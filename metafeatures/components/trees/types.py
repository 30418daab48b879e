from __future__ import annotations

"""Arena representation of an induced decision tree.

Nodes live in a flat tuple and refer to each other by index; the root is
node 0. The split predicate is opaque to the structural descriptor, which
only looks at parent/child links, depths and per-node sample counts.
"""

from collections import deque
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Tuple

import numpy as np


@dataclass(frozen=True)
class SplitPredicate:
    attribute: int
    threshold: float


@dataclass(frozen=True)
class TreeNode:
    index: int
    parent: Optional[int]
    depth: int
    children: Tuple[int, ...] = ()
    split: Optional[SplitPredicate] = None
    n_samples: int = 0
    prediction: Optional[Any] = None

    @property
    def is_leaf(self) -> bool:
        return not self.children


@dataclass(frozen=True)
class InducedTree:
    nodes: Tuple[TreeNode, ...]
    n_attributes: int
    n_instances: int
    classes: Tuple[Any, ...] = ()
    importances: Optional[np.ndarray] = None

    def __post_init__(self):
        if not self.nodes:
            raise ValueError("a tree needs at least one node")
        for i, node in enumerate(self.nodes):
            if node.index != i:
                raise ValueError(f"node at position {i} carries index {node.index}")

    @property
    def root(self) -> TreeNode:
        return self.nodes[0]

    def children_of(self, node: TreeNode) -> Tuple[TreeNode, ...]:
        return tuple(self.nodes[c] for c in node.children)

    @classmethod
    def from_children(
        cls,
        children: Sequence[Sequence[int]],
        *,
        n_attributes: int,
        n_instances: int,
        classes: Sequence[Any] = (),
        splits: Optional[Sequence[Optional[SplitPredicate]]] = None,
        n_samples: Optional[Sequence[int]] = None,
        predictions: Optional[Sequence[Any]] = None,
        importances: Optional[Sequence[float]] = None,
    ) -> "InducedTree":
        """Build a tree from per-node child lists (node 0 is the root).

        Parent links and depths are derived by a breadth-first walk; nodes
        not reachable from the root are rejected.
        """

        n = len(children)
        parent: list[Optional[int]] = [None] * n
        depth: list[int] = [-1] * n
        depth[0] = 0
        queue = deque([0])
        while queue:
            i = queue.popleft()
            for c in children[i]:
                if depth[c] != -1:
                    raise ValueError(f"node {c} has more than one parent")
                parent[c] = i
                depth[c] = depth[i] + 1
                queue.append(c)
        if any(d == -1 for d in depth):
            raise ValueError("tree contains nodes unreachable from the root")

        nodes = tuple(
            TreeNode(
                index=i,
                parent=parent[i],
                depth=depth[i],
                children=tuple(int(c) for c in children[i]),
                split=splits[i] if splits is not None else None,
                n_samples=int(n_samples[i]) if n_samples is not None else 0,
                prediction=predictions[i] if predictions is not None else None,
            )
            for i in range(n)
        )
        imp = None if importances is None else np.asarray(importances, dtype=float)
        return cls(
            nodes=nodes,
            n_attributes=int(n_attributes),
            n_instances=int(n_instances),
            classes=tuple(classes),
            importances=imp,
        )
