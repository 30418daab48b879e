from __future__ import annotations

"""Model-based measures: one decision tree per call, then structural descriptors."""

from typing import Any

from metafeatures.components.trees.descriptor import TreeDescriptor
from metafeatures.components.trees.induction import induce_tree
from metafeatures.core.dataset import Dataset
from metafeatures.core.transforms import numeric_matrix
from metafeatures.runtime.random.rng import RngManager


def prepare(dataset: Dataset, options: Any, rngm: RngManager) -> TreeDescriptor:
    X, _ = numeric_matrix(dataset, encode_categorical=True)
    tree = induce_tree(
        X,
        dataset.y,
        classes=dataset.classes.tolist(),
        random_state=rngm.seed_for("model.based/tree"),
    )
    return TreeDescriptor(tree)
