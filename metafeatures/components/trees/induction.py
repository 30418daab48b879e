from __future__ import annotations

from typing import Any, Optional, Sequence

import numpy as np
from sklearn.tree import DecisionTreeClassifier

from .types import InducedTree, SplitPredicate


def induce_tree(
    X: np.ndarray,
    y: np.ndarray,
    *,
    classes: Optional[Sequence[Any]] = None,
    random_state: Optional[int] = None,
) -> InducedTree:
    """Fit a CART tree on (X, y) and convert it to an :class:`InducedTree`.

    ``classes`` fixes the class order reported by the tree (defaults to the
    estimator's sorted ``classes_``).
    """

    X = np.asarray(X, dtype=float)
    y = np.asarray(y).ravel()
    est = DecisionTreeClassifier(random_state=random_state)
    est.fit(X, y)
    return from_sklearn(est, n_instances=X.shape[0], classes=classes)


def from_sklearn(
    estimator: DecisionTreeClassifier,
    *,
    n_instances: int,
    classes: Optional[Sequence[Any]] = None,
) -> InducedTree:
    """Convert a fitted sklearn decision tree into the arena representation."""

    t = estimator.tree_
    left = t.children_left
    right = t.children_right

    children = []
    splits = []
    for i in range(t.node_count):
        if left[i] == right[i]:
            children.append(())
            splits.append(None)
        else:
            children.append((int(left[i]), int(right[i])))
            splits.append(SplitPredicate(attribute=int(t.feature[i]), threshold=float(t.threshold[i])))

    est_classes = np.asarray(estimator.classes_)
    predictions = [est_classes[int(np.argmax(t.value[i][0]))] for i in range(t.node_count)]

    return InducedTree.from_children(
        children,
        n_attributes=int(estimator.n_features_in_),
        n_instances=int(n_instances),
        classes=tuple(classes) if classes is not None else tuple(est_classes.tolist()),
        splits=splits,
        n_samples=[int(v) for v in t.n_node_samples],
        predictions=predictions,
        importances=np.asarray(estimator.feature_importances_, dtype=float),
    )
