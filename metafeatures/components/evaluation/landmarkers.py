from __future__ import annotations

"""Simple landmarking learners.

The attribute-selecting learners rank attributes by the impurity-based
importance of a full decision tree fitted on the *training* rows only, then
fit a one-level stump or a 1-NN on the selected attributes.
"""

from typing import Literal, Optional

import numpy as np
from sklearn.base import BaseEstimator, ClassifierMixin
from sklearn.neighbors import KNeighborsClassifier
from sklearn.tree import DecisionTreeClassifier

StumpSelection = Literal["best", "worst", "random"]


def attribute_importance(X: np.ndarray, y: np.ndarray, *, random_state: Optional[int] = None) -> np.ndarray:
    """Impurity-based importance of each column of ``X``."""
    tree = DecisionTreeClassifier(random_state=random_state)
    tree.fit(np.asarray(X, dtype=float), np.asarray(y).ravel())
    return np.asarray(tree.feature_importances_, dtype=float)


class AttributeStump(ClassifierMixin, BaseEstimator):
    """Depth-1 decision tree restricted to a single selected attribute.

    selection="best"   -> the most important attribute
    selection="worst"  -> the least important attribute
    selection="random" -> an attribute drawn from ``random_state``
    """

    def __init__(self, selection: StumpSelection = "best", random_state: Optional[int] = None):
        self.selection = selection
        self.random_state = random_state

    def _select(self, X: np.ndarray, y: np.ndarray) -> int:
        if self.selection == "random":
            return int(np.random.default_rng(self.random_state).integers(X.shape[1]))
        imp = attribute_importance(X, y, random_state=self.random_state)
        if self.selection == "best":
            return int(np.argmax(imp))
        if self.selection == "worst":
            return int(np.argmin(imp))
        raise ValueError(f"Unknown stump selection {self.selection!r}")

    def fit(self, X, y):
        X = np.asarray(X, dtype=float)
        y = np.asarray(y).ravel()
        self.attribute_ = self._select(X, y)
        self.stump_ = DecisionTreeClassifier(max_depth=1, random_state=self.random_state)
        self.stump_.fit(X[:, [self.attribute_]], y)
        self.classes_ = self.stump_.classes_
        return self

    def predict(self, X):
        X = np.asarray(X, dtype=float)
        return self.stump_.predict(X[:, [self.attribute_]])


class EliteNearestNeighbor(ClassifierMixin, BaseEstimator):
    """1-NN on the attributes with positive importance (all attributes if none)."""

    def __init__(self, random_state: Optional[int] = None):
        self.random_state = random_state

    def fit(self, X, y):
        X = np.asarray(X, dtype=float)
        y = np.asarray(y).ravel()
        imp = attribute_importance(X, y, random_state=self.random_state)
        elite = np.flatnonzero(imp > 0)
        self.attributes_ = elite if elite.size else np.arange(X.shape[1])
        self.knn_ = KNeighborsClassifier(n_neighbors=1)
        self.knn_.fit(X[:, self.attributes_], y)
        self.classes_ = self.knn_.classes_
        return self

    def predict(self, X):
        X = np.asarray(X, dtype=float)
        return self.knn_.predict(X[:, self.attributes_])
