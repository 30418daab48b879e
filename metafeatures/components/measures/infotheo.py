from __future__ import annotations

"""Information-theoretic measures on integer-coded categorical attributes.

All entropies are in bits.
"""

from dataclasses import dataclass
from typing import Any, List

import numpy as np

from metafeatures.core.dataset import Dataset
from metafeatures.core.transforms import categorical_matrix, class_codes


@dataclass(frozen=True)
class CategoricalData:
    X: np.ndarray  # (n, p) int codes
    y: np.ndarray  # class codes
    names: List[str]


def prepare(dataset: Dataset, options: Any, rngm: Any = None) -> CategoricalData:
    X, names = categorical_matrix(dataset, discretize_numeric=bool(options.transform))
    y, _ = class_codes(dataset)
    return CategoricalData(X=X, y=y, names=names)


def entropy(codes: np.ndarray) -> float:
    _, counts = np.unique(codes, return_counts=True)
    p = counts / counts.sum()
    return float(-np.sum(p * np.log2(p)))


def _joint_codes(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return a.astype(np.int64) * (int(b.max()) + 1) + b.astype(np.int64)


def concentration(x: np.ndarray, y: np.ndarray) -> float:
    """Goodman-Kruskal concentration coefficient of ``x`` predicting ``y``."""
    _, xi = np.unique(x, return_inverse=True)
    _, yi = np.unique(y, return_inverse=True)
    table = np.zeros((xi.max() + 1, yi.max() + 1))
    np.add.at(table, (xi.ravel(), yi.ravel()), 1.0)
    pi = table / table.sum()
    row = pi.sum(axis=1)
    col = pi.sum(axis=0)
    denom = 1.0 - np.sum(col**2)
    if denom <= 0:
        return float("nan")
    return float((np.sum(pi**2 / row[:, None]) - np.sum(col**2)) / denom)


def _require_attributes(data: CategoricalData) -> None:
    if data.X.shape[1] == 0:
        raise ValueError("needs at least one categorical attribute")


def attr_conc(data: CategoricalData) -> np.ndarray:
    """Concentration for every ordered pair of distinct attributes."""
    p = data.X.shape[1]
    return np.asarray(
        [concentration(data.X[:, i], data.X[:, j]) for i in range(p) for j in range(p) if i != j],
        dtype=float,
    )


def attr_ent(data: CategoricalData) -> np.ndarray:
    return np.asarray([entropy(col) for col in data.X.T], dtype=float)


def class_conc(data: CategoricalData) -> np.ndarray:
    return np.asarray([concentration(col, data.y) for col in data.X.T], dtype=float)


def class_ent(data: CategoricalData) -> float:
    return entropy(data.y)


def joint_ent(data: CategoricalData) -> np.ndarray:
    return np.asarray([entropy(_joint_codes(col, data.y)) for col in data.X.T], dtype=float)


def mut_inf(data: CategoricalData) -> np.ndarray:
    h_y = entropy(data.y)
    return np.asarray(
        [entropy(col) + h_y - entropy(_joint_codes(col, data.y)) for col in data.X.T],
        dtype=float,
    )


def eq_num_attr(data: CategoricalData) -> float:
    """Class entropy over mean mutual information."""
    _require_attributes(data)
    return class_ent(data) / float(np.mean(mut_inf(data)))


def ns_ratio(data: CategoricalData) -> float:
    """Noise-to-signal ratio of the attributes."""
    _require_attributes(data)
    mi = float(np.mean(mut_inf(data)))
    return (float(np.mean(attr_ent(data))) - mi) / mi
