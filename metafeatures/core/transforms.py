from __future__ import annotations

"""Pure dataset transformations.

Each function returns a new array derived from a :class:`Dataset`; the
dataset itself is left untouched. Which transformation a group uses is
controlled by its explicit ``transform`` option.
"""

import math
from typing import List, Tuple

import numpy as np
from sklearn.preprocessing import OneHotEncoder

from metafeatures.core.dataset import Dataset


def numeric_matrix(dataset: Dataset, *, encode_categorical: bool = True) -> Tuple[np.ndarray, List[str]]:
    """Numeric view of the dataset.

    Numeric columns are kept as-is. Categorical columns are dummy coded
    (first level dropped) when ``encode_categorical`` is true and dropped
    otherwise. Returns ``(matrix, column_names)``.
    """

    num = dataset.numeric()
    names = [dataset.attribute_names[j] for j in dataset.numeric_index]

    cat_idx = dataset.categorical_index
    if not encode_categorical or not cat_idx:
        return num, names

    enc = OneHotEncoder(drop="first", sparse_output=False, handle_unknown="error")
    cat_names = [dataset.attribute_names[j] for j in cat_idx]
    dummies = enc.fit_transform(dataset.categorical())
    dummy_names = [str(n) for n in enc.get_feature_names_out(cat_names)]

    return np.hstack([num, np.asarray(dummies, dtype=float)]), names + dummy_names


def sturges_bins(n: int) -> int:
    """Number of equal-width bins by Sturges' rule."""
    return max(1, int(math.ceil(math.log2(max(n, 1)) + 1)))


def equal_width_codes(values: np.ndarray, n_bins: int) -> np.ndarray:
    """Map a numeric vector onto ``0..n_bins-1`` equal-width bin codes.

    The right-most bin is closed. Constant vectors map to a single code.
    """

    v = np.asarray(values, dtype=float).ravel()
    finite = v[np.isfinite(v)]
    if finite.size == 0:
        return np.zeros(v.shape, dtype=int)
    lo, hi = float(finite.min()), float(finite.max())
    if hi <= lo:
        return np.zeros(v.shape, dtype=int)
    edges = np.linspace(lo, hi, int(n_bins) + 1)
    codes = np.searchsorted(edges[1:-1], v, side="right")
    return np.clip(codes, 0, int(n_bins) - 1).astype(int)


def categorical_matrix(dataset: Dataset, *, discretize_numeric: bool = True) -> Tuple[np.ndarray, List[str]]:
    """Categorical view of the dataset as integer codes.

    Categorical columns are coded by sorted level. Numeric columns are
    discretized with :func:`equal_width_codes` (Sturges bins) when
    ``discretize_numeric`` is true and dropped otherwise.
    """

    n = dataset.n_instances
    cols: List[np.ndarray] = []
    names: List[str] = []
    n_bins = sturges_bins(n)
    for j, kind in enumerate(dataset.kinds):
        col = dataset.X[:, j]
        if kind == "categorical":
            _, codes = np.unique(np.asarray(col, dtype=str), return_inverse=True)
            cols.append(codes.astype(int).ravel())
        elif discretize_numeric:
            cols.append(equal_width_codes(np.asarray(col, dtype=float), n_bins))
        else:
            continue
        names.append(dataset.attribute_names[j])

    if not cols:
        return np.empty((n, 0), dtype=int), names
    return np.column_stack(cols), names


def class_codes(dataset: Dataset) -> Tuple[np.ndarray, np.ndarray]:
    """Integer-coded target, codes following first-appearance class order."""

    classes = dataset.classes
    lookup = {c: i for i, c in enumerate(classes.tolist())}
    codes = np.fromiter((lookup[v] for v in dataset.y.tolist()), dtype=int, count=dataset.n_instances)
    return codes, classes
