from __future__ import annotations

"""General (simple) measures computed on the raw dataset."""

import numpy as np

from metafeatures.core.dataset import Dataset


def _n_distinct(col: np.ndarray) -> int:
    return len(set(col.tolist()))


def attr_to_inst(ds: Dataset) -> float:
    return ds.n_attributes / ds.n_instances


def cat_to_num(ds: Dataset) -> float:
    return len(ds.categorical_index) / len(ds.numeric_index)


def freq_class(ds: Dataset) -> np.ndarray:
    """Relative frequency of each class, classes in first-appearance order."""
    return np.asarray([np.sum(ds.y == c) for c in ds.classes.tolist()], dtype=float) / ds.n_instances


def inst_to_attr(ds: Dataset) -> float:
    return ds.n_instances / ds.n_attributes


def nr_attr(ds: Dataset) -> float:
    return float(ds.n_attributes)


def nr_bin(ds: Dataset) -> float:
    """Number of attributes with exactly two distinct values."""
    return float(sum(1 for j in range(ds.n_attributes) if _n_distinct(ds.X[:, j]) == 2))


def nr_cat(ds: Dataset) -> float:
    return float(len(ds.categorical_index))


def nr_class(ds: Dataset) -> float:
    return float(len(ds.classes))


def nr_inst(ds: Dataset) -> float:
    return float(ds.n_instances)


def nr_num(ds: Dataset) -> float:
    return float(len(ds.numeric_index))


def num_to_cat(ds: Dataset) -> float:
    return len(ds.numeric_index) / len(ds.categorical_index)
