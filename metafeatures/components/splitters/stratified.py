from __future__ import annotations

from typing import Iterator, Optional

import numpy as np
from numpy.random import Generator

from metafeatures.core.dataset import unique_in_order
from metafeatures.core.errors import InsufficientData
from metafeatures.components.splitters.types import Split


def assign_folds(
    y: np.ndarray,
    n_folds: int,
    *,
    rng: Optional[Generator] = None,
) -> np.ndarray:
    """Stratified fold assignment.

    Rows are grouped by class (classes in first-appearance order). Within
    each class, rows are dealt round-robin over the ``n_folds`` buckets; the
    dealing position carries over from one class to the next so remainders
    spread evenly. With ``rng`` the rows of each class are shuffled first.

    Returns an int array mapping row index -> fold id in ``[0, n_folds)``.

    Raises
    ------
    InsufficientData
        If ``n_folds < 2`` or any class has fewer rows than ``n_folds``.
    """

    y = np.asarray(y).ravel()
    k = int(n_folds)
    if k < 2:
        raise InsufficientData(f"number of folds must be >= 2; got {k}")
    if y.shape[0] < k:
        raise InsufficientData(
            f"{y.shape[0]} rows cannot fill {k} folds", context={"n_rows": int(y.shape[0]), "folds": k}
        )

    folds = np.full(y.shape[0], -1, dtype=int)
    position = 0
    for label in unique_in_order(y).tolist():
        rows = np.flatnonzero(y == label)
        if rows.size < k:
            raise InsufficientData(
                f"class {label!r} has {rows.size} rows, fewer than {k} folds",
                context={"class": label, "n_rows": int(rows.size), "folds": k},
            )
        if rng is not None:
            rows = rng.permutation(rows)
        folds[rows] = (position + np.arange(rows.size)) % k
        position = (position + rows.size) % k
    return folds


def generate_folds(X: np.ndarray, y: np.ndarray, folds: np.ndarray) -> Iterator[Split]:
    """Yield one :class:`Split` per fold id, in order ``0..k-1``."""

    X = np.asarray(X)
    y = np.asarray(y).ravel()
    folds = np.asarray(folds, dtype=int).ravel()
    if X.shape[0] != y.shape[0] or folds.shape[0] != y.shape[0]:
        raise ValueError(
            f"X, y and fold assignment length mismatch: {X.shape[0]}, {y.shape[0]}, {folds.shape[0]}"
        )

    for f in range(int(folds.max()) + 1):
        test_mask = folds == f
        idx_tr = np.flatnonzero(~test_mask)
        idx_te = np.flatnonzero(test_mask)
        yield Split(
            fold=f,
            Xtr=X[idx_tr],
            Xte=X[idx_te],
            ytr=y[idx_tr],
            yte=y[idx_te],
            idx_tr=idx_tr,
            idx_te=idx_te,
        )
