from __future__ import annotations

"""Dataset container and input coercion.

Conventions
-----------
- X is 2D: (n_instances, n_attributes), rows are instances.
- y is 1D: (n_instances,), a classification target with >= 2 classes.

The :class:`Dataset` is never mutated by the extraction core. Encoders and
discretizers in :mod:`metafeatures.core.transforms` return derived arrays.
"""

from dataclasses import dataclass
from numbers import Real
from typing import Any, Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np

from metafeatures.contracts.choices import AttributeKind
from metafeatures.core.errors import InsufficientData


@dataclass(frozen=True)
class Dataset:
    """Labeled tabular dataset.

    ``X`` is an object array; numeric columns hold floats, categorical
    columns hold strings. ``kinds`` gives the kind of each column.
    """

    X: np.ndarray
    y: np.ndarray
    kinds: Tuple[AttributeKind, ...]
    attribute_names: Tuple[str, ...]

    @property
    def n_instances(self) -> int:
        return int(self.X.shape[0])

    @property
    def n_attributes(self) -> int:
        return int(self.X.shape[1])

    @property
    def numeric_index(self) -> List[int]:
        return [j for j, k in enumerate(self.kinds) if k == "numeric"]

    @property
    def categorical_index(self) -> List[int]:
        return [j for j, k in enumerate(self.kinds) if k == "categorical"]

    @property
    def classes(self) -> np.ndarray:
        """Distinct class labels in order of first appearance."""
        return unique_in_order(self.y)

    def numeric(self) -> np.ndarray:
        """Float matrix of the numeric columns, shape (n, n_numeric)."""
        idx = self.numeric_index
        return np.asarray(self.X[:, idx], dtype=float).reshape(self.n_instances, len(idx))

    def categorical(self) -> np.ndarray:
        """String matrix of the categorical columns, shape (n, n_categorical)."""
        idx = self.categorical_index
        return np.asarray(self.X[:, idx], dtype=str).reshape(self.n_instances, len(idx))


def unique_in_order(values: Iterable[Any]) -> np.ndarray:
    """Distinct values of ``values`` in order of first appearance."""

    arr = np.asarray(values).ravel()
    if arr.size == 0:
        return arr
    _, first = np.unique(arr, return_index=True)
    return arr[np.sort(first)]


def _is_number(v: Any) -> bool:
    return isinstance(v, Real) and not isinstance(v, (bool, np.bool_))


def _infer_kind(col: np.ndarray) -> AttributeKind:
    if col.dtype.kind in "iuf":
        return "numeric"
    if col.dtype.kind == "O" and all(_is_number(v) for v in col.tolist()):
        return "numeric"
    return "categorical"


def _columns_of(X: Any) -> Tuple[List[np.ndarray], Optional[List[str]]]:
    # pandas-like frames keep per-column dtypes; anything else goes through numpy
    if hasattr(X, "columns") and hasattr(X, "__getitem__"):
        names = [str(c) for c in X.columns]
        return [np.asarray(X[c]) for c in X.columns], names

    arr = np.asarray(X)
    if arr.ndim == 1:
        arr = arr[:, None]
    if arr.ndim != 2:
        raise ValueError(f"X must be 2D; got {arr.shape}")
    return [arr[:, j] for j in range(arr.shape[1])], None


def _resolve_categorical(
    categorical: Optional[Sequence[Union[int, str]]],
    names: Sequence[str],
) -> Optional[set[int]]:
    if categorical is None:
        return None
    out: set[int] = set()
    for c in categorical:
        if isinstance(c, str):
            if c not in names:
                raise ValueError(f"categorical attribute {c!r} not found in {list(names)}")
            out.add(list(names).index(c))
        else:
            j = int(c)
            if not 0 <= j < len(names):
                raise ValueError(f"categorical index {j} out of range for {len(names)} attributes")
            out.add(j)
    return out


def make_dataset(
    X: Any,
    y: Any,
    *,
    categorical: Optional[Sequence[Union[int, str]]] = None,
    attribute_names: Optional[Sequence[str]] = None,
) -> Dataset:
    """Coerce raw inputs into a :class:`Dataset`.

    Parameters
    ----------
    X : array-like of shape (n_instances, n_attributes) or a pandas-like frame
    y : array-like of shape (n_instances,)
    categorical : column indices or names to force as categorical. When
        omitted, kinds are inferred from the column dtypes (non-numeric and
        boolean columns are categorical).
    attribute_names : optional explicit column names.

    Raises
    ------
    ValueError
        If shapes are inconsistent.
    InsufficientData
        If there are no instances, no attributes, or fewer than two classes.
    """

    columns, frame_names = _columns_of(X)
    y_arr = np.asarray(y).ravel()

    n_rows = len(y_arr)
    for j, col in enumerate(columns):
        if col.shape[0] != n_rows:
            raise ValueError(f"X and y length mismatch: column {j} has {col.shape[0]} rows vs {n_rows}")

    names = list(attribute_names) if attribute_names is not None else frame_names
    if names is None:
        names = [f"V{j + 1}" for j in range(len(columns))]
    if len(names) != len(columns):
        raise ValueError(f"attribute_names has {len(names)} entries for {len(columns)} attributes")

    if n_rows == 0:
        raise InsufficientData("dataset has no instances")
    if not columns:
        raise InsufficientData("dataset has no attributes")

    forced = _resolve_categorical(categorical, names)
    kinds: List[AttributeKind] = []
    out = np.empty((n_rows, len(columns)), dtype=object)
    for j, col in enumerate(columns):
        kind: AttributeKind = "categorical" if forced is not None and j in forced else _infer_kind(col)
        kinds.append(kind)
        if kind == "numeric":
            out[:, j] = np.asarray(col, dtype=float)
        else:
            out[:, j] = np.asarray(col).astype(str)
    out.setflags(write=False)

    n_classes = len(unique_in_order(y_arr))
    if n_classes < 2:
        raise InsufficientData(f"target must contain at least two classes; got {n_classes}")

    y_arr = y_arr.copy()
    y_arr.setflags(write=False)
    return Dataset(X=out, y=y_arr, kinds=tuple(kinds), attribute_names=tuple(names))


def ensure_dataset(
    X: Any,
    y: Any = None,
    *,
    categorical: Optional[Sequence[Union[int, str]]] = None,
) -> Dataset:
    """Return ``X`` unchanged if it already is a Dataset, otherwise build one."""

    if isinstance(X, Dataset):
        if y is not None:
            raise ValueError("y must not be passed together with a Dataset")
        return X
    if y is None:
        raise ValueError("y is required when X is not a Dataset")
    return make_dataset(X, y, categorical=categorical)
