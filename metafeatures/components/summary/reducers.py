from __future__ import annotations

"""Built-in summarizer functions.

Reducers collapse a sequence to one float. They ignore NaN entries, return
NaN for an empty sequence and return the value itself for a single-element
sequence, so scalar measures pass through any reducer unchanged.
"""

from typing import Any, Callable, List

import numpy as np
from scipy import stats

from .hist import histogram_counts, quantile_values


def _clean(values: Any) -> np.ndarray:
    v = np.asarray(values, dtype=float).reshape(-1)
    return v[~np.isnan(v)]


def reducer(fn: Callable[[np.ndarray], Any]) -> Callable[..., float]:
    """Wrap ``fn(array) -> number`` with the shared empty/single-value rules."""

    def _reduce(values: Any, **_params: Any) -> float:
        v = _clean(values)
        if v.size == 0:
            return float("nan")
        if v.size == 1:
            return float(v[0])
        return float(fn(v))

    _reduce.__name__ = getattr(fn, "__name__", "reducer")
    _reduce.__doc__ = fn.__doc__
    return _reduce


@reducer
def mean(v: np.ndarray) -> float:
    return np.mean(v)


@reducer
def sd(v: np.ndarray) -> float:
    """Sample standard deviation (ddof=1)."""
    return np.std(v, ddof=1)


@reducer
def var(v: np.ndarray) -> float:
    """Sample variance (ddof=1)."""
    return np.var(v, ddof=1)


@reducer
def minimum(v: np.ndarray) -> float:
    return np.min(v)


@reducer
def maximum(v: np.ndarray) -> float:
    return np.max(v)


@reducer
def median(v: np.ndarray) -> float:
    return np.median(v)


@reducer
def skewness(v: np.ndarray) -> float:
    if np.all(v == v[0]):
        return float("nan")
    return stats.skew(v)


@reducer
def kurtosis(v: np.ndarray) -> float:
    """Excess (Fisher) kurtosis."""
    if np.all(v == v[0]):
        return float("nan")
    return stats.kurtosis(v, fisher=True)


def quantile(values: Any, **_params: Any) -> List[float]:
    return quantile_values(values)


def histogram(values: Any, *, bins: int = 10, normalize: bool = False, **params: Any) -> List[float]:
    """Equal-width bucket counts; honours ``min``/``max`` from ``params``."""
    return histogram_counts(
        values,
        bins=bins,
        value_range=(params.get("min"), params.get("max")),
        normalize=bool(normalize),
    )


def non_aggregated(values: Any, **_params: Any) -> List[float]:
    """Every value, in order, including NaN entries."""
    return [float(x) for x in np.asarray(values, dtype=float).reshape(-1).tolist()]
