from __future__ import annotations

"""Histogram + quantile primitives for summarization.

Both summarizers emit a fixed number of outputs regardless of the input
length, so downstream tables keep a stable width:

* ``histogram`` always yields ``bins`` values.
* ``quantile`` always yields one value per requested cut point.

An empty input yields NaN in every position.
"""

from typing import Any, List, Optional, Sequence, Tuple

import numpy as np

from metafeatures.core.errors import InvalidSummaryParams

DEFAULT_QUANTILES: Tuple[float, ...] = (0.0, 0.25, 0.5, 0.75, 1.0)


def _as_clean_1d(values: Any) -> np.ndarray:
    v = np.asarray(values, dtype=float).reshape(-1)
    return v[~np.isnan(v)]


def check_histogram_params(bins: Any, lo: Optional[float], hi: Optional[float]) -> int:
    """Validate histogram parameters; return the number of bins."""

    n_bins = int(bins)
    if n_bins < 1:
        raise InvalidSummaryParams("histogram", f"bins must be >= 1; got {bins!r}")
    if lo is not None and hi is not None and float(lo) > float(hi):
        raise InvalidSummaryParams("histogram", f"range is empty: min={lo} > max={hi}")
    return n_bins


def histogram_counts(
    values: Any,
    *,
    bins: int = 10,
    value_range: Optional[Tuple[Optional[float], Optional[float]]] = None,
    normalize: bool = False,
) -> List[float]:
    """Equal-width histogram over ``[min, max]``.

    Bucket ``i`` covers ``[e_i, e_{i+1})``; the last bucket is closed on the
    right. Missing range bounds default to the observed min/max, but never
    cross the bound that was given. Values outside the range are clipped
    into the boundary buckets.

    Raises
    ------
    InvalidSummaryParams
        If ``bins < 1`` or both bounds are given with ``min > max``.
    """

    lo_in, hi_in = value_range if value_range is not None else (None, None)
    n_bins = check_histogram_params(bins, lo_in, hi_in)

    v = _as_clean_1d(values)
    if v.size == 0:
        return [float("nan")] * n_bins

    finite = v[np.isfinite(v)]
    lo = float(lo_in) if lo_in is not None else float(np.min(finite)) if finite.size else 0.0
    hi = float(hi_in) if hi_in is not None else float(np.max(finite)) if finite.size else 0.0
    if lo_in is None:
        lo = min(lo, hi)
    if hi_in is None:
        hi = max(hi, lo)
    if hi == lo:
        # degenerate: widen slightly
        eps = 1e-9 if lo == 0 else abs(lo) * 1e-9
        lo -= eps
        hi += eps

    counts, _ = np.histogram(np.clip(v, lo, hi), bins=n_bins, range=(lo, hi))
    counts = counts.astype(float)
    if normalize:
        counts = counts / float(v.size)
    return [float(c) for c in counts.tolist()]


def quantile_values(values: Any, *, qs: Sequence[float] = DEFAULT_QUANTILES) -> List[float]:
    """Quantiles of ``values`` at each cut point in ``qs`` (linear interpolation)."""

    v = _as_clean_1d(values)
    if v.size == 0:
        return [float("nan")] * len(qs)
    qv = np.quantile(v, np.asarray(list(qs), dtype=float))
    return [float(x) for x in np.atleast_1d(qv).tolist()]


__all__ = [
    "DEFAULT_QUANTILES",
    "check_histogram_params",
    "histogram_counts",
    "quantile_values",
]
