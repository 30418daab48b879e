from __future__ import annotations

"""Statistical measures on the numeric attribute matrix.

Per-attribute functions take a float matrix ``X`` (n, p) and return one
value per column. Class-aware functions take a :class:`NumericData`.
"""

from dataclasses import dataclass
from typing import Any, List

import numpy as np
from scipy import stats

from metafeatures.core.dataset import Dataset
from metafeatures.core.transforms import class_codes, numeric_matrix

CORRELATION_THRESHOLD = 0.5
NORMALITY_ALPHA = 0.05
TRIM_FRACTION = 0.2


@dataclass(frozen=True)
class NumericData:
    X: np.ndarray
    y: np.ndarray  # class codes in first-appearance order
    classes: np.ndarray
    names: List[str]

    @property
    def n_classes(self) -> int:
        return int(len(self.classes))


def prepare(dataset: Dataset, options: Any, rngm: Any = None) -> NumericData:
    X, names = numeric_matrix(dataset, encode_categorical=bool(options.transform))
    y, classes = class_codes(dataset)
    return NumericData(X=X, y=y, classes=classes, names=names)


def _require_attributes(X: np.ndarray, minimum: int = 1) -> None:
    if X.shape[1] < minimum:
        raise ValueError(f"needs at least {minimum} numeric attribute(s); got {X.shape[1]}")


def _upper(m: np.ndarray) -> np.ndarray:
    m = np.atleast_2d(m)
    return m[np.triu_indices(m.shape[0], k=1)]


# -- per-attribute -----------------------------------------------------------


def cor(X: np.ndarray) -> np.ndarray:
    """Absolute Pearson correlation of every attribute pair."""
    if X.shape[1] < 2:
        return np.empty(0)
    with np.errstate(invalid="ignore", divide="ignore"):
        return np.abs(_upper(np.corrcoef(X, rowvar=False)))


def cov(X: np.ndarray) -> np.ndarray:
    """Absolute covariance of every attribute pair."""
    if X.shape[1] < 2:
        return np.empty(0)
    return np.abs(_upper(np.cov(X, rowvar=False, ddof=1)))


def eigenvalues(X: np.ndarray) -> np.ndarray:
    """Eigenvalues of the covariance matrix, largest first."""
    _require_attributes(X)
    c = np.atleast_2d(np.cov(X, rowvar=False, ddof=1))
    return np.linalg.eigvalsh(c)[::-1]


def g_mean(X: np.ndarray) -> np.ndarray:
    out = []
    for col in X.T:
        if np.any(col < 0):
            out.append(np.nan)
        elif np.any(col == 0):
            out.append(0.0)
        else:
            out.append(float(np.exp(np.mean(np.log(col)))))
    return np.asarray(out, dtype=float)


def h_mean(X: np.ndarray) -> np.ndarray:
    return np.asarray([stats.hmean(col) if np.all(col > 0) else np.nan for col in X.T], dtype=float)


def iq_range(X: np.ndarray) -> np.ndarray:
    return np.atleast_1d(stats.iqr(X, axis=0))


def kurtosis(X: np.ndarray) -> np.ndarray:
    return np.asarray([stats.kurtosis(col) if np.ptp(col) > 0 else np.nan for col in X.T], dtype=float)


def mad(X: np.ndarray) -> np.ndarray:
    return np.atleast_1d(stats.median_abs_deviation(X, axis=0, scale="normal"))


def maximum(X: np.ndarray) -> np.ndarray:
    return np.max(X, axis=0)


def mean(X: np.ndarray) -> np.ndarray:
    return np.mean(X, axis=0)


def median(X: np.ndarray) -> np.ndarray:
    return np.median(X, axis=0)


def minimum(X: np.ndarray) -> np.ndarray:
    return np.min(X, axis=0)


def value_range(X: np.ndarray) -> np.ndarray:
    return np.ptp(X, axis=0)


def sd(X: np.ndarray) -> np.ndarray:
    return np.std(X, axis=0, ddof=1)


def skewness(X: np.ndarray) -> np.ndarray:
    return np.asarray([stats.skew(col) if np.ptp(col) > 0 else np.nan for col in X.T], dtype=float)


def sparsity(X: np.ndarray) -> np.ndarray:
    n = X.shape[0]
    if n < 2:
        return np.full(X.shape[1], np.nan)
    return np.asarray([(n / np.unique(col).size - 1.0) / (n - 1.0) for col in X.T], dtype=float)


def t_mean(X: np.ndarray) -> np.ndarray:
    return np.atleast_1d(stats.trim_mean(X, TRIM_FRACTION, axis=0))


def var(X: np.ndarray) -> np.ndarray:
    return np.var(X, axis=0, ddof=1)


# -- dataset-level -----------------------------------------------------------


def nr_cor_attr(data: NumericData) -> float:
    """Fraction of attribute pairs with absolute correlation >= 0.5."""
    _require_attributes(data.X, 2)
    c = cor(data.X)
    return float(np.sum(c >= CORRELATION_THRESHOLD)) / c.size


def nr_norm(data: NumericData) -> float:
    """Number of attributes not rejected by Shapiro-Wilk at alpha=0.05."""
    _require_attributes(data.X)
    if data.X.shape[0] < 3:
        raise ValueError("Shapiro-Wilk needs at least 3 instances")
    count = 0
    for col in data.X.T:
        if np.ptp(col) == 0:
            continue
        if stats.shapiro(col).pvalue > NORMALITY_ALPHA:
            count += 1
    return float(count)


def nr_outliers(data: NumericData) -> float:
    """Number of attributes with at least one value outside the Tukey fences."""
    _require_attributes(data.X)
    q1, q3 = np.percentile(data.X, [25, 75], axis=0)
    iqr = q3 - q1
    lo, hi = q1 - 1.5 * iqr, q3 + 1.5 * iqr
    return float(np.sum(np.any((data.X < lo) | (data.X > hi), axis=0)))


def _discriminant_eigenvalues(data: NumericData) -> np.ndarray:
    """Eigenvalues of W^-1 B, largest first, one per discriminant function."""
    _require_attributes(data.X)
    X = data.X
    grand = X.mean(axis=0)
    p = X.shape[1]
    within = np.zeros((p, p))
    between = np.zeros((p, p))
    for c in range(data.n_classes):
        Xc = X[data.y == c]
        mc = Xc.mean(axis=0)
        centered = Xc - mc
        within += centered.T @ centered
        diff = (mc - grand)[:, None]
        between += Xc.shape[0] * (diff @ diff.T)
    eig = np.linalg.eigvals(np.linalg.pinv(within) @ between).real
    n_disc = min(data.n_classes - 1, p)
    return np.clip(np.sort(eig)[::-1][:n_disc], 0.0, None)


def can_cor(data: NumericData) -> np.ndarray:
    """Canonical correlations between the attributes and the class."""
    lam = _discriminant_eigenvalues(data)
    return np.sqrt(lam / (1.0 + lam))


def nr_disc(data: NumericData) -> float:
    """Number of discriminant functions."""
    return float(_discriminant_eigenvalues(data).size)


def w_lambda(data: NumericData) -> float:
    """Wilks' lambda."""
    lam = _discriminant_eigenvalues(data)
    return float(np.prod(1.0 / (1.0 + lam)))


def gravity(data: NumericData) -> float:
    """Euclidean distance between the majority and minority class centroids."""
    _require_attributes(data.X)
    counts = np.bincount(data.y, minlength=data.n_classes)
    majority = int(np.argmax(counts))
    rest = [c for c in range(data.n_classes) if c != majority]
    minority = min(rest, key=lambda c: counts[c])
    a = data.X[data.y == majority].mean(axis=0)
    b = data.X[data.y == minority].mean(axis=0)
    return float(np.linalg.norm(a - b))


def sd_ratio(data: NumericData) -> float:
    """Homogeneity of class covariances (Box's M statistic)."""
    _require_attributes(data.X)
    X = data.X
    n, p = X.shape
    q = data.n_classes
    sizes = np.bincount(data.y, minlength=q)
    if np.any(sizes < 2):
        raise ValueError("every class needs at least two instances")

    covs = [np.atleast_2d(np.cov(X[data.y == c], rowvar=False, ddof=1)) for c in range(q)]
    pooled = sum((sizes[c] - 1) * covs[c] for c in range(q)) / (n - q)

    sign, logdet_pooled = np.linalg.slogdet(pooled)
    if sign <= 0:
        raise np.linalg.LinAlgError("pooled covariance matrix is singular")
    logdets = []
    for c in range(q):
        sign_c, logdet_c = np.linalg.slogdet(covs[c])
        if sign_c <= 0:
            raise np.linalg.LinAlgError(f"covariance of class {data.classes[c]!r} is singular")
        logdets.append(logdet_c)

    gamma = 1.0 - (2.0 * p**2 + 3.0 * p - 1.0) / (6.0 * (p + 1.0) * (q - 1.0)) * (
        np.sum(1.0 / (sizes - 1.0)) - 1.0 / (n - q)
    )
    m_stat = gamma * np.sum((sizes - 1.0) * (logdet_pooled - np.asarray(logdets)))
    return float(np.exp(m_stat / (p * np.sum(sizes - 1.0))))
