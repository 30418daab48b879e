from __future__ import annotations

"""Hard-label classification scores used by the landmarking evaluator."""

from typing import Callable, Dict, Sequence

import numpy as np
from sklearn.metrics import accuracy_score, balanced_accuracy_score, cohen_kappa_score

Scorer = Callable[[np.ndarray, np.ndarray], float]


def _as_1d(a) -> np.ndarray:
    return np.asarray(a).ravel()


def _check_len(y_true: np.ndarray, y_pred: np.ndarray) -> None:
    if y_true.shape[0] != y_pred.shape[0]:
        raise ValueError(f"y_true and y_pred length mismatch: {y_true.shape[0]} vs {y_pred.shape[0]}")


def accuracy(y_true, y_pred) -> float:
    """Fraction of correct predictions."""
    return float(accuracy_score(y_true, y_pred))


def balanced_accuracy(y_true, y_pred) -> float:
    return float(balanced_accuracy_score(y_true, y_pred))


def kappa(y_true, y_pred) -> float:
    """Cohen's kappa; 0.0 when both label vectors are constant and equal."""
    if np.unique(np.concatenate([y_true, y_pred])).size == 1:
        return 0.0
    return float(cohen_kappa_score(y_true, y_pred))


_SCORERS: Dict[str, Scorer] = {
    "accuracy": accuracy,
    "balanced_accuracy": balanced_accuracy,
    "kappa": kappa,
}


def list_scores() -> Sequence[str]:
    return list(_SCORERS)


def score(y_true, y_pred, *, metric: str = "accuracy") -> float:
    if metric not in _SCORERS:
        raise ValueError(f"Unknown score '{metric}'. Supported: {list(_SCORERS)}")
    y_true = _as_1d(y_true)
    y_pred = _as_1d(y_pred)
    _check_len(y_true, y_pred)
    return _SCORERS[metric](y_true, y_pred)
