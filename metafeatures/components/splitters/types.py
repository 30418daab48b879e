from __future__ import annotations

"""Splitter return contracts.

Every partitioner yields the same fold payload shape so the landmarking
evaluator never has to guess tuple layouts.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Split:
    """A single train/test split (fold).

    ``idx_tr`` / ``idx_te`` are row indices into the original X/y.
    """

    fold: int
    Xtr: np.ndarray
    Xte: np.ndarray
    ytr: np.ndarray
    yte: np.ndarray
    idx_tr: np.ndarray
    idx_te: np.ndarray
