from __future__ import annotations

"""Landmarking: held-out scores of simple learners over shared stratified folds."""

from dataclasses import dataclass
from typing import Any, List

import numpy as np

from metafeatures.components.evaluation.evaluators import LandmarkEvaluator
from metafeatures.components.splitters.types import Split
from metafeatures.core.dataset import Dataset
from metafeatures.core.transforms import numeric_matrix
from metafeatures.registries.learners import make_learner
from metafeatures.runtime.random.rng import RngManager


@dataclass(frozen=True)
class LandmarkingData:
    splits: List[Split]
    evaluator: LandmarkEvaluator
    rngm: RngManager


def prepare(dataset: Dataset, options: Any, rngm: RngManager) -> LandmarkingData:
    """Encode the attributes and partition the rows once for every landmarker.

    Raises
    ------
    InsufficientData
        If some class has fewer rows than ``options.folds``.
    """

    X, _ = numeric_matrix(dataset, encode_categorical=True)
    evaluator = LandmarkEvaluator(n_folds=int(options.folds), metric=str(options.score))
    splits = evaluator.partition(X, np.asarray(dataset.y), rng=rngm.generator("landmarking/folds"))
    return LandmarkingData(splits=splits, evaluator=evaluator, rngm=rngm)


def landmark(name: str):
    """Measure function scoring the learner registered as ``name`` on every fold."""

    def _measure(data: LandmarkingData, options: Any) -> np.ndarray:
        seed = data.rngm.seed_for(f"landmarking/{name}")
        record = data.evaluator.evaluate(
            name,
            lambda: make_learner(name, random_state=seed),
            data.splits,
        )
        return np.asarray(record.scores, dtype=float)

    _measure.__name__ = f"landmark_{name}"
    return _measure
