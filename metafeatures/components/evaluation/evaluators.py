from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Optional, Sequence

import numpy as np
from numpy.random import Generator

from metafeatures.components.evaluation.scoring import score as score_fn
from metafeatures.components.splitters.stratified import assign_folds, generate_folds
from metafeatures.components.splitters.types import Split
from metafeatures.core.errors import FoldScoringFailure

logger = logging.getLogger(__name__)


class EvaluationState(str, Enum):
    INIT = "init"
    PARTITIONED = "partitioned"
    TRAINING = "training"
    SCORED = "scored"
    AGGREGATED = "aggregated"
    DONE = "done"


@dataclass
class FoldScore:
    fold: int
    score: Optional[float]
    reason: Optional[str] = None


@dataclass
class EvaluationRecord:
    """Per-fold held-out scores of one landmarker."""

    learner: str
    metric: str
    folds: List[FoldScore] = field(default_factory=list)
    state: EvaluationState = EvaluationState.INIT

    @property
    def scores(self) -> List[float]:
        """Scores of the folds that could be evaluated, in fold order."""
        return [f.score for f in self.folds if f.score is not None]

    @property
    def dropped(self) -> List[int]:
        return [f.fold for f in self.folds if f.score is None]


@dataclass
class LandmarkEvaluator:
    """Stratified k-fold evaluation of landmarking learners.

    ``partition`` is done once per extraction call; the same splits are then
    reused for every learner so their scores are comparable fold by fold.
    """

    n_folds: int = 10
    metric: str = "accuracy"

    def partition(self, X: np.ndarray, y: np.ndarray, *, rng: Optional[Generator] = None) -> List[Split]:
        folds = assign_folds(y, self.n_folds, rng=rng)
        return list(generate_folds(X, y, folds))

    def score_fold(self, split: Split, make_learner: Callable[[], Any]) -> float:
        """Train on the split's training rows and score on its held-out rows.

        Raises
        ------
        FoldScoringFailure
            If the training rows hold fewer than two distinct classes.
        """

        n_classes = np.unique(split.ytr).size
        if n_classes < 2:
            raise FoldScoringFailure(split.fold, f"training set has {n_classes} distinct class(es)")

        learner = make_learner()
        learner.fit(split.Xtr, split.ytr)
        y_pred = learner.predict(split.Xte)
        return score_fn(split.yte, y_pred, metric=self.metric)

    def evaluate(
        self,
        name: str,
        make_learner: Callable[[], Any],
        splits: Sequence[Split],
    ) -> EvaluationRecord:
        record = EvaluationRecord(learner=name, metric=self.metric)
        record.state = EvaluationState.PARTITIONED

        for split in splits:
            record.state = EvaluationState.TRAINING
            try:
                value = self.score_fold(split, make_learner)
            except FoldScoringFailure as e:
                logger.debug("landmarker %s: dropping %s", name, e)
                record.folds.append(FoldScore(fold=split.fold, score=None, reason=e.reason))
            else:
                record.folds.append(FoldScore(fold=split.fold, score=float(value)))
            record.state = EvaluationState.SCORED

        record.state = EvaluationState.AGGREGATED
        if record.dropped:
            logger.debug("landmarker %s: %d of %d folds dropped", name, len(record.dropped), len(splits))
        record.state = EvaluationState.DONE
        return record
