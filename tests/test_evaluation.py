import numpy as np
import pytest
from sklearn.datasets import load_iris
from sklearn.naive_bayes import GaussianNB

from metafeatures.components.evaluation import EvaluationState, LandmarkEvaluator, score
from metafeatures.components.evaluation.landmarkers import AttributeStump, EliteNearestNeighbor
from metafeatures.components.splitters.types import Split
from metafeatures.registries.learners import make_learner


def _split(fold, Xtr, ytr, Xte, yte):
    Xtr, Xte = np.asarray(Xtr, dtype=float), np.asarray(Xte, dtype=float)
    return Split(
        fold=fold,
        Xtr=Xtr,
        Xte=Xte,
        ytr=np.asarray(ytr),
        yte=np.asarray(yte),
        idx_tr=np.arange(len(ytr)),
        idx_te=np.arange(len(yte)),
    )


def test_scores():
    assert score([0, 1, 1], [0, 1, 0]) == pytest.approx(2 / 3)
    assert score([0, 0, 1, 1], [0, 0, 1, 1], metric="kappa") == pytest.approx(1.0)
    assert score([1, 1], [1, 1], metric="kappa") == 0.0
    assert score([0, 0, 0, 1], [0, 0, 0, 0], metric="balanced_accuracy") == pytest.approx(0.5)

    with pytest.raises(ValueError):
        score([0, 1], [0, 1], metric="f1")
    with pytest.raises(ValueError):
        score([0, 1], [0])


def test_record_has_one_score_per_fold(balanced):
    ev = LandmarkEvaluator(n_folds=5)
    splits = ev.partition(balanced.numeric(), balanced.y)
    record = ev.evaluate("naiveBayes", GaussianNB, splits)

    assert record.state is EvaluationState.DONE
    assert len(record.scores) == 5
    assert record.dropped == []
    assert all(0.0 <= s <= 1.0 for s in record.scores)


def test_single_class_training_fold_is_dropped():
    good = _split(0, [[0.0], [1.0], [0.1], [0.9]], [0, 1, 0, 1], [[0.05], [0.95]], [0, 1])
    bad = _split(1, [[0.0], [0.2]], [0, 0], [[1.0]], [1])

    record = LandmarkEvaluator(n_folds=2).evaluate("oneNN", lambda: make_learner("oneNN"), [good, bad])

    assert record.scores == [1.0]
    assert record.dropped == [1]
    assert record.folds[1].reason
    assert record.state is EvaluationState.DONE


def test_same_partition_is_shared_between_learners(balanced):
    ev = LandmarkEvaluator(n_folds=4)
    splits = ev.partition(balanced.numeric(), balanced.y, rng=np.random.default_rng(5))

    a = ev.evaluate("oneNN", lambda: make_learner("oneNN"), splits)
    b = ev.evaluate("oneNN", lambda: make_learner("oneNN"), splits)
    assert a.scores == b.scores


def test_best_stump_uses_a_petal_attribute():
    data = load_iris()
    stump = AttributeStump(selection="best", random_state=0).fit(data.data, data.target)

    assert stump.attribute_ in (2, 3)
    assert np.mean(stump.predict(data.data) == data.target) > 0.6


def test_random_stump_is_reproducible():
    data = load_iris()
    a = AttributeStump(selection="random", random_state=3).fit(data.data, data.target)
    b = AttributeStump(selection="random", random_state=3).fit(data.data, data.target)
    assert a.attribute_ == b.attribute_


def test_elite_nn_drops_unused_attributes():
    rng = np.random.default_rng(0)
    y = np.tile([0, 1], 30)
    X = np.column_stack([y + rng.normal(scale=0.01, size=60), np.zeros(60)])

    model = EliteNearestNeighbor(random_state=0).fit(X, y)
    assert model.attributes_.tolist() == [0]
    assert np.array_equal(model.predict(X), y)
