import numpy as np
import pytest

from metafeatures.components.splitters.stratified import assign_folds, generate_folds
from metafeatures.core.errors import InsufficientData


def test_exact_stratification_on_divisible_counts():
    y = np.array(["A"] * 50 + ["B"] * 50)
    folds = assign_folds(y, 5)

    for f in range(5):
        members = y[folds == f]
        assert np.sum(members == "A") == 10
        assert np.sum(members == "B") == 10


def test_every_row_assigned_exactly_once():
    y = np.array([0] * 7 + [1] * 5 + [2] * 9)
    folds = assign_folds(y, 3)

    assert folds.shape == y.shape
    assert set(folds.tolist()) == {0, 1, 2}

    splits = list(generate_folds(np.zeros((y.size, 1)), y, folds))
    test_rows = np.sort(np.concatenate([s.idx_te for s in splits]))
    assert np.array_equal(test_rows, np.arange(y.size))


def test_remainders_spread_across_folds():
    y = np.array([0] * 7 + [1] * 5)
    folds = assign_folds(y, 3)
    sizes = np.bincount(folds, minlength=3)
    assert sizes.max() - sizes.min() <= 1


def test_shuffled_assignment_stays_stratified():
    y = np.array(["A"] * 50 + ["B"] * 50)
    folds = assign_folds(y, 5, rng=np.random.default_rng(7))

    for f in range(5):
        assert np.sum(y[folds == f] == "A") == 10
    assert not np.array_equal(folds, assign_folds(y, 5))


def test_splits_come_in_fold_order_without_overlap():
    y = np.tile([0, 1], 10)
    X = np.arange(20, dtype=float)[:, None]
    splits = list(generate_folds(X, y, assign_folds(y, 4)))

    assert [s.fold for s in splits] == [0, 1, 2, 3]
    for s in splits:
        assert not set(s.idx_tr) & set(s.idx_te)
        assert s.Xtr.shape[0] + s.Xte.shape[0] == 20
        assert np.array_equal(s.Xte[:, 0], X[s.idx_te, 0])


def test_class_smaller_than_folds_is_insufficient():
    y = np.array([0] * 10 + [1] * 3)
    with pytest.raises(InsufficientData) as exc:
        assign_folds(y, 5)
    assert exc.value.context["class"] == 1


def test_fewer_than_two_folds_is_rejected():
    with pytest.raises(InsufficientData):
        assign_folds(np.array([0, 1, 0, 1]), 1)
