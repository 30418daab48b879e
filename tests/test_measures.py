import math

import numpy as np
import pytest
from sklearn.datasets import load_iris

from metafeatures.api import extract_group
from metafeatures.components.measures import infotheo, statistical
from metafeatures.contracts.group_options import InfoTheoOptions, StatisticalOptions
from metafeatures.core.dataset import make_dataset
from metafeatures.core.transforms import (
    categorical_matrix,
    class_codes,
    equal_width_codes,
    numeric_matrix,
    sturges_bins,
)


def test_general_values(mixed):
    out = extract_group("general", mixed)

    assert out["nrInst.1"] == 24.0
    assert out["nrAttr.1"] == 4.0
    assert out["nrNum.1"] == 2.0
    assert out["nrCat.1"] == 2.0
    assert out["nrBin.1"] == 1.0
    assert out["nrClass.1"] == 3.0
    assert out["attrToInst.1"] == pytest.approx(4 / 24)
    assert out["instToAttr.1"] == 6.0
    assert out["catToNum.1"] == 1.0
    assert out["numToCat.1"] == 1.0
    assert [out[f"freqClass.{i}"] for i in (1, 2, 3)] == pytest.approx([1 / 3] * 3)


def test_failing_measure_yields_empty_output():
    X = np.array([["a", "x"], ["b", "y"], ["a", "y"], ["b", "x"]], dtype=object)
    y = [0, 1, 0, 1]

    raw = extract_group("general", X, y, features=["catToNum", "nrInst"])
    assert raw == {"nrInst.1": 4.0}

    summarized = extract_group("general", X, y, features=["catToNum", "nrInst"], summary=["mean"])
    assert math.isnan(summarized["catToNum.mean"])
    assert summarized["nrInst.mean"] == 4.0


def test_one_hot_encoding_of_categoricals(mixed):
    X, names = numeric_matrix(mixed)
    assert X.shape == (24, 5)
    assert names[:2] == ["x1", "x2"]

    X, names = numeric_matrix(mixed, encode_categorical=False)
    assert X.shape == (24, 2)


def test_statistical_by_class_concatenates_per_class(mixed):
    plain = extract_group("statistical", mixed, features=["mean"])
    by_class = extract_group("statistical", mixed, features=["mean"], options={"by_class": True})

    assert len(plain) == 5
    assert len(by_class) == 15


def test_statistical_transform_off_drops_categoricals(mixed):
    out = extract_group("statistical", mixed, features=["mean", "max"], options={"transform": False})
    assert sorted(out) == ["max.1", "max.2", "mean.1", "mean.2"]


def test_statistical_values_on_iris():
    data = load_iris()
    out = extract_group("statistical", data.data, data.target, features=["cor", "sd", "nrDisc", "canCor", "wLambda"])

    assert len([k for k in out if k.startswith("cor.")]) == 6
    assert out["sd.1"] == pytest.approx(np.std(data.data[:, 0], ddof=1))
    assert out["nrDisc.1"] == 2.0
    assert 0.0 < out["wLambda.1"] < 0.1
    assert out["canCor.1"] > out["canCor.2"]


def test_per_attribute_measures():
    X = np.array([[1.0, 2.0], [2.0, 4.0], [4.0, 8.0]])

    assert statistical.g_mean(X).tolist() == pytest.approx([2.0, 4.0])
    assert statistical.cor(X).tolist() == pytest.approx([1.0])
    assert statistical.sparsity(np.array([[1.0], [1.0], [2.0]])).tolist() == pytest.approx([0.25])
    assert math.isnan(statistical.h_mean(np.array([[-1.0], [1.0]]))[0])


def test_gravity_uses_majority_and_minority_centroids():
    X = np.array([[0.0], [0.0], [0.0], [3.0], [3.0], [10.0]])
    data = statistical.NumericData(X=X, y=np.array([0, 0, 0, 1, 1, 2]), classes=np.array(["a", "b", "c"]), names=["x"])
    assert statistical.gravity(data) == 10.0


def test_entropies(mixed):
    out = extract_group("infotheo", mixed, features=["classEnt", "attrEnt"], options={"transform": False})

    assert out["classEnt.1"] == pytest.approx(math.log2(3))
    assert out["attrEnt.1"] == pytest.approx(math.log2(3))
    assert out["attrEnt.2"] == pytest.approx(1.0)
    assert "attrEnt.3" not in out


def test_mutual_information_of_class_copy():
    y = np.array([0, 1, 2, 0, 1, 2])
    data = infotheo.CategoricalData(X=y[:, None], y=y, names=["copy"])

    assert infotheo.mut_inf(data).tolist() == pytest.approx([math.log2(3)])
    assert infotheo.eq_num_attr(data) == pytest.approx(1.0)
    assert infotheo.ns_ratio(data) == pytest.approx(0.0)
    assert infotheo.class_conc(data).tolist() == pytest.approx([1.0])


def test_discretization(mixed):
    assert sturges_bins(24) == 6
    assert equal_width_codes(np.array([0.0, 0.5, 1.0]), 2).tolist() == [0, 1, 1]
    assert equal_width_codes(np.array([3.0, 3.0]), 4).tolist() == [0, 0]

    X, names = categorical_matrix(mixed)
    assert X.shape == (24, 4)
    assert names == ["x1", "x2", "colour", "flag"]
    assert X[:, 0].max() < 6


def test_infotheo_without_categoricals_fails_only_ratio_measures():
    data = load_iris()
    out = extract_group(
        "infotheo",
        data.data,
        data.target,
        features=["classEnt", "nsRatio"],
        options={"transform": False},
        summary=["mean"],
    )
    assert out["classEnt.mean"] == pytest.approx(math.log2(3))
    assert math.isnan(out["nsRatio.mean"])


def test_model_based_tree_counts(iris):
    out = extract_group("model.based", iris, features=["nodes", "leaves", "treeDepth", "leavesCorrob"])

    assert out["nodes.1"] == 2 * out["leaves.1"] - 1
    depths = [v for k, v in out.items() if k.startswith("treeDepth.")]
    assert len(depths) == out["leaves.1"]
    assert sum(v for k, v in out.items() if k.startswith("leavesCorrob.")) == pytest.approx(1.0)


def test_landmarking_fold_scores(iris):
    out = extract_group("landmarking", iris, features=["oneNN", "naiveBayes"], options={"folds": 5}, seed=1)

    one_nn = [v for k, v in out.items() if k.startswith("oneNN.")]
    assert len(one_nn) == 5
    assert all(0.0 <= v <= 1.0 for v in one_nn)
    assert np.mean(one_nn) > 0.9


def test_landmarking_kappa_score(iris):
    out = extract_group(
        "landmarking", iris, features=["bestNode"], options={"folds": 3, "score": "kappa"}, summary=["mean"]
    )
    assert -1.0 <= out["bestNode.mean"] <= 1.0


def test_options_models_defaults():
    assert StatisticalOptions().by_class is False
    assert StatisticalOptions().transform is True
    assert InfoTheoOptions().transform is True


def test_class_results_follow_first_appearance_order():
    y = ["z"] * 5 + ["a"] * 3
    X = np.array([[10.0]] * 5 + [[0.0]] * 3)

    by_class = extract_group("statistical", X, y, features=["mean"], options={"by_class": True})
    assert by_class == {"mean.1": 10.0, "mean.2": 0.0}

    general = extract_group("general", X, y, features=["freqClass"])
    assert general == {"freqClass.1": pytest.approx(5 / 8), "freqClass.2": pytest.approx(3 / 8)}

    codes, classes = class_codes(make_dataset(X, y))
    assert classes.tolist() == ["z", "a"]
    assert codes.tolist() == [0] * 5 + [1] * 3
