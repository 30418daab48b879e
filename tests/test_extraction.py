import math

import numpy as np
import pytest
from sklearn.datasets import load_iris

import metafeatures as mf
from metafeatures import (
    InsufficientData,
    InvalidOptions,
    UnknownFeature,
    UnknownGroup,
    UnknownSummarizer,
)
from metafeatures.contracts.extraction_config import ExtractionConfig
from metafeatures.registries.measures import resolve
from metafeatures.runtime.random.rng import RngManager
from metafeatures.use_cases.extraction import compute_raw


def _same(a, b):
    if a.keys() != b.keys():
        return False
    return all((math.isnan(a[k]) and math.isnan(b[k])) or a[k] == b[k] for k in a)


def test_keys_follow_feature_and_summary_order(iris):
    out = mf.extract_group("general", iris, features=["nrInst", "freqClass"], summary=["mean", "sd"])
    assert list(out) == ["nrInst.mean", "nrInst.sd", "freqClass.mean", "freqClass.sd"]
    assert out["nrInst.sd"] == 150.0


@pytest.mark.parametrize("group", ["general", "statistical", "infotheo", "model.based"])
def test_scalar_features_pass_through_as_one_key(group, iris, mixed):
    dataset = mixed if group == "general" else iris
    scalars = [name for name in mf.list_features(group) if resolve(group, name).arity == "scalar"]
    raw = compute_raw(group, dataset, scalars)
    out = mf.extract_group(group, dataset, features=scalars)

    assert scalars
    assert list(out) == [f"{name}.1" for name in scalars]
    for name in scalars:
        assert raw[name].shape == (1,)
        assert out[f"{name}.1"] == raw[name][0]


def test_default_features_are_the_whole_group(iris):
    out = mf.extract_group("general", iris, summary=["mean"])
    assert list(out) == [f"{name}.mean" for name in mf.list_features("general")]


def test_same_seed_same_result(iris):
    kwargs = dict(groups=["model.based", "landmarking"], options={"landmarking": {"folds": 5}}, seed=42)
    assert _same(mf.extract(iris, **kwargs), mf.extract(iris, **kwargs))


def test_extraction_leaves_inputs_untouched():
    data = load_iris()
    X, y = data.data.copy(), data.target.copy()
    mf.extract(X, y, groups=["statistical", "infotheo"])

    assert np.array_equal(X, data.data)
    assert np.array_equal(y, data.target)


def test_extract_all_merges_groups_with_default_summary(iris):
    out = mf.extract(iris, seed=0)

    for key in ("nrInst.mean", "cor.sd", "classEnt.mean", "nodes.mean", "oneNN.mean", "oneNN.sd"):
        assert key in out
    assert all(k.endswith((".mean", ".sd")) for k in out)
    assert out["nrInst.mean"] == 150.0


def test_extract_selected_groups_and_features(mixed):
    out = mf.extract(
        mixed,
        groups=["general", "infotheo"],
        features={"general": ["nrClass"], "infotheo": ["classEnt"]},
        summary=["max"],
    )
    assert out == {"nrClass.max": 3.0, "classEnt.max": pytest.approx(math.log2(3))}


def test_folds_larger_than_smallest_class_fail(mixed):
    with pytest.raises(InsufficientData):
        mf.extract(mixed)

    out = mf.extract(mixed, groups=["landmarking"], options={"landmarking": {"folds": 4}}, features={"landmarking": ["oneNN"]})
    assert set(out) == {"oneNN.mean", "oneNN.sd"}


def test_unknown_names_fail_before_computing(iris):
    with pytest.raises(UnknownGroup):
        mf.extract(iris, groups=["general", "clustering"])
    with pytest.raises(UnknownFeature):
        mf.extract_group("general", iris, features=["nrInst", "nrinst"])
    with pytest.raises(UnknownSummarizer):
        mf.extract_group("general", iris, summary=["mean", "mode"])


@pytest.mark.parametrize(
    "group, options",
    [
        ("general", {"by_class": True}),
        ("statistical", {"bogus": 1}),
        ("landmarking", {"folds": 1}),
        ("landmarking", {"score": "f1"}),
    ],
)
def test_invalid_options(iris, group, options):
    with pytest.raises(InvalidOptions) as exc:
        mf.extract_group(group, iris, options=options)
    assert exc.value.group == group


def test_unrequested_group_entries_are_validated(iris):
    with pytest.raises(UnknownGroup):
        mf.extract(iris, groups=["general"], features={"generl": ["nrInst"]})


def test_single_class_target_rejected():
    with pytest.raises(InsufficientData):
        mf.make_dataset(np.zeros((5, 2)), np.ones(5))


def test_dataset_kind_inference():
    X = np.array([[1.5, "a", True], [2.0, "b", False], [3.0, "a", True]], dtype=object)
    ds = mf.make_dataset(X, ["p", "q", "p"])

    assert ds.kinds == ("numeric", "categorical", "categorical")
    assert ds.attribute_names == ("V1", "V2", "V3")
    assert ds.classes.tolist() == ["p", "q"]

    forced = mf.make_dataset(X, ["p", "q", "p"], categorical=[0])
    assert forced.kinds[0] == "categorical"


def test_dataset_and_separate_target_conflict(iris):
    with pytest.raises(ValueError):
        mf.extract_group("general", iris, iris.y)


def test_extraction_config_coercion():
    cfg = ExtractionConfig(groups="general", summary="median")
    assert cfg.groups == ["general"]
    assert cfg.summary.summary == ["median"]
    assert ExtractionConfig().groups == "all"
    assert ExtractionConfig().summary == mf.DEFAULT_SUMMARY


def test_rng_streams_are_independent():
    rngm = RngManager(3)
    assert rngm.seed_for("a") == RngManager(3).seed_for("a")
    assert rngm.seed_for("a") != rngm.seed_for("b")
    assert rngm.generator("a").integers(1 << 30) == RngManager(3).generator("a").integers(1 << 30)
