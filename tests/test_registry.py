import pytest

from metafeatures.core.errors import UnknownFeature, UnknownGroup
from metafeatures.registries.base import Registry
from metafeatures.registries.learners import list_learners
from metafeatures.registries.measures import get_group, list_features, list_groups, resolve


def test_registry_register_get_and_freeze():
    reg = Registry[str, int](_name="numbers")
    reg.register("one")(1)
    reg.add("two", 2)

    assert reg.get("one") == 1
    assert list(reg) == ["one", "two"]
    assert reg.try_get("three") is None

    with pytest.raises(ValueError):
        reg.add("one", 10)

    reg.freeze()
    with pytest.raises(RuntimeError):
        reg.add("three", 3)
    with pytest.raises(KeyError):
        reg.get("three")


def test_groups_in_registration_order():
    assert list_groups() == ["general", "statistical", "infotheo", "model.based", "landmarking"]


def test_general_features_listing():
    assert list_features("general") == [
        "attrToInst",
        "catToNum",
        "freqClass",
        "instToAttr",
        "nrAttr",
        "nrBin",
        "nrCat",
        "nrClass",
        "nrInst",
        "nrNum",
        "numToCat",
    ]


def test_every_group_has_unique_features():
    for group in list_groups():
        names = list_features(group)
        assert names
        assert len(names) == len(set(names))


def test_landmarking_features_follow_learners():
    assert list_features("landmarking") == list_learners()
    assert "oneNN" in list_learners()


def test_resolve_returns_descriptor():
    desc = resolve("statistical", "cor")
    assert desc.group == "statistical"
    assert desc.name == "cor"
    assert desc.arity == "vector"
    assert resolve("general", "nrInst").arity == "scalar"


def test_unknown_group():
    with pytest.raises(UnknownGroup) as exc:
        list_features("relative")
    assert exc.value.group == "relative"
    assert "general" in exc.value.available


def test_unknown_feature_is_case_sensitive():
    with pytest.raises(UnknownFeature) as exc:
        resolve("general", "NrInst")
    assert exc.value.group == "general"
    assert exc.value.feature == "NrInst"


def test_registries_are_frozen_after_load():
    spec = get_group("general")
    assert spec.measures.frozen
    with pytest.raises(RuntimeError):
        spec.measures.add("extra", None)
