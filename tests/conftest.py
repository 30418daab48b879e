import numpy as np
import pytest
from sklearn.datasets import load_iris

from metafeatures.core.dataset import make_dataset


@pytest.fixture(scope="session")
def iris():
    data = load_iris()
    return make_dataset(data.data, data.target, attribute_names=list(data.feature_names))


@pytest.fixture
def mixed():
    """Two numeric and two categorical attributes, three classes of 8 rows."""
    rng = np.random.default_rng(0)
    n = 24
    y = np.repeat(["a", "b", "c"], n // 3)
    X = np.empty((n, 4), dtype=object)
    X[:, 0] = rng.normal(size=n) + np.repeat([0.0, 2.0, 4.0], n // 3)
    X[:, 1] = rng.uniform(1.0, 5.0, size=n)
    X[:, 2] = np.tile(["red", "green", "blue"], n // 3)
    X[:, 3] = np.tile(["yes", "no"], n // 2)
    return make_dataset(X, y, attribute_names=["x1", "x2", "colour", "flag"])


@pytest.fixture
def balanced():
    """100 rows, classes A/B with 50 rows each, interleaved."""
    rng = np.random.default_rng(1)
    y = np.tile(["A", "B"], 50)
    X = rng.normal(size=(100, 3)) + (y == "B")[:, None] * 1.5
    return make_dataset(X, y)
