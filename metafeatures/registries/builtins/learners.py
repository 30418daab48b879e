"""Built-in landmarking learner registrations."""

from __future__ import annotations

from typing import Optional

from sklearn.discriminant_analysis import LinearDiscriminantAnalysis
from sklearn.naive_bayes import GaussianNB
from sklearn.neighbors import KNeighborsClassifier

from metafeatures.components.evaluation.landmarkers import AttributeStump, EliteNearestNeighbor
from metafeatures.registries.learners import register_learner


@register_learner("bestNode")
def _best_node(random_state: Optional[int]):
    return AttributeStump(selection="best", random_state=random_state)


@register_learner("eliteNN")
def _elite_nn(random_state: Optional[int]):
    return EliteNearestNeighbor(random_state=random_state)


@register_learner("linearDiscr")
def _linear_discr(random_state: Optional[int]):
    return LinearDiscriminantAnalysis()


@register_learner("naiveBayes")
def _naive_bayes(random_state: Optional[int]):
    return GaussianNB()


@register_learner("oneNN")
def _one_nn(random_state: Optional[int]):
    return KNeighborsClassifier(n_neighbors=1)


@register_learner("randomNode")
def _random_node(random_state: Optional[int]):
    return AttributeStump(selection="random", random_state=random_state)


@register_learner("worstNode")
def _worst_node(random_state: Optional[int]):
    return AttributeStump(selection="worst", random_state=random_state)
