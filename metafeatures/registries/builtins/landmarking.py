"""Built-in landmarking measures, one per registered learner."""

from __future__ import annotations

from metafeatures.components.measures import landmarking as m
from metafeatures.contracts.group_options import LandmarkingOptions
from metafeatures.registries.learners import list_learners
from metafeatures.registries.measures import register_group, register_measure

GROUP = "landmarking"

register_group(GROUP, options_model=LandmarkingOptions, prepare=m.prepare)

for _name in list_learners():
    register_measure(GROUP, _name, arity="vector")(m.landmark(_name))
