"""Built-in model-based (decision tree structure) measures."""

from __future__ import annotations

from metafeatures.components.measures import model_based as m
from metafeatures.components.trees.descriptor import DESCRIPTORS
from metafeatures.contracts.group_options import NoOptions
from metafeatures.registries.measures import register_group, register_measure

GROUP = "model.based"

_SCALARS = {"leaves", "nodes", "nodesPerAttr", "nodesPerInst"}

register_group(GROUP, options_model=NoOptions, prepare=m.prepare)

for _name, _method in DESCRIPTORS.items():
    register_measure(GROUP, _name, arity="scalar" if _name in _SCALARS else "vector")(
        lambda desc, options, _method=_method: _method(desc)
    )
