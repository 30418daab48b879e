"""Built-in information-theoretic measures."""

from __future__ import annotations

from metafeatures.components.measures import infotheo as m
from metafeatures.contracts.group_options import InfoTheoOptions
from metafeatures.registries.measures import register_group, register_measure

GROUP = "infotheo"

register_group(GROUP, options_model=InfoTheoOptions, prepare=m.prepare)

for _name, _fn, _arity in (
    ("attrConc", m.attr_conc, "vector"),
    ("attrEnt", m.attr_ent, "vector"),
    ("classConc", m.class_conc, "vector"),
    ("classEnt", m.class_ent, "scalar"),
    ("eqNumAttr", m.eq_num_attr, "scalar"),
    ("jointEnt", m.joint_ent, "vector"),
    ("mutInf", m.mut_inf, "vector"),
    ("nsRatio", m.ns_ratio, "scalar"),
):
    register_measure(GROUP, _name, arity=_arity)(lambda data, options, _fn=_fn: _fn(data))
