"""Built-in general measures."""

from __future__ import annotations

from metafeatures.components.measures import general as m
from metafeatures.contracts.group_options import NoOptions
from metafeatures.registries.measures import register_group, register_measure

GROUP = "general"


def _prepare(dataset, options, rngm):
    return dataset


register_group(GROUP, options_model=NoOptions, prepare=_prepare)


def _scalar(name, fn):
    register_measure(GROUP, name, arity="scalar")(lambda ds, options: fn(ds))


def _vector(name, fn):
    register_measure(GROUP, name, arity="vector")(lambda ds, options: fn(ds))


_scalar("attrToInst", m.attr_to_inst)
_scalar("catToNum", m.cat_to_num)
_vector("freqClass", m.freq_class)
_scalar("instToAttr", m.inst_to_attr)
_scalar("nrAttr", m.nr_attr)
_scalar("nrBin", m.nr_bin)
_scalar("nrCat", m.nr_cat)
_scalar("nrClass", m.nr_class)
_scalar("nrInst", m.nr_inst)
_scalar("nrNum", m.nr_num)
_scalar("numToCat", m.num_to_cat)
