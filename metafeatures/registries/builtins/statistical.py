"""Built-in statistical measures.

Per-attribute measures (and cor/cov/eigenvalues) honour ``by_class``: they
are computed on each class subset and concatenated in class first-appearance
order. The remaining measures already use the class and ignore it.
"""

from __future__ import annotations

import numpy as np

from metafeatures.components.measures import statistical as m
from metafeatures.contracts.group_options import StatisticalOptions
from metafeatures.registries.measures import register_group, register_measure

GROUP = "statistical"

register_group(GROUP, options_model=StatisticalOptions, prepare=m.prepare)


def _per_attribute(name, fn):
    def _measure(data: m.NumericData, options: StatisticalOptions):
        if options.by_class:
            parts = [np.atleast_1d(fn(data.X[data.y == c])) for c in range(data.n_classes)]
            return np.concatenate(parts) if parts else np.empty(0)
        return fn(data.X)

    register_measure(GROUP, name, arity="vector")(_measure)


def _class_aware(name, fn, arity):
    register_measure(GROUP, name, arity=arity)(lambda data, options: fn(data))


_class_aware("canCor", m.can_cor, "vector")
_per_attribute("cor", m.cor)
_per_attribute("cov", m.cov)
_per_attribute("eigenvalues", m.eigenvalues)
_per_attribute("gMean", m.g_mean)
_class_aware("gravity", m.gravity, "scalar")
_per_attribute("hMean", m.h_mean)
_per_attribute("iqRange", m.iq_range)
_per_attribute("kurtosis", m.kurtosis)
_per_attribute("mad", m.mad)
_per_attribute("max", m.maximum)
_per_attribute("mean", m.mean)
_per_attribute("median", m.median)
_per_attribute("min", m.minimum)
_class_aware("nrCorAttr", m.nr_cor_attr, "scalar")
_class_aware("nrDisc", m.nr_disc, "scalar")
_class_aware("nrNorm", m.nr_norm, "scalar")
_class_aware("nrOutliers", m.nr_outliers, "scalar")
_per_attribute("range", m.value_range)
_per_attribute("sd", m.sd)
_class_aware("sdRatio", m.sd_ratio, "scalar")
_per_attribute("skewness", m.skewness)
_per_attribute("sparsity", m.sparsity)
_per_attribute("tMean", m.t_mean)
_per_attribute("var", m.var)
_class_aware("wLambda", m.w_lambda, "scalar")
