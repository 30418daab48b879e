"""Built-in summarizer registrations."""

from __future__ import annotations

from metafeatures.components.summary import reducers
from metafeatures.registries.summarizers import register_summarizer


register_summarizer("mean")(reducers.mean)
register_summarizer("sd")(reducers.sd)
register_summarizer("var")(reducers.var)
register_summarizer("min")(reducers.minimum)
register_summarizer("max")(reducers.maximum)
register_summarizer("median")(reducers.median)
register_summarizer("skewness")(reducers.skewness)
register_summarizer("kurtosis")(reducers.kurtosis)
register_summarizer("quantile", output="vector")(reducers.quantile)
register_summarizer("histogram", output="vector", aliases=("hist",))(reducers.histogram)
register_summarizer("non.aggregated", output="passthrough", aliases=("non-aggregated",))(
    reducers.non_aggregated
)
