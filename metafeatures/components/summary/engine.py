from __future__ import annotations

"""Summary engine.

Turns a raw measure output (a possibly empty sequence of floats) into named
scalars. Summarizer names are resolved once into :class:`Summarizer`
capabilities; applying them is then a plain loop over that list.
"""

import inspect
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

import numpy as np

from metafeatures.components.summary.hist import check_histogram_params
from metafeatures.contracts.summary_configs import SummaryConfig
from metafeatures.core.errors import UnknownSummarizer
from metafeatures.registries.summarizers import (
    Summarizer,
    get_builtin_summarizer,
    list_summarizers,
)

PASSTHROUGH = "non.aggregated"


def resolve_summarizers(config: Optional[SummaryConfig]) -> List[Summarizer]:
    """Resolve the names in ``config`` into summarizer capabilities.

    Caller-supplied functions take precedence over built-ins of the same
    name. An empty config resolves to the pass-through summarizer.

    Raises
    ------
    UnknownSummarizer
        If a name is neither supplied by the caller nor built in.
    InvalidSummaryParams
        If the built-in histogram is requested with contradicting parameters.
    """

    config = config if config is not None else SummaryConfig()
    names: Sequence[str] = config.summary or [PASSTHROUGH]

    out: List[Summarizer] = []
    for name in names:
        fn = config.functions.get(name)
        if fn is not None:
            out.append(Summarizer(name=name, func=fn, kind="user", output="auto"))
            continue
        builtin = get_builtin_summarizer(name)
        if builtin is None:
            raise UnknownSummarizer(name, available=list_summarizers() + sorted(config.functions))
        out.append(builtin)

    if any(s.kind == "builtin" and s.name == "histogram" for s in out):
        params = config.params
        check_histogram_params(params.get("bins", 10), params.get("min"), params.get("max"))
    return out


def _bind_params(fn: Any, params: Mapping[str, Any]) -> Dict[str, Any]:
    """Keep only the parameters ``fn`` accepts (all of them for ``**kwargs``)."""

    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError):
        return dict(params)

    accepted = {}
    for p in list(sig.parameters.values())[1:]:
        if p.kind is inspect.Parameter.VAR_KEYWORD:
            return dict(params)
        if p.kind in (inspect.Parameter.POSITIONAL_OR_KEYWORD, inspect.Parameter.KEYWORD_ONLY):
            accepted[p.name] = p
    return {k: v for k, v in params.items() if k in accepted}


def _numbered(prefix: str, values: Iterable[Any]) -> Dict[str, float]:
    return {f"{prefix}.{i}": float(v) for i, v in enumerate(values, start=1)}


def apply_summarizers(
    feature: str,
    values: Any,
    summarizers: Sequence[Summarizer],
    params: Optional[Mapping[str, Any]] = None,
) -> Dict[str, float]:
    """Apply already-resolved ``summarizers`` to ``values``; merge all results."""

    params = dict(params or {})
    arr = np.asarray([] if values is None else values, dtype=float).reshape(-1)

    result: Dict[str, float] = {}
    for s in summarizers:
        if s.output == "passthrough" and arr.size == 0:
            continue
        res = s.func(arr.copy(), **_bind_params(s.func, params))

        if s.output == "passthrough":
            result.update(_numbered(feature, res))
        elif s.output == "vector":
            result.update(_numbered(f"{feature}.{s.name}", res))
        elif s.output == "scalar" or np.ndim(res) == 0:
            result[f"{feature}.{s.name}"] = float(res)
        else:
            result.update(_numbered(f"{feature}.{s.name}", np.asarray(res, dtype=float).reshape(-1)))
    return result


def summarize(
    feature: str,
    values: Any,
    config: Optional[SummaryConfig] = None,
) -> Dict[str, float]:
    """Summarize one raw measure output under ``config``.

    >>> summarize("x", [1, 2, 3, 4, 5], SummaryConfig(summary=["mean"]))
    {'x.mean': 3.0}
    """

    config = config if config is not None else SummaryConfig()
    return apply_summarizers(feature, values, resolve_summarizers(config), config.params)
