"""Public API.

This module is the **stable public surface** of the package:

    from metafeatures.api import extract, list_features

The underlying implementations live under :mod:`metafeatures.use_cases`.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Sequence, Union

from metafeatures.components.summary.engine import summarize as _summarize
from metafeatures.contracts.extraction_config import ExtractionConfig
from metafeatures.contracts.summary_configs import DEFAULT_SUMMARY, SummaryConfig
from metafeatures.core.dataset import Dataset, ensure_dataset, make_dataset
from metafeatures.registries.measures import list_features, list_groups
from metafeatures.registries.summarizers import list_summarizers
from metafeatures.use_cases.extraction import extract_group as _extract_group
from metafeatures.use_cases.orchestration import run_extraction

SummaryLike = Optional[Union[SummaryConfig, str, Sequence[str]]]


def _summary_config(summary: SummaryLike, default: SummaryConfig) -> SummaryConfig:
    if summary is None:
        return default
    if isinstance(summary, SummaryConfig):
        return summary
    return SummaryConfig(summary=summary)


def summarize(feature: str, values: Any, config: SummaryLike = None) -> Dict[str, float]:
    """Summarize one raw measure output; an empty config passes values through."""
    return _summarize(feature, values, _summary_config(config, SummaryConfig()))


def extract_group(
    group: str,
    X: Any,
    y: Any = None,
    *,
    features: Optional[Sequence[str]] = None,
    options: Optional[Mapping[str, Any]] = None,
    summary: SummaryLike = None,
    seed: Optional[int] = None,
    categorical: Optional[Sequence[Union[int, str]]] = None,
) -> Dict[str, float]:
    """Meta-features of a single group.

    ``X`` may be a :class:`Dataset` (then ``y`` must be omitted) or any
    array-like accepted by :func:`make_dataset`. With no ``summary`` every
    raw value is returned under a numbered key.
    """

    dataset = ensure_dataset(X, y, categorical=categorical)
    return _extract_group(
        group,
        dataset,
        features,
        options,
        _summary_config(summary, SummaryConfig()),
        seed=seed,
    )


def extract(
    X: Any,
    y: Any = None,
    *,
    groups: Union[str, Sequence[str]] = "all",
    features: Optional[Mapping[str, Sequence[str]]] = None,
    options: Optional[Mapping[str, Mapping[str, Any]]] = None,
    summary: SummaryLike = DEFAULT_SUMMARY,
    seed: Optional[int] = None,
    categorical: Optional[Sequence[Union[int, str]]] = None,
) -> Dict[str, float]:
    """Meta-features of several groups merged into one flat mapping.

    ``features`` and ``options`` are keyed by group name. The default
    summary is ``mean`` + ``sd``.
    """

    dataset = ensure_dataset(X, y, categorical=categorical)
    cfg = ExtractionConfig(
        groups=groups,
        features={k: list(v) for k, v in (features or {}).items()},
        options={k: dict(v) for k, v in (options or {}).items()},
        summary=_summary_config(summary, DEFAULT_SUMMARY),
        seed=seed,
    )
    return run_extraction(dataset, cfg)


__all__ = [
    "DEFAULT_SUMMARY",
    "Dataset",
    "ExtractionConfig",
    "SummaryConfig",
    "extract",
    "extract_group",
    "list_features",
    "list_groups",
    "list_summarizers",
    "make_dataset",
    "run_extraction",
    "summarize",
]
