from __future__ import annotations

"""Group extraction use-case.

Resolves the requested feature names of one group, computes every measure
on data prepared once for the group, and summarizes each raw output with the
shared summary configuration.

Unknown names fail the whole call before anything is computed. A measure
that raises while computing is recorded as an empty output instead, so one
degenerate statistic does not cost the caller the rest of the group.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

import numpy as np
from pydantic import BaseModel

from metafeatures.components.summary.engine import apply_summarizers, resolve_summarizers
from metafeatures.contracts.group_options import validate_options
from metafeatures.contracts.summary_configs import SummaryConfig
from metafeatures.core.dataset import Dataset
from metafeatures.core.errors import FeatureComputationFailure, MetaFeatureError
from metafeatures.registries.measures import MeasureDescriptor, get_group, list_features, resolve
from metafeatures.runtime.random.rng import RngManager
from metafeatures.use_cases._deps import make_rng_manager

logger = logging.getLogger(__name__)

OptionsLike = Optional[Union[Mapping[str, Any], BaseModel]]


def _as_raw(value: Any) -> np.ndarray:
    return np.atleast_1d(np.asarray(value, dtype=float)).reshape(-1)


def compute_measure(descriptor: MeasureDescriptor, prepared: Any, options: BaseModel) -> np.ndarray:
    """Run one measure and return its raw output as a float vector.

    Raises
    ------
    FeatureComputationFailure
        If the computation raises anything other than a fatal extraction error.
    """

    try:
        with np.errstate(all="ignore"):
            return _as_raw(descriptor.func(prepared, options))
    except MetaFeatureError:
        raise
    except Exception as e:
        raise FeatureComputationFailure(descriptor.group, descriptor.name, e) from e


def compute_raw(
    group: str,
    dataset: Dataset,
    features: Optional[Sequence[str]] = None,
    options: OptionsLike = None,
    *,
    rngm: Optional[RngManager] = None,
) -> Dict[str, np.ndarray]:
    """Raw (unsummarized) outputs of ``features`` in ``group``.

    Raises
    ------
    UnknownGroup, UnknownFeature, InvalidOptions, InsufficientData
    """

    spec = get_group(group)
    names: List[str] = list(features) if features is not None else list_features(group)
    descriptors = [resolve(group, name) for name in names]
    opts = validate_options(group, spec.options_model, options)

    rngm = rngm if rngm is not None else make_rng_manager(None)
    prepared = spec.prepare(dataset, opts, rngm)

    raw: Dict[str, np.ndarray] = {}
    for desc in descriptors:
        try:
            raw[desc.name] = compute_measure(desc, prepared, opts)
        except FeatureComputationFailure as e:
            logger.debug("absorbed failure: %s", e)
            raw[desc.name] = np.empty(0)
    return raw


def extract_group(
    group: str,
    dataset: Dataset,
    features: Optional[Sequence[str]] = None,
    options: OptionsLike = None,
    summary: Optional[SummaryConfig] = None,
    *,
    seed: Optional[int] = None,
) -> Dict[str, float]:
    """Summarized meta-features of one group.

    ``features`` defaults to every measure registered in ``group``; an empty
    ``summary`` passes every raw value through under numbered keys.
    """

    summary = summary if summary is not None else SummaryConfig()
    summarizers = resolve_summarizers(summary)

    raw = compute_raw(group, dataset, features, options, rngm=make_rng_manager(seed))

    result: Dict[str, float] = {}
    for name, values in raw.items():
        result.update(apply_summarizers(name, values, summarizers, summary.params))
    return result
