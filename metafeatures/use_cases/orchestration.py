from __future__ import annotations

"""Multi-group extraction: run each requested group and merge the results."""

import logging
from typing import Dict, List

from metafeatures.contracts.extraction_config import ExtractionConfig
from metafeatures.core.dataset import Dataset
from metafeatures.registries.measures import get_group, list_groups
from metafeatures.use_cases.extraction import extract_group

logger = logging.getLogger(__name__)


def _resolve_groups(cfg: ExtractionConfig) -> List[str]:
    if cfg.groups == "all":
        return list_groups()
    groups = list(cfg.groups)
    for g in groups:
        get_group(g)
    for g in list(cfg.features) + list(cfg.options):
        if g not in groups:
            get_group(g)
            logger.debug("entry for group %r ignored: group not requested", g)
    return groups


def run_extraction(dataset: Dataset, cfg: ExtractionConfig) -> Dict[str, float]:
    """Extract every requested group and merge into one flat mapping.

    Groups run in registration order when ``cfg.groups == "all"`` and in the
    requested order otherwise. A fatal error in any group fails the call.
    """

    result: Dict[str, float] = {}
    for group in _resolve_groups(cfg):
        part = extract_group(
            group,
            dataset,
            cfg.features.get(group),
            cfg.options.get(group),
            cfg.summary,
            seed=cfg.seed,
        )
        clash = set(part) & set(result)
        if clash:
            raise ValueError(f"group {group!r} produced keys already present: {sorted(clash)}")
        result.update(part)
    return result
