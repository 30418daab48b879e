"""Configuration contracts.

Pydantic models and Literal-based choice types used to validate extraction
requests. Prefer explicit module imports in library code:

    from metafeatures.contracts.summary_configs import SummaryConfig
"""

from .choices import Arity, AttributeKind, ScoreName, SummarizerKind
from .extraction_config import ExtractionConfig
from .group_options import (
    GroupOptions,
    InfoTheoOptions,
    LandmarkingOptions,
    NoOptions,
    StatisticalOptions,
    validate_options,
)
from .summary_configs import DEFAULT_SUMMARY, SummaryConfig

__all__ = [
    # choice types
    "Arity",
    "AttributeKind",
    "ScoreName",
    "SummarizerKind",
    # configs
    "ExtractionConfig",
    "SummaryConfig",
    "DEFAULT_SUMMARY",
    # group options
    "GroupOptions",
    "NoOptions",
    "StatisticalOptions",
    "InfoTheoOptions",
    "LandmarkingOptions",
    "validate_options",
]
