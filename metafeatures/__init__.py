"""Meta-feature extraction for labeled tabular datasets."""

from metafeatures.api import (
    DEFAULT_SUMMARY,
    Dataset,
    ExtractionConfig,
    SummaryConfig,
    extract,
    extract_group,
    list_features,
    list_groups,
    list_summarizers,
    make_dataset,
    run_extraction,
    summarize,
)
from metafeatures.core.errors import (
    FeatureComputationFailure,
    FoldScoringFailure,
    InsufficientData,
    InvalidOptions,
    InvalidSummaryParams,
    MetaFeatureError,
    UnknownFeature,
    UnknownGroup,
    UnknownSummarizer,
)

__version__ = "0.1.0"

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
    "MetaFeatureError",
    "UnknownGroup",
    "UnknownFeature",
    "UnknownSummarizer",
    "InvalidOptions",
    "InvalidSummaryParams",
    "InsufficientData",
    "FeatureComputationFailure",
    "FoldScoringFailure",
]
