"""Extraction exceptions.

Fatal errors propagate to the caller and fail the whole call. The two
recoverable ones (:class:`FeatureComputationFailure`,
:class:`FoldScoringFailure`) are raised inside compute paths and absorbed by
the dispatcher and the landmarking evaluator respectively.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence


class MetaFeatureError(RuntimeError):
    """Base class for every error raised by the extraction core."""


class UnknownGroup(MetaFeatureError, KeyError):
    def __init__(self, group: str, available: Sequence[str] = ()):
        self.group = group
        self.available = list(available)
        super().__init__(f"Unknown meta-feature group {group!r}. Available: {self.available}")

    def __str__(self) -> str:
        return self.args[0]


class UnknownFeature(MetaFeatureError, KeyError):
    def __init__(self, group: str, feature: str, available: Sequence[str] = ()):
        self.group = group
        self.feature = feature
        self.available = list(available)
        super().__init__(
            f"Unknown feature {feature!r} in group {group!r}. Available: {self.available}"
        )

    def __str__(self) -> str:
        return self.args[0]


class UnknownSummarizer(MetaFeatureError, KeyError):
    def __init__(self, name: str, available: Sequence[str] = ()):
        self.name = name
        self.available = list(available)
        super().__init__(f"Unknown summarizer {name!r}. Available: {self.available}")

    def __str__(self) -> str:
        return self.args[0]


class InvalidOptions(MetaFeatureError, ValueError):
    """Raised when group options fail validation."""

    def __init__(self, group: str, reason: str):
        self.group = group
        self.reason = reason
        super().__init__(f"Invalid options for group {group!r}: {reason}")


class InsufficientData(MetaFeatureError, ValueError):
    """Raised when the dataset is too small for the requested computation."""

    def __init__(self, reason: str, *, group: Optional[str] = None, context: Optional[dict[str, Any]] = None):
        self.reason = reason
        self.group = group
        self.context = dict(context or {})
        where = f" (group {group!r})" if group else ""
        super().__init__(f"Insufficient data{where}: {reason}")


class InvalidSummaryParams(MetaFeatureError, ValueError):
    """Raised when the summary parameters contradict each other."""

    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid parameters for summarizer {name!r}: {reason}")


class FeatureComputationFailure(MetaFeatureError):
    """A single measure could not be computed; its output is recorded as empty."""

    def __init__(self, group: str, feature: str, cause: BaseException):
        self.group = group
        self.feature = feature
        self.cause = cause
        super().__init__(f"{group}.{feature} failed: {type(cause).__name__}: {cause}")


class FoldScoringFailure(MetaFeatureError):
    """A single landmarking fold could not be scored; the fold is dropped."""

    def __init__(self, fold: int, reason: str):
        self.fold = fold
        self.reason = reason
        super().__init__(f"fold {fold}: {reason}")


__all__ = [
    "MetaFeatureError",
    "UnknownGroup",
    "UnknownFeature",
    "UnknownSummarizer",
    "InvalidOptions",
    "InsufficientData",
    "InvalidSummaryParams",
    "FeatureComputationFailure",
    "FoldScoringFailure",
]
