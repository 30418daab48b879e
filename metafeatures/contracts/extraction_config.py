from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .summary_configs import DEFAULT_SUMMARY, SummaryConfig


class ExtractionConfig(BaseModel):
    """Full request for a multi-group extraction.

    ``groups`` is either ``"all"`` or an explicit list of group names.
    ``features`` and ``options`` are keyed by group name; a group missing
    from ``features`` extracts every registered measure.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    groups: Union[str, List[str]] = "all"
    features: Dict[str, List[str]] = Field(default_factory=dict)
    options: Dict[str, Dict[str, Any]] = Field(default_factory=dict)
    summary: SummaryConfig = Field(default_factory=lambda: DEFAULT_SUMMARY)
    seed: Optional[int] = None

    @field_validator("groups", mode="before")
    @classmethod
    def _coerce_groups(cls, v):
        if v is None:
            return "all"
        if isinstance(v, str):
            return v if v == "all" else [v]
        return [str(g) for g in v]

    @field_validator("summary", mode="before")
    @classmethod
    def _coerce_summary(cls, v):
        if v is None:
            return DEFAULT_SUMMARY
        if isinstance(v, SummaryConfig):
            return v
        if isinstance(v, (str, list, tuple)):
            return SummaryConfig(summary=v)
        return v
