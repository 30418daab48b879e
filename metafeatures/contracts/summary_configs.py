from __future__ import annotations

from typing import Any, Callable, Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SummaryConfig(BaseModel):
    """Which summarizers to apply to every raw measure output.

    ``summary`` lists summarizer names in application order. An empty list
    means pass-through (same as ``["non.aggregated"]``). ``functions`` holds
    caller-supplied reducers keyed by the name used in ``summary``; ``params``
    is a flat parameter mapping shared by every summarizer (``bins``, ``min``,
    ``max``, ``normalize`` for the built-ins).
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    summary: List[str] = Field(default_factory=list)
    params: Dict[str, Any] = Field(default_factory=dict)
    functions: Dict[str, Callable[..., Any]] = Field(default_factory=dict)

    @field_validator("summary", mode="before")
    @classmethod
    def _coerce_summary(cls, v):
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        out: List[str] = []
        for name in v:
            if name not in out:
                out.append(str(name))
        return out

    @field_validator("params", mode="before")
    @classmethod
    def _coerce_params(cls, v):
        return {} if v is None else dict(v)

    @field_validator("functions", mode="before")
    @classmethod
    def _check_functions(cls, v):
        if v is None:
            return {}
        for name, fn in dict(v).items():
            if not callable(fn):
                raise ValueError(f"summary function {name!r} is not callable")
        return dict(v)


# Default summary used by the orchestrator when the caller supplies none.
DEFAULT_SUMMARY = SummaryConfig(summary=["mean", "sd"])
