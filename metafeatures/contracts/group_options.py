from __future__ import annotations

from typing import Any, Mapping, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from metafeatures.core.errors import InvalidOptions

from .choices import ScoreName


class NoOptions(BaseModel):
    """Groups without options (general, model.based) reject every key."""

    model_config = ConfigDict(extra="forbid", frozen=True)


class StatisticalOptions(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    # Compute per-attribute measures separately for each class
    by_class: bool = False
    # One-hot encode categorical attributes instead of dropping them
    transform: bool = True


class InfoTheoOptions(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    # Discretize numeric attributes instead of dropping them
    transform: bool = True


class LandmarkingOptions(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    folds: int = Field(default=10, ge=2)
    score: ScoreName = "accuracy"


GroupOptions = Union[NoOptions, StatisticalOptions, InfoTheoOptions, LandmarkingOptions]


def validate_options(
    group: str,
    model: Type[BaseModel],
    options: Optional[Union[Mapping[str, Any], BaseModel]],
) -> BaseModel:
    """Validate ``options`` against ``model`` once per extraction call."""

    if options is None:
        return model()
    if isinstance(options, model):
        return options
    if isinstance(options, BaseModel):
        options = options.model_dump()
    try:
        return model.model_validate(dict(options))
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}" for err in e.errors()
        )
        raise InvalidOptions(group, details) from e
