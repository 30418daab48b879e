from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Type

from pydantic import BaseModel

from metafeatures.contracts.choices import Arity
from metafeatures.core.errors import UnknownFeature, UnknownGroup
from metafeatures.registries.base import Registry

# (prepared group data, validated options) -> raw number or sequence of numbers
MeasureFn = Callable[[Any, BaseModel], Any]

# (dataset, validated options, rng manager) -> prepared group data
PrepareFn = Callable[[Any, BaseModel, Any], Any]


@dataclass(frozen=True)
class MeasureDescriptor:
    group: str
    name: str
    arity: Arity
    func: MeasureFn


@dataclass(frozen=True)
class GroupSpec:
    name: str
    options_model: Type[BaseModel]
    prepare: PrepareFn
    measures: Registry[str, MeasureDescriptor] = field(default_factory=Registry)


_GROUPS: Registry[str, GroupSpec] = Registry(_name="groups")

_BUILTINS_LOADED = False


def register_group(name: str, *, options_model: Type[BaseModel], prepare: PrepareFn) -> GroupSpec:
    spec = GroupSpec(
        name=name,
        options_model=options_model,
        prepare=prepare,
        measures=Registry(_name=f"measures[{name}]"),
    )
    _GROUPS.add(name, spec)
    return spec


def register_measure(group: str, name: str, *, arity: Arity = "vector") -> Callable[[MeasureFn], MeasureFn]:
    def deco(fn: MeasureFn) -> MeasureFn:
        spec = _GROUPS.get(group)
        spec.measures.add(name, MeasureDescriptor(group=group, name=name, arity=arity, func=fn))
        return fn

    return deco


def _ensure_builtins() -> None:
    global _BUILTINS_LOADED
    if _BUILTINS_LOADED:
        return
    from metafeatures.registries.builtins import general as _g  # noqa: F401
    from metafeatures.registries.builtins import statistical as _s  # noqa: F401
    from metafeatures.registries.builtins import infotheo as _i  # noqa: F401
    from metafeatures.registries.builtins import model_based as _m  # noqa: F401
    from metafeatures.registries.builtins import landmarking as _l  # noqa: F401

    for _, spec in _GROUPS.items():
        spec.measures.freeze()
    _GROUPS.freeze()
    _BUILTINS_LOADED = True


def get_group(group: str) -> GroupSpec:
    _ensure_builtins()
    spec = _GROUPS.try_get(group)
    if spec is None:
        raise UnknownGroup(group, available=list(_GROUPS.keys()))
    return spec


def list_groups() -> list[str]:
    _ensure_builtins()
    return list(_GROUPS.keys())


def list_features(group: str) -> list[str]:
    """Registered feature names of ``group`` in registration order."""
    return list(get_group(group).measures.keys())


def resolve(group: str, feature: str) -> MeasureDescriptor:
    spec = get_group(group)
    desc = spec.measures.try_get(feature)
    if desc is None:
        raise UnknownFeature(group, feature, available=list(spec.measures.keys()))
    return desc
