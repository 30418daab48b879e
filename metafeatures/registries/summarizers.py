from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Literal, Optional, Tuple

from metafeatures.contracts.choices import SummarizerKind
from metafeatures.registries.base import Registry

# How a summarizer's output is keyed:
#   scalar       -> <feature>.<name>
#   vector       -> <feature>.<name>.<i>
#   passthrough  -> <feature>.<i>
#   auto         -> scalar or vector, decided from the returned value
SummaryOutput = Literal["scalar", "vector", "passthrough", "auto"]


@dataclass(frozen=True)
class Summarizer:
    """A summarizer capability: built-in or caller-supplied."""

    name: str
    func: Callable[..., Any]
    kind: SummarizerKind = "builtin"
    output: SummaryOutput = "scalar"


_SUMMARIZERS: Registry[str, Summarizer] = Registry(_name="summarizers")
_ALIASES: dict[str, str] = {}

_BUILTINS_LOADED = False


def register_summarizer(
    name: str,
    *,
    output: SummaryOutput = "scalar",
    aliases: Tuple[str, ...] = (),
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    def deco(fn: Callable[..., Any]) -> Callable[..., Any]:
        _SUMMARIZERS.add(name, Summarizer(name=name, func=fn, kind="builtin", output=output))
        for alias in aliases:
            _ALIASES[alias] = name
        return fn

    return deco


def _ensure_builtins() -> None:
    global _BUILTINS_LOADED
    if _BUILTINS_LOADED:
        return
    from metafeatures.registries.builtins import summarizers as _  # noqa: F401
    _SUMMARIZERS.freeze()
    _BUILTINS_LOADED = True


def get_builtin_summarizer(name: str) -> Optional[Summarizer]:
    """Return the built-in summarizer for ``name`` (or an alias), else None."""
    _ensure_builtins()
    return _SUMMARIZERS.try_get(_ALIASES.get(name, name))


def list_summarizers() -> list[str]:
    _ensure_builtins()
    return list(_SUMMARIZERS.keys())
