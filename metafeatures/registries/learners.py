from __future__ import annotations

from typing import Any, Callable, Optional

from metafeatures.registries.base import Registry

# random_state -> unfitted sklearn-style classifier
LearnerFactory = Callable[[Optional[int]], Any]

_LEARNERS: Registry[str, LearnerFactory] = Registry(_name="landmarkers")

_BUILTINS_LOADED = False


def register_learner(name: str) -> Callable[[LearnerFactory], LearnerFactory]:
    return _LEARNERS.register(name)


def _ensure_builtins() -> None:
    global _BUILTINS_LOADED
    if _BUILTINS_LOADED:
        return
    from metafeatures.registries.builtins import learners as _  # noqa: F401
    _LEARNERS.freeze()
    _BUILTINS_LOADED = True


def make_learner(name: str, *, random_state: Optional[int] = None) -> Any:
    """Return an unfitted landmarking learner for ``name``."""
    _ensure_builtins()
    factory = _LEARNERS.try_get(name)
    if factory is None:
        raise ValueError(f"Unknown landmarking learner: {name!r}")
    return factory(random_state)


def list_learners() -> list[str]:
    _ensure_builtins()
    return list(_LEARNERS.keys())
