"""Dependency helpers for extraction use-cases.

Use-cases take their randomness explicitly (seed -> RngManager) instead of
reading any process-wide state.
"""

from __future__ import annotations

from typing import Optional

from metafeatures.runtime.random.rng import RngManager


def resolve_seed(seed: Optional[int], *, fallback: int = 0) -> int:
    """Return a deterministic seed; an absent seed falls back to ``fallback``."""

    return int(seed) if seed is not None else int(fallback)


def make_rng_manager(seed: Optional[int]) -> RngManager:
    return RngManager(resolve_seed(seed))
