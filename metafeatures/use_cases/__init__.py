"""Extraction use-cases.

Prefer the stable entry points in :mod:`metafeatures.api`.
"""

from .extraction import compute_raw, extract_group
from .orchestration import run_extraction

__all__ = ["compute_raw", "extract_group", "run_extraction"]
