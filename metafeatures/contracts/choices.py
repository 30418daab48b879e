from __future__ import annotations

"""Literal-based "choice" types shared by the config models.

Keep this file dependency-free (stdlib + typing only).
"""

from typing import Literal, TypeAlias


# -----------------------------
# Measures
# -----------------------------

# Output arity flag of a registered measure
Arity: TypeAlias = Literal["scalar", "vector"]

# Attribute kind inside a Dataset
AttributeKind: TypeAlias = Literal["numeric", "categorical"]


# -----------------------------
# Landmarking
# -----------------------------

ScoreName: TypeAlias = Literal["accuracy", "balanced_accuracy", "kappa"]


# -----------------------------
# Summaries
# -----------------------------

SummarizerKind: TypeAlias = Literal["builtin", "user"]
