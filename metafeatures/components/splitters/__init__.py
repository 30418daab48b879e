from .stratified import assign_folds, generate_folds
from .types import Split

__all__ = ["Split", "assign_folds", "generate_folds"]
