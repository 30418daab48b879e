from .evaluators import EvaluationRecord, EvaluationState, FoldScore, LandmarkEvaluator
from .scoring import list_scores, score

__all__ = [
    "EvaluationRecord",
    "EvaluationState",
    "FoldScore",
    "LandmarkEvaluator",
    "list_scores",
    "score",
]
