"""
Inference Module

Decision-tree ensemble that turns patient features into a kidney risk prediction.
"""
from .trees import RiskLabel, DECISION_TREES
from .ensemble import EnsembleAggregator, VoteTally, RiskProbabilities, resolve_majority
from .scoring import compute_score, compute_confidence
from .risk_engine import RiskEngine, RiskPrediction, assess_risk

__all__ = [
    "RiskLabel",
    "DECISION_TREES",
    "EnsembleAggregator",
    "VoteTally",
    "RiskProbabilities",
    "resolve_majority",
    "compute_score",
    "compute_confidence",
    "RiskEngine",
    "RiskPrediction",
    "assess_risk",
]
