"""
Risk Engine Module

Single entry point for kidney disease risk assessment: normalizes the
patient features, runs the decision-tree ensemble and derives the score.
"""
from dataclasses import dataclass
from typing import Dict, Any, Mapping, Optional, Sequence, Union

from kidneyguard.core.features.base import InvalidInputError, PatientFeatureSet
from kidneyguard.core.features.normalizer import FeatureNormalizer
from kidneyguard.utils import get_logger
from .ensemble import EnsembleAggregator, RiskProbabilities
from .scoring import compute_confidence, compute_score
from .trees import DECISION_TREES, Evaluator, RiskLabel

logger = get_logger(__name__)

FeatureInput = Union[PatientFeatureSet, Mapping[str, Any]]


@dataclass(frozen=True)
class RiskPrediction:
    """Result of one assessment. Carries no patient identity or timestamp."""
    label: RiskLabel
    probabilities: RiskProbabilities
    score: int          # 0-100
    confidence: float   # 0-1, vote share of the label

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "label": self.label.value,
            "probabilities": self.probabilities.to_dict(),
            "score": self.score,
            "confidence": self.confidence,
        }


class RiskEngine:
    """
    Kidney risk engine.

    Holds only the normalizer and the fixed tree ensemble, so one instance
    can serve concurrent callers without locking.
    """

    def __init__(
        self,
        trees: Sequence[Evaluator] = DECISION_TREES,
        log_tree_votes: bool = False,
    ):
        """
        Args:
            trees: Ordered decision trees to vote with
            log_tree_votes: Debug-log every tree's vote
        """
        self._normalizer = FeatureNormalizer()
        self._ensemble = EnsembleAggregator(trees, log_tree_votes=log_tree_votes)

    @property
    def tree_count(self) -> int:
        return len(self._ensemble.trees)

    def assess(self, features: Optional[FeatureInput]) -> RiskPrediction:
        """
        Assess kidney disease risk for one patient.

        Args:
            features: PatientFeatureSet, or a record keyed by the CamelCase
                field names (e.g. "GFR", "SerumCreatinine") or snake_case names

        Returns:
            RiskPrediction with label, probabilities, score and confidence

        Raises:
            InvalidInputError: if features is missing or not a record
        """
        patient = self._coerce(features)
        normalized = self._normalizer.normalize(patient)
        vote = self._ensemble.aggregate(normalized)

        score = compute_score(vote.probabilities)
        confidence = compute_confidence(vote.tally, vote.label)

        logger.debug(f"Risk assessed: {vote.label.value} score={score} confidence={confidence:.2f}")

        return RiskPrediction(
            label=vote.label,
            probabilities=vote.probabilities,
            score=score,
            confidence=confidence,
        )

    @staticmethod
    def _coerce(features: Optional[FeatureInput]) -> PatientFeatureSet:
        if features is None:
            raise InvalidInputError("Feature set is required")
        if isinstance(features, PatientFeatureSet):
            return features
        if isinstance(features, Mapping):
            return PatientFeatureSet.from_mapping(features)
        raise InvalidInputError(
            f"Feature set must be a record, got {type(features).__name__}"
        )


_default_engine = RiskEngine()


def assess_risk(features: Optional[FeatureInput]) -> RiskPrediction:
    """Assess risk with the default ten-tree engine."""
    return _default_engine.assess(features)
