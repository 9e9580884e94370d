"""
Ensemble Aggregator

Runs every decision tree over one normalized feature set, tallies the
votes and resolves the majority label.
"""
from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence, Tuple

from kidneyguard.core.features.base import NormalizedFeatureSet
from kidneyguard.utils import get_logger
from .trees import DECISION_TREES, Evaluator, RiskLabel

logger = get_logger(__name__)


@dataclass(frozen=True)
class VoteTally:
    """Votes per label; the counts always sum to the number of trees."""
    high: int = 0
    medium: int = 0
    low: int = 0

    @classmethod
    def from_votes(cls, votes: Iterable[RiskLabel]) -> "VoteTally":
        counts = {label: 0 for label in RiskLabel}
        for vote in votes:
            counts[RiskLabel(vote)] += 1
        return cls(
            high=counts[RiskLabel.HIGH],
            medium=counts[RiskLabel.MEDIUM],
            low=counts[RiskLabel.LOW],
        )

    @property
    def total(self) -> int:
        return self.high + self.medium + self.low

    def __getitem__(self, label: RiskLabel) -> int:
        return {
            RiskLabel.HIGH: self.high,
            RiskLabel.MEDIUM: self.medium,
            RiskLabel.LOW: self.low,
        }[RiskLabel(label)]

    def to_dict(self) -> Dict[str, int]:
        return {
            RiskLabel.HIGH.value: self.high,
            RiskLabel.MEDIUM.value: self.medium,
            RiskLabel.LOW.value: self.low,
        }


@dataclass(frozen=True)
class RiskProbabilities:
    """Share of the vote for each label."""
    high: float
    medium: float
    low: float

    @classmethod
    def from_tally(cls, tally: VoteTally) -> "RiskProbabilities":
        total = tally.total
        return cls(
            high=tally.high / total,
            medium=tally.medium / total,
            low=tally.low / total,
        )

    def to_dict(self) -> Dict[str, float]:
        return {"high": self.high, "medium": self.medium, "low": self.low}


def resolve_majority(tally: VoteTally) -> Tuple[RiskLabel, int]:
    """
    Pick the winning label and its vote count.

    Low is the starting leader. Medium takes over only with strictly more
    votes than Low, and High only with strictly more votes than whichever
    label leads at that point. Ties therefore never go to the more severe
    label: {Low: 5, High: 5} stays Low and {Medium: 5, High: 5} stays Medium.
    """
    label = RiskLabel.LOW
    max_votes = tally.low

    if tally.medium > max_votes:
        label = RiskLabel.MEDIUM
        max_votes = tally.medium

    if tally.high > max_votes:
        label = RiskLabel.HIGH
        max_votes = tally.high

    return label, max_votes


@dataclass(frozen=True)
class EnsembleVote:
    """Outcome of one ensemble pass."""
    votes: Tuple[RiskLabel, ...]
    tally: VoteTally
    probabilities: RiskProbabilities
    label: RiskLabel
    winning_votes: int


class EnsembleAggregator:
    """
    Majority-vote ensemble over a fixed, ordered set of decision trees.

    Trees are side-effect free, so vote order only matters for the
    per-tree debug trace.
    """

    def __init__(self, trees: Sequence[Evaluator] = DECISION_TREES, log_tree_votes: bool = False):
        if not trees:
            raise ValueError("Ensemble requires at least one decision tree")
        self._trees: Tuple[Evaluator, ...] = tuple(trees)
        self._log_tree_votes = log_tree_votes

    @property
    def trees(self) -> Tuple[Evaluator, ...]:
        return self._trees

    def collect_votes(self, features: NormalizedFeatureSet) -> List[RiskLabel]:
        votes = [tree(features) for tree in self._trees]
        if self._log_tree_votes:
            for tree, vote in zip(self._trees, votes):
                logger.debug(f"{getattr(tree, '__name__', repr(tree))}: {vote.value}")
        return votes

    def aggregate(self, features: NormalizedFeatureSet) -> EnsembleVote:
        votes = self.collect_votes(features)
        tally = VoteTally.from_votes(votes)
        probabilities = RiskProbabilities.from_tally(tally)
        label, winning_votes = resolve_majority(tally)

        logger.debug(
            f"Vote tally High={tally.high} Medium={tally.medium} Low={tally.low} -> {label.value}"
        )

        return EnsembleVote(
            votes=tuple(votes),
            tally=tally,
            probabilities=probabilities,
            label=label,
            winning_votes=winning_votes,
        )
