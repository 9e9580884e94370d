"""
Score Calculator

Turns the ensemble's vote shares into a 0-100 risk score and a confidence.
"""
from typing import Dict
import math

import numpy as np

from .ensemble import RiskProbabilities, VoteTally
from .trees import RiskLabel

# Points contributed by a full vote share for each label
LABEL_WEIGHTS: Dict[RiskLabel, float] = {
    RiskLabel.HIGH: 100.0,
    RiskLabel.MEDIUM: 50.0,
    RiskLabel.LOW: 0.0,
}


def compute_score(probabilities: RiskProbabilities) -> int:
    """Weighted vote share: High counts 100, Medium 50, Low 0. Halves round up."""
    raw = (
        probabilities.high * LABEL_WEIGHTS[RiskLabel.HIGH]
        + probabilities.medium * LABEL_WEIGHTS[RiskLabel.MEDIUM]
        + probabilities.low * LABEL_WEIGHTS[RiskLabel.LOW]
    )
    return int(math.floor(float(np.clip(raw, 0, 100)) + 0.5))


def compute_confidence(tally: VoteTally, label: RiskLabel) -> float:
    """Vote share of the winning label."""
    return float(np.clip(tally[label] / tally.total, 0, 1))
