"""
Assessment Service - Kidney Risk Assessment Logic
"""
import uuid
import logging
from datetime import datetime
from typing import Dict, Any, Mapping, Optional

from kidneyguard.core.inference.risk_engine import RiskEngine
from kidneyguard.config import settings

logger = logging.getLogger(__name__)


class AssessmentService:
    """
    Service class wrapping the risk engine for the API.
    Stamps each prediction with an id and timestamp; nothing is stored.
    """

    def __init__(self, risk_engine: Optional[RiskEngine] = None):
        self.risk_engine = risk_engine or RiskEngine(log_tree_votes=settings.log_tree_votes)

    def assess(self, patient_id: str, features: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        """
        Runs one risk assessment.

        Args:
            patient_id: ID of the patient.
            features: Patient record keyed by CamelCase or snake_case field names.

        Returns:
            A dictionary shaped like AssessmentResponse.

        Raises:
            InvalidInputError: if features is not a record.
        """
        assessment_id = f"KRA-{uuid.uuid4().hex[:8].upper()}"
        prediction = self.risk_engine.assess(features)

        logger.info(
            f"Assessment {assessment_id} for {patient_id}: "
            f"{prediction.label.value} (score={prediction.score}, confidence={prediction.confidence:.2f})"
        )

        return {
            "assessment_id": assessment_id,
            "patient_id": patient_id,
            "timestamp": datetime.now().isoformat(),
            "risk_level": prediction.label.value,
            "risk_score": prediction.score,
            "confidence": round(prediction.confidence, 2),
            "probabilities": prediction.probabilities.to_dict(),
        }
