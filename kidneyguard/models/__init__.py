"""
API request and response models.
"""
from .assessment import (
    PatientFeaturesInput,
    AssessmentRequest,
    AssessmentResponse,
    HealthResponse,
)

__all__ = [
    "PatientFeaturesInput",
    "AssessmentRequest",
    "AssessmentResponse",
    "HealthResponse",
]
