"""
Features Module

Patient feature records and categorical normalization.
"""
from .base import (
    PatientFeatureSet,
    NormalizedFeatureSet,
    InvalidInputError,
    Gender,
    FamilyHistory,
    Smoking,
    AlcoholConsumption,
    PhysicalActivity,
    Quality,
    FIELD_ALIASES,
)
from .normalizer import FeatureNormalizer

__all__ = [
    "PatientFeatureSet",
    "NormalizedFeatureSet",
    "InvalidInputError",
    "Gender",
    "FamilyHistory",
    "Smoking",
    "AlcoholConsumption",
    "PhysicalActivity",
    "Quality",
    "FIELD_ALIASES",
    "FeatureNormalizer",
]
