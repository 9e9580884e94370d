"""
Shared fixtures for kidney risk tests.
"""
from typing import Any, Callable, Dict

import pytest

from kidneyguard.core.features import FeatureNormalizer, NormalizedFeatureSet, PatientFeatureSet


HEALTHY_RECORD: Dict[str, Any] = {
    "GFR": 95,
    "SerumCreatinine": 0.9,
    "ACR": 10,
    "BUN": 15,
    "SerumElectrolytesCalcium": 9.5,
    "ProteinInUrine": 50,
    "BloodPressureSystolic": 115,
    "BloodPressureDiastolic": 75,
    "Age": 30,
    "Gender": "Female",
    "FamilyHistory": "No",
    "Smoking": "Never",
    "AlcoholConsumption": "None",
    "PhysicalActivity": "Active",
    "DietQuality": "Excellent",
    "SleepQuality": "Excellent",
    "HeightCm": 175,
    "WeightKg": 70,
}

# Severe labs on an otherwise average patient
SEVERE_RECORD: Dict[str, Any] = {
    "GFR": 25,
    "SerumCreatinine": 3.2,
    "ACR": 600,
    "BUN": 65,
    "SerumElectrolytesCalcium": 9.5,
    "ProteinInUrine": 600,
    "BloodPressureSystolic": 170,
    "BloodPressureDiastolic": 85,
    "Age": 45,
    "Gender": "Male",
    "FamilyHistory": "No",
    "Smoking": "Never",
    "AlcoholConsumption": "Light",
    "PhysicalActivity": "Moderate",
    "DietQuality": "Good",
    "SleepQuality": "Good",
    "HeightCm": 170,
    "WeightKg": 70,
}


@pytest.fixture
def healthy_record() -> Dict[str, Any]:
    return dict(HEALTHY_RECORD)


@pytest.fixture
def severe_record() -> Dict[str, Any]:
    return dict(SEVERE_RECORD)


@pytest.fixture
def make_features() -> Callable[..., NormalizedFeatureSet]:
    """Normalized healthy features with snake_case overrides."""
    normalizer = FeatureNormalizer()
    base = PatientFeatureSet.from_mapping(HEALTHY_RECORD)

    def _make(**overrides: Any) -> NormalizedFeatureSet:
        values = {**base.to_dict(), **overrides}
        return normalizer.normalize(PatientFeatureSet.from_mapping(values))

    return _make
