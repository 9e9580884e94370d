"""
Feature Normalizer

Maps categorical patient attributes to numeric codes. Numeric clinical
fields pass through unchanged.
"""
from dataclasses import asdict
from typing import Dict, Any, Mapping, Optional, Tuple

from kidneyguard.utils import get_logger
from .base import (
    PatientFeatureSet,
    NormalizedFeatureSet,
    Gender,
    FamilyHistory,
    Smoking,
    AlcoholConsumption,
    PhysicalActivity,
    Quality,
)

logger = get_logger(__name__)


# (lookup table, fallback for unrecognized values)
GENDER_CODES: Tuple[Dict[str, float], float] = ({
    Gender.MALE.value: 1.0,
    Gender.FEMALE.value: 0.0,
    Gender.OTHER.value: 0.5,
}, 0.5)
FAMILY_HISTORY_CODES: Tuple[Dict[str, float], float] = ({
    FamilyHistory.YES.value: 1.0,
    FamilyHistory.NO.value: 0.0,
    FamilyHistory.UNKNOWN.value: 0.5,
}, 0.5)
SMOKING_CODES: Tuple[Dict[str, float], float] = ({
    Smoking.NEVER.value: 0.0,
    Smoking.FORMER.value: 0.5,
    Smoking.CURRENT.value: 1.0,
}, 0.0)
ALCOHOL_CODES: Tuple[Dict[str, float], float] = ({
    AlcoholConsumption.NONE.value: 0.0,
    AlcoholConsumption.LIGHT.value: 0.33,
    AlcoholConsumption.MODERATE.value: 0.66,
    AlcoholConsumption.HEAVY.value: 1.0,
}, 0.0)
ACTIVITY_CODES: Tuple[Dict[str, float], float] = ({
    PhysicalActivity.SEDENTARY.value: 0.0,
    PhysicalActivity.LIGHT.value: 0.33,
    PhysicalActivity.MODERATE.value: 0.66,
    PhysicalActivity.ACTIVE.value: 1.0,
}, 0.5)
QUALITY_CODES: Tuple[Dict[str, float], float] = ({
    Quality.POOR.value: 0.0,
    Quality.FAIR.value: 0.33,
    Quality.GOOD.value: 0.66,
    Quality.EXCELLENT.value: 1.0,
}, 0.5)

# categorical field -> (numeric companion field, code table)
CATEGORICAL_ENCODINGS: Dict[str, Tuple[str, Tuple[Dict[str, float], float]]] = {
    "gender": ("gender_numeric", GENDER_CODES),
    "family_history": ("family_history_numeric", FAMILY_HISTORY_CODES),
    "smoking": ("smoking_numeric", SMOKING_CODES),
    "alcohol_consumption": ("alcohol_numeric", ALCOHOL_CODES),
    "physical_activity": ("activity_numeric", ACTIVITY_CODES),
    "diet_quality": ("diet_numeric", QUALITY_CODES),
    "sleep_quality": ("sleep_numeric", QUALITY_CODES),
}


def encode_category(value: Any, table: Mapping[str, float]) -> Optional[float]:
    """Look up a categorical value; None when the value is not in the table."""
    if isinstance(value, str):
        return table.get(value)
    return None


class FeatureNormalizer:
    """
    Produces a NormalizedFeatureSet from raw patient features.

    Unrecognized categorical values are not an error; they silently receive
    the neutral default for their field.
    """

    def normalize(self, features: PatientFeatureSet) -> NormalizedFeatureSet:
        values = asdict(features)
        for name, (numeric_name, (table, default)) in CATEGORICAL_ENCODINGS.items():
            value = values.get(name)
            code = encode_category(value, table)
            if code is None:
                if value is not None:
                    logger.debug(f"Unrecognized {name} value {value!r}; using default {default}")
                code = default
            values[numeric_name] = code
        return NormalizedFeatureSet(**values)
