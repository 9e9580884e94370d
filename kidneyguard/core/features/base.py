"""
Feature Set Data Structures

Patient feature records consumed by the kidney risk engine, plus the
normalized form the decision trees read.
"""
from dataclasses import dataclass, fields
from typing import Dict, Any, Mapping, Optional
from enum import Enum
import math

from kidneyguard.utils import get_logger

logger = get_logger(__name__)

MISSING = float("nan")


class InvalidInputError(ValueError):
    """Raised when the assessment argument is absent or not a feature record."""


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class FamilyHistory(str, Enum):
    YES = "Yes"
    NO = "No"
    UNKNOWN = "Unknown"


class Smoking(str, Enum):
    NEVER = "Never"
    FORMER = "Former"
    CURRENT = "Current"


class AlcoholConsumption(str, Enum):
    NONE = "None"
    LIGHT = "Light"
    MODERATE = "Moderate"
    HEAVY = "Heavy"


class PhysicalActivity(str, Enum):
    SEDENTARY = "Sedentary"
    LIGHT = "Light"
    MODERATE = "Moderate"
    ACTIVE = "Active"


class Quality(str, Enum):
    """Shared scale for diet and sleep quality."""
    POOR = "Poor"
    FAIR = "Fair"
    GOOD = "Good"
    EXCELLENT = "Excellent"


NUMERIC_FIELDS = (
    "serum_creatinine",
    "bun",
    "gfr",
    "acr",
    "serum_electrolytes_calcium",
    "protein_in_urine",
    "blood_pressure_systolic",
    "blood_pressure_diastolic",
    "age",
    "height_cm",
    "weight_kg",
)

CATEGORICAL_FIELDS = (
    "gender",
    "family_history",
    "smoking",
    "alcohol_consumption",
    "physical_activity",
    "diet_quality",
    "sleep_quality",
)

# Record keys as written by the patient record editor
FIELD_ALIASES: Dict[str, str] = {
    "SerumCreatinine": "serum_creatinine",
    "BUN": "bun",
    "GFR": "gfr",
    "ACR": "acr",
    "SerumElectrolytesCalcium": "serum_electrolytes_calcium",
    "ProteinInUrine": "protein_in_urine",
    "BloodPressureSystolic": "blood_pressure_systolic",
    "BloodPressureDiastolic": "blood_pressure_diastolic",
    "Age": "age",
    "HeightCm": "height_cm",
    "WeightKg": "weight_kg",
    "Gender": "gender",
    "FamilyHistory": "family_history",
    "Smoking": "smoking",
    "AlcoholConsumption": "alcohol_consumption",
    "PhysicalActivity": "physical_activity",
    "DietQuality": "diet_quality",
    "SleepQuality": "sleep_quality",
}


def to_number(value: Any, name: str = "") -> float:
    """
    Read a clinical measurement as a float.

    Missing or unreadable values become NaN, which fails every threshold
    comparison downstream. Integers too large for a float become signed
    infinity.
    """
    if value is None:
        return MISSING
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf
    except (TypeError, ValueError):
        logger.debug(f"Unreadable numeric value for {name or 'field'}: {value!r}")
        return MISSING


@dataclass(frozen=True)
class PatientFeatureSet:
    """
    Raw clinical and lifestyle measurements for one assessment.

    Numeric fields default to NaN when absent. Categorical fields hold the
    string drawn from their enumerated set, or whatever the caller supplied.
    """
    serum_creatinine: float = MISSING   # mg/dL
    bun: float = MISSING                # mg/dL
    gfr: float = MISSING                # mL/min/1.73m2
    acr: float = MISSING                # mg/g
    serum_electrolytes_calcium: float = MISSING  # mg/dL
    protein_in_urine: float = MISSING   # mg/dL
    blood_pressure_systolic: float = MISSING   # mmHg
    blood_pressure_diastolic: float = MISSING  # mmHg
    age: float = MISSING                # years
    height_cm: float = MISSING
    weight_kg: float = MISSING
    gender: Optional[str] = None
    family_history: Optional[str] = None
    smoking: Optional[str] = None
    alcohol_consumption: Optional[str] = None
    physical_activity: Optional[str] = None
    diet_quality: Optional[str] = None
    sleep_quality: Optional[str] = None

    def __post_init__(self):
        for name in NUMERIC_FIELDS:
            object.__setattr__(self, name, to_number(getattr(self, name), name))
        for name in CATEGORICAL_FIELDS:
            value = getattr(self, name)
            if isinstance(value, Enum):
                object.__setattr__(self, name, value.value)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "PatientFeatureSet":
        """Build a feature set from a record keyed by CamelCase or snake_case names."""
        known = {f.name for f in fields(cls)}
        values: Dict[str, Any] = {}
        for key, value in data.items():
            name = FIELD_ALIASES.get(key, key)
            if name in known:
                values[name] = value
        return cls(**values)

    @property
    def bmi(self) -> float:
        """Body mass index, NaN when height is missing or not positive."""
        if not self.height_cm > 0:
            return MISSING
        return self.weight_kg / (self.height_cm / 100) ** 2

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the CamelCase record keys."""
        reverse = {v: k for k, v in FIELD_ALIASES.items()}
        result = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, float) and math.isnan(value):
                value = None
            result[reverse.get(f.name, f.name)] = value
        return result


@dataclass(frozen=True)
class NormalizedFeatureSet(PatientFeatureSet):
    """
    Feature set with numeric codes for each categorical field.

    The categorical strings are kept unchanged for trees that switch on them.
    """
    gender_numeric: float = 0.5
    family_history_numeric: float = 0.5
    smoking_numeric: float = 0.0
    alcohol_numeric: float = 0.0
    activity_numeric: float = 0.5
    diet_numeric: float = 0.5
    sleep_numeric: float = 0.5

    def numeric_codes(self) -> Dict[str, float]:
        return {
            "gender": self.gender_numeric,
            "family_history": self.family_history_numeric,
            "smoking": self.smoking_numeric,
            "alcohol_consumption": self.alcohol_numeric,
            "physical_activity": self.activity_numeric,
            "diet_quality": self.diet_numeric,
            "sleep_quality": self.sleep_numeric,
        }
