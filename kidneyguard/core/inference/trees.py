"""
Decision Trees

Ten fixed, hand-authored rule sets over the same patient features. Each
tree is a pure function returning a RiskLabel; the first satisfied branch
wins. Thresholds are strict: a value sitting exactly on a threshold takes
the "not triggered" branch. Missing measurements are NaN and fail every
comparison.
"""
from typing import Callable, Dict, Tuple
from enum import Enum

from kidneyguard.core.features.base import (
    NormalizedFeatureSet,
    FamilyHistory,
    Smoking,
    AlcoholConsumption,
    PhysicalActivity,
    Quality,
)


class RiskLabel(str, Enum):
    """Kidney disease risk categories."""
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


Evaluator = Callable[[NormalizedFeatureSet], RiskLabel]

HIGH = RiskLabel.HIGH
MEDIUM = RiskLabel.MEDIUM
LOW = RiskLabel.LOW


def gfr_creatinine_tree(f: NormalizedFeatureSet) -> RiskLabel:
    """Kidney filtration led: GFR first, creatinine as the tiebreaker."""
    if f.gfr < 30:
        return HIGH
    if f.gfr < 60:
        if f.serum_creatinine > 2.0:
            return HIGH
        return MEDIUM
    if f.serum_creatinine > 1.5:
        return MEDIUM
    return LOW


def proteinuria_tree(f: NormalizedFeatureSet) -> RiskLabel:
    """Proteinuria and albumin-to-creatinine ratio."""
    if f.acr > 300:
        return HIGH
    if f.protein_in_urine > 500:
        return HIGH
    if f.acr > 30:
        return MEDIUM
    return LOW


def blood_pressure_age_tree(f: NormalizedFeatureSet) -> RiskLabel:
    """Systolic pressure, with a stricter cut for patients over 65."""
    if f.blood_pressure_systolic > 160:
        return HIGH
    if f.age > 65:
        if f.blood_pressure_systolic > 140:
            return HIGH
        return MEDIUM
    if f.blood_pressure_systolic > 140:
        return MEDIUM
    return LOW


def bun_electrolyte_tree(f: NormalizedFeatureSet) -> RiskLabel:
    """Blood urea nitrogen, escalated by abnormal serum calcium."""
    if f.bun > 60:
        return HIGH
    if f.bun > 40:
        calcium = f.serum_electrolytes_calcium
        if calcium < 8.0 or calcium > 11.0:
            return HIGH
        return MEDIUM
    if f.bun > 25:
        return MEDIUM
    return LOW


SMOKING_POINTS: Dict[str, int] = {Smoking.CURRENT.value: 2, Smoking.FORMER.value: 1}
ALCOHOL_POINTS: Dict[str, int] = {AlcoholConsumption.HEAVY.value: 2, AlcoholConsumption.MODERATE.value: 1}
ACTIVITY_POINTS: Dict[str, int] = {PhysicalActivity.SEDENTARY.value: 2, PhysicalActivity.LIGHT.value: 1}
DIET_POINTS: Dict[str, int] = {Quality.POOR.value: 2, Quality.FAIR.value: 1}
SLEEP_POINTS: Dict[str, int] = {Quality.POOR.value: 1}


def _points(table: Dict[str, int], value) -> int:
    return table.get(value, 0) if isinstance(value, str) else 0


def lifestyle_score(f: NormalizedFeatureSet) -> int:
    """Additive lifestyle burden, 0 (best) to 9 (worst)."""
    return (
        _points(SMOKING_POINTS, f.smoking)
        + _points(ALCOHOL_POINTS, f.alcohol_consumption)
        + _points(ACTIVITY_POINTS, f.physical_activity)
        + _points(DIET_POINTS, f.diet_quality)
        + _points(SLEEP_POINTS, f.sleep_quality)
    )


def lifestyle_tree(f: NormalizedFeatureSet) -> RiskLabel:
    score = lifestyle_score(f)
    if score >= 5:
        return HIGH
    if score >= 3:
        return MEDIUM
    return LOW


def clinical_bmi_tree(f: NormalizedFeatureSet) -> RiskLabel:
    """Combined clinical markers with obesity-driven hypertension."""
    if f.gfr < 45 and f.acr > 100:
        return HIGH
    if f.serum_creatinine > 2.5:
        return HIGH
    if f.bmi > 35 and f.blood_pressure_systolic > 140:
        return MEDIUM
    if f.gfr < 60 or f.acr > 30:
        return MEDIUM
    return LOW


def family_history_tree(f: NormalizedFeatureSet) -> RiskLabel:
    if f.family_history == FamilyHistory.YES:
        if f.age > 50:
            if f.gfr < 60:
                return HIGH
            return MEDIUM
        return MEDIUM
    if f.age > 70 and f.gfr < 60:
        return MEDIUM
    return LOW


def critical_factor_count(f: NormalizedFeatureSet) -> int:
    return sum((
        f.serum_creatinine > 2.0,
        f.gfr < 45,
        f.acr > 300,
        f.blood_pressure_systolic > 160,
        f.protein_in_urine > 500,
    ))


def critical_factor_tree(f: NormalizedFeatureSet) -> RiskLabel:
    """Counts critical findings; any single one is already Medium."""
    count = critical_factor_count(f)
    if count >= 3:
        return HIGH
    if count >= 1:
        return MEDIUM
    return LOW


def early_detection_tree(f: NormalizedFeatureSet) -> RiskLabel:
    """Flags microalbuminuria and borderline creatinine before GFR falls."""
    if 30 < f.acr < 300 and 60 <= f.gfr < 90:
        return MEDIUM
    if 1.3 < f.serum_creatinine < 2.0:
        return MEDIUM
    if f.gfr < 30:
        return HIGH
    if f.gfr < 60:
        return MEDIUM
    return LOW


def moderate_factor_count(f: NormalizedFeatureSet) -> int:
    return sum((
        f.gfr < 60,
        f.serum_creatinine > 1.5,
        f.acr > 100,
        f.blood_pressure_systolic > 140,
        f.bmi > 30,
        f.age > 60,
        f.family_history == FamilyHistory.YES,
        f.smoking == Smoking.CURRENT,
    ))


def comprehensive_tree(f: NormalizedFeatureSet) -> RiskLabel:
    """Severe indicators short-circuit; otherwise moderate factors are counted."""
    if f.gfr < 30 or f.serum_creatinine > 3.0 or f.acr > 500:
        return HIGH
    count = moderate_factor_count(f)
    if count >= 4:
        return HIGH
    if count >= 2:
        return MEDIUM
    return LOW


# Vote order of the ensemble
DECISION_TREES: Tuple[Evaluator, ...] = (
    gfr_creatinine_tree,
    proteinuria_tree,
    blood_pressure_age_tree,
    bun_electrolyte_tree,
    lifestyle_tree,
    clinical_bmi_tree,
    family_history_tree,
    critical_factor_tree,
    early_detection_tree,
    comprehensive_tree,
)
