"""
Risk Assessment API Models
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, Optional


class PatientFeaturesInput(BaseModel):
    """
    Patient measurements as sent by the record editor.

    Accepts the CamelCase record keys (e.g. "GFR", "SerumCreatinine") or
    snake_case names. Every field is optional; missing measurements take
    the engine's fall-through branches.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    serum_creatinine: Optional[float] = Field(default=None, alias="SerumCreatinine", description="mg/dL")
    bun: Optional[float] = Field(default=None, alias="BUN", description="mg/dL")
    gfr: Optional[float] = Field(default=None, alias="GFR", description="mL/min/1.73m2")
    acr: Optional[float] = Field(default=None, alias="ACR", description="mg/g")
    serum_electrolytes_calcium: Optional[float] = Field(default=None, alias="SerumElectrolytesCalcium", description="mg/dL")
    protein_in_urine: Optional[float] = Field(default=None, alias="ProteinInUrine", description="mg/dL")
    blood_pressure_systolic: Optional[float] = Field(default=None, alias="BloodPressureSystolic", description="mmHg")
    blood_pressure_diastolic: Optional[float] = Field(default=None, alias="BloodPressureDiastolic", description="mmHg")
    age: Optional[float] = Field(default=None, alias="Age")
    height_cm: Optional[float] = Field(default=None, alias="HeightCm")
    weight_kg: Optional[float] = Field(default=None, alias="WeightKg")
    gender: Optional[str] = Field(default=None, alias="Gender", description="Male, Female or Other")
    family_history: Optional[str] = Field(default=None, alias="FamilyHistory", description="Yes, No or Unknown")
    smoking: Optional[str] = Field(default=None, alias="Smoking", description="Never, Former or Current")
    alcohol_consumption: Optional[str] = Field(default=None, alias="AlcoholConsumption")
    physical_activity: Optional[str] = Field(default=None, alias="PhysicalActivity")
    diet_quality: Optional[str] = Field(default=None, alias="DietQuality")
    sleep_quality: Optional[str] = Field(default=None, alias="SleepQuality")


class AssessmentRequest(BaseModel):
    """Request for a kidney risk assessment."""
    patient_id: str = Field(default="ANONYMOUS")
    features: PatientFeaturesInput


class AssessmentResponse(BaseModel):
    """Risk prediction stamped for the calling application."""
    assessment_id: str
    patient_id: str
    timestamp: str
    risk_level: str
    risk_score: int
    confidence: float
    probabilities: Dict[str, float]
    status: str = "success"


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str
    timestamp: str
