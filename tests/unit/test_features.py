"""
Unit Tests for Features Module

Tests for feature record parsing and categorical normalization.
"""
import math

import pytest

from kidneyguard.core.features import (
    FeatureNormalizer, PatientFeatureSet, NormalizedFeatureSet, Smoking, FamilyHistory,
    Gender, AlcoholConsumption, PhysicalActivity, Quality,
)
from kidneyguard.core.features.normalizer import CATEGORICAL_ENCODINGS


@pytest.fixture
def normalizer() -> FeatureNormalizer:
    return FeatureNormalizer()


class TestPatientFeatureSet:
    """Tests for PatientFeatureSet parsing."""

    def test_from_mapping_record_keys(self, healthy_record):
        features = PatientFeatureSet.from_mapping(healthy_record)
        assert features.gfr == 95.0
        assert features.serum_creatinine == 0.9
        assert features.serum_electrolytes_calcium == 9.5
        assert features.family_history == "No"

    def test_from_mapping_snake_case_keys(self):
        features = PatientFeatureSet.from_mapping({"gfr": 40, "blood_pressure_systolic": 150})
        assert features.gfr == 40.0
        assert features.blood_pressure_systolic == 150.0

    def test_unknown_keys_ignored(self, healthy_record):
        healthy_record["name"] = "Jane Doe"
        features = PatientFeatureSet.from_mapping(healthy_record)
        assert not hasattr(features, "name")

    def test_missing_numeric_is_nan(self):
        features = PatientFeatureSet.from_mapping({"GFR": None})
        assert math.isnan(features.gfr)
        assert math.isnan(features.bun)

    def test_numeric_strings_are_read(self):
        features = PatientFeatureSet.from_mapping({"GFR": "42.5", "Age": "abc"})
        assert features.gfr == 42.5
        assert math.isnan(features.age)

    def test_oversized_integer_is_infinite(self):
        features = PatientFeatureSet.from_mapping({"GFR": 10**400, "ACR": -10**400})
        assert features.gfr == math.inf
        assert features.acr == -math.inf

    def test_enum_values_stored_as_strings(self):
        features = PatientFeatureSet(smoking=Smoking.CURRENT, family_history=FamilyHistory.YES)
        assert features.smoking == "Current"
        assert features.family_history == "Yes"

    def test_bmi(self):
        features = PatientFeatureSet(height_cm=200, weight_kg=100)
        assert features.bmi == pytest.approx(25.0)

    def test_bmi_without_height_is_nan(self):
        assert math.isnan(PatientFeatureSet(height_cm=0, weight_kg=80).bmi)
        assert math.isnan(PatientFeatureSet(weight_kg=80).bmi)

    def test_to_dict_uses_record_keys(self, healthy_record):
        d = PatientFeatureSet.from_mapping(healthy_record).to_dict()
        assert d["GFR"] == 95.0
        assert d["SleepQuality"] == "Excellent"

    def test_to_dict_missing_as_none(self):
        assert PatientFeatureSet().to_dict()["BUN"] is None


class TestFeatureNormalizer:
    """Tests for FeatureNormalizer."""

    def test_returns_normalized_set(self, normalizer, healthy_record):
        result = normalizer.normalize(PatientFeatureSet.from_mapping(healthy_record))
        assert isinstance(result, NormalizedFeatureSet)

    def test_numeric_fields_pass_through(self, normalizer, severe_record):
        result = normalizer.normalize(PatientFeatureSet.from_mapping(severe_record))
        assert result.gfr == 25.0
        assert result.serum_creatinine == 3.2
        assert result.protein_in_urine == 600.0

    def test_categoricals_retained(self, normalizer, healthy_record):
        result = normalizer.normalize(PatientFeatureSet.from_mapping(healthy_record))
        assert result.smoking == "Never"
        assert result.physical_activity == "Active"

    @pytest.mark.parametrize("value,expected", [
        ("Male", 1.0), ("Female", 0.0), ("Other", 0.5), ("Robot", 0.5),
    ])
    def test_gender_codes(self, normalizer, value, expected):
        assert normalizer.normalize(PatientFeatureSet(gender=value)).gender_numeric == expected

    @pytest.mark.parametrize("value,expected", [
        ("Yes", 1.0), ("No", 0.0), ("Unknown", 0.5), ("Maybe", 0.5),
    ])
    def test_family_history_codes(self, normalizer, value, expected):
        result = normalizer.normalize(PatientFeatureSet(family_history=value))
        assert result.family_history_numeric == expected

    @pytest.mark.parametrize("value,expected", [
        ("Never", 0.0), ("Former", 0.5), ("Current", 1.0), ("Occasional", 0.0),
    ])
    def test_smoking_codes(self, normalizer, value, expected):
        assert normalizer.normalize(PatientFeatureSet(smoking=value)).smoking_numeric == expected

    @pytest.mark.parametrize("value,expected", [
        ("None", 0.0), ("Light", 0.33), ("Moderate", 0.66), ("Heavy", 1.0), ("Binge", 0.0),
    ])
    def test_alcohol_codes(self, normalizer, value, expected):
        result = normalizer.normalize(PatientFeatureSet(alcohol_consumption=value))
        assert result.alcohol_numeric == expected

    @pytest.mark.parametrize("value,expected", [
        ("Sedentary", 0.0), ("Light", 0.33), ("Moderate", 0.66), ("Active", 1.0), ("Athlete", 0.5),
    ])
    def test_activity_codes(self, normalizer, value, expected):
        result = normalizer.normalize(PatientFeatureSet(physical_activity=value))
        assert result.activity_numeric == expected

    @pytest.mark.parametrize("value,expected", [
        ("Poor", 0.0), ("Fair", 0.33), ("Good", 0.66), ("Excellent", 1.0), ("Superb", 0.5),
    ])
    def test_quality_codes(self, normalizer, value, expected):
        result = normalizer.normalize(PatientFeatureSet(diet_quality=value, sleep_quality=value))
        assert result.diet_numeric == expected
        assert result.sleep_numeric == expected

    def test_missing_categoricals_get_defaults(self, normalizer):
        result = normalizer.normalize(PatientFeatureSet())
        assert result.numeric_codes() == {
            "gender": 0.5,
            "family_history": 0.5,
            "smoking": 0.0,
            "alcohol_consumption": 0.0,
            "physical_activity": 0.5,
            "diet_quality": 0.5,
            "sleep_quality": 0.5,
        }

    def test_non_string_categorical_gets_default(self, normalizer):
        result = normalizer.normalize(PatientFeatureSet(smoking=1, gender=["Male"]))
        assert result.smoking_numeric == 0.0
        assert result.gender_numeric == 0.5

    def test_case_sensitive_lookup(self, normalizer):
        assert normalizer.normalize(PatientFeatureSet(smoking="current")).smoking_numeric == 0.0

    @pytest.mark.parametrize("name,enum_cls", [
        ("gender", Gender),
        ("family_history", FamilyHistory),
        ("smoking", Smoking),
        ("alcohol_consumption", AlcoholConsumption),
        ("physical_activity", PhysicalActivity),
        ("diet_quality", Quality),
        ("sleep_quality", Quality),
    ])
    def test_code_tables_cover_enum_members(self, name, enum_cls):
        _, (table, _) = CATEGORICAL_ENCODINGS[name]
        assert set(table) == {member.value for member in enum_cls}

    def test_enum_members_encode_like_strings(self, normalizer):
        by_enum = normalizer.normalize(PatientFeatureSet(smoking=Smoking.FORMER, gender=Gender.MALE))
        by_string = normalizer.normalize(PatientFeatureSet(smoking="Former", gender="Male"))
        assert by_enum.numeric_codes() == by_string.numeric_codes()

    def test_unrecognized_value_logged(self, normalizer, caplog):
        with caplog.at_level("DEBUG", logger="kidneyguard"):
            normalizer.normalize(PatientFeatureSet(smoking="Occasional"))
        messages = [r.getMessage() for r in caplog.records]
        assert any("Unrecognized smoking value 'Occasional'" in m for m in messages)
        assert not any("Unrecognized gender" in m for m in messages)

    def test_recognized_value_not_logged(self, normalizer, caplog):
        with caplog.at_level("DEBUG", logger="kidneyguard"):
            normalizer.normalize(PatientFeatureSet(smoking="Current"))
        assert not any("Unrecognized" in r.getMessage() for r in caplog.records)
