import pytest

from unified_ai_platform.domain.inputs import HealthProfile, LifestyleProfile
from unified_ai_platform.domain.models import RiskLevel
from unified_ai_platform.scoring.health import diabetes_score, predict_diabetes_risk, predict_stress, stress_score


def _lifestyle(sleep: float = 7, work: float = 8, exercise: float = 30, social: float = 3) -> LifestyleProfile:
    return LifestyleProfile(sleep_hours=sleep, work_hours=work, exercise_minutes=exercise, social_interaction=social)


def test_overworked_and_sleepless_is_high_stress() -> None:
    result = predict_stress(_lifestyle(sleep=5, work=11, exercise=10, social=1))
    assert result.prediction == "HIGH STRESS LEVEL"
    assert result.confidence == 0.87
    assert result.risk_level is RiskLevel.HIGH


def test_balanced_routine_is_low_stress() -> None:
    result = predict_stress(_lifestyle())
    assert result.prediction == "MODERATE/LOW STRESS"
    assert result.confidence == 0.55
    assert result.risk_level is RiskLevel.LOW


def test_sleep_and_work_bands_are_exclusive() -> None:
    assert stress_score(_lifestyle(sleep=5.5)) == pytest.approx(0.3)
    assert stress_score(_lifestyle(sleep=6.5)) == pytest.approx(0.15)
    assert stress_score(_lifestyle(work=12)) == pytest.approx(0.3)
    assert stress_score(_lifestyle(work=9)) == pytest.approx(0.15)


def test_stress_confidence_uses_half_scale() -> None:
    result = predict_stress(_lifestyle(sleep=5, work=9))
    assert result.prediction == "HIGH STRESS LEVEL"
    assert result.risk_level is RiskLevel.MEDIUM
    assert result.confidence == pytest.approx(0.775)


def test_every_diabetes_factor_present() -> None:
    profile = HealthProfile.model_validate(
        {"age": 65, "bmi": 32, "familyHistory": True, "physicalActivity": 1, "bloodPressure": 140}
    )
    assert diabetes_score(profile) == pytest.approx(1.15)
    result = predict_diabetes_risk(profile)
    assert result.prediction == "ELEVATED DIABETES RISK"
    assert result.confidence == 0.82
    assert result.risk_level is RiskLevel.HIGH


def test_healthy_profile_is_low_risk() -> None:
    profile = HealthProfile(age=45, bmi=25, family_history=False, physical_activity=3, blood_pressure=120)
    result = predict_diabetes_risk(profile)
    assert result.prediction == "LOW/NORMAL RISK"
    assert result.confidence == 0.5
    assert result.risk_level is RiskLevel.LOW


def test_middle_aged_overweight_stays_below_alert() -> None:
    profile = HealthProfile(age=50, bmi=27, family_history=False, physical_activity=5, blood_pressure=120)
    result = predict_diabetes_risk(profile)
    assert result.prediction == "LOW/NORMAL RISK"
    assert result.risk_level is RiskLevel.LOW
    assert result.confidence == pytest.approx(0.675)
