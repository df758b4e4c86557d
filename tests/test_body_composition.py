import math

import pytest

from fittrack.core.analytics.body_composition import (
    DERIVED_FIELDS,
    MeasurementInput,
    calculate_absi,
    calculate_bmi,
    calculate_calorie_deficit,
    calculate_rmr,
    compute,
)
from fittrack.core.analytics.profile import UserProfile, normalize_profile

OPTIONAL_DERIVED = (
    "lean_body_mass_kg",
    "skeletal_muscle_mass_kg",
    "waist_to_hip_ratio",
    "waist_to_height_ratio",
    "absi",
    "maximum_safe_weekly_fat_loss_kg",
    "daily_calorie_deficit_target",
)


def test_weight_only_measurement_has_no_optional_fields():
    result = compute(MeasurementInput(current_weight_kg=70), UserProfile())

    for name in OPTIONAL_DERIVED:
        assert getattr(result, name) is None, name
    for name in ("bmi", "resting_metabolic_rate", "total_daily_energy_expenditure"):
        value = getattr(result, name)
        assert value is not None and math.isfinite(value)


def test_bmi_reference_value():
    assert calculate_bmi(70, 175) == pytest.approx(22.86, abs=0.01)
    result = compute(MeasurementInput(current_weight_kg=70), normalize_profile())
    assert result.bmi == pytest.approx(22.86, abs=0.01)


def test_rmr_mifflin_st_jeor_male_and_female():
    # 10*70 + 6.25*175 - 5*25 = 1668.75, then +5 (male) / -161 (female)
    assert calculate_rmr(70, 175, 25, is_male=True) == pytest.approx(1673.75)
    assert calculate_rmr(70, 175, 25, is_male=False) == pytest.approx(1507.75)


def test_tdee_uses_profile_multiplier():
    default = compute(MeasurementInput(current_weight_kg=70), UserProfile())
    assert default.physical_activity_level == 1.4
    assert default.total_daily_energy_expenditure == pytest.approx(1673.75 * 1.4, abs=0.01)

    active = compute(MeasurementInput(current_weight_kg=70), UserProfile(activity_multiplier=1.725))
    assert active.total_daily_energy_expenditure == pytest.approx(1673.75 * 1.725, abs=0.01)


def test_body_fat_gates_composition_fields():
    result = compute(MeasurementInput(current_weight_kg=70, body_fat_percent=20), UserProfile())

    assert result.lean_body_mass_kg == pytest.approx(56.0)
    assert result.skeletal_muscle_mass_kg == pytest.approx(56.015, abs=0.01)
    assert result.maximum_safe_weekly_fat_loss_kg == pytest.approx(0.7)


def test_skeletal_muscle_mass_female_branch():
    profile = UserProfile(biological_sex="female")
    result = compute(MeasurementInput(current_weight_kg=70, body_fat_percent=25), profile)
    assert result.skeletal_muscle_mass_kg == pytest.approx(52.115, abs=0.01)


def test_zero_body_fat_still_counts_as_present():
    result = compute(MeasurementInput(current_weight_kg=70, body_fat_percent=0), UserProfile())
    assert result.lean_body_mass_kg == pytest.approx(70.0)


def test_waist_ratios_and_absi():
    result = compute(MeasurementInput(current_weight_kg=70, waist_cm=80, hip_cm=100), UserProfile())

    assert result.waist_to_hip_ratio == pytest.approx(0.8)
    assert result.waist_to_height_ratio == pytest.approx(0.457)
    assert result.absi == pytest.approx(0.036, abs=0.001)
    assert calculate_absi(70, 175, 80) == result.absi


def test_waist_without_hip_skips_waist_to_hip_ratio():
    result = compute(MeasurementInput(current_weight_kg=70, waist_cm=80), UserProfile())

    assert result.waist_to_hip_ratio is None
    assert result.waist_to_height_ratio is not None
    assert result.absi is not None


def test_hip_alone_derives_nothing():
    result = compute(MeasurementInput(current_weight_kg=70, hip_cm=100), UserProfile())
    assert result.waist_to_hip_ratio is None
    assert result.waist_to_height_ratio is None
    assert result.absi is None


@pytest.mark.parametrize("current, goal", [(70, 70), (70, 75), (60.5, 80)])
def test_calorie_deficit_is_zero_when_at_or_below_goal(current, goal):
    assert calculate_calorie_deficit(current, goal) == 0
    result = compute(MeasurementInput(current_weight_kg=current, goal_weight_kg=goal), UserProfile())
    assert result.daily_calorie_deficit_target == 0


def test_calorie_deficit_keeps_3500_constant():
    # (80 - 75) * 3500 / 7
    assert calculate_calorie_deficit(80, 75) == pytest.approx(2500.0)


def test_raw_fields_are_carried_through():
    measurement = MeasurementInput(
        current_weight_kg=82.4,
        water_percent=52.1,
        chest_cm=101,
        thigh_cm=58,
        arm_cm=35,
        neck_cm=39,
        notes="after holiday",
    )
    result = compute(measurement, UserProfile())

    assert result.current_weight_kg == 82.4
    assert result.water_percent == 52.1
    assert result.chest_cm == 101
    assert result.notes == "after holiday"


def test_derived_fields_only_contains_derived_columns():
    result = compute(MeasurementInput(current_weight_kg=70), UserProfile())
    derived = result.derived_fields()

    assert set(derived) == set(DERIVED_FIELDS)
    assert "current_weight_kg" not in derived
    assert derived["bmi"] == result.bmi


def test_from_mapping_ignores_unknown_keys():
    measurement = MeasurementInput.from_mapping({"current_weight_kg": 70, "id": 3, "bmi": 1.0})
    assert measurement == MeasurementInput(current_weight_kg=70)


def test_compute_is_deterministic():
    measurement = MeasurementInput(current_weight_kg=77.7, body_fat_percent=18, waist_cm=84, hip_cm=97)
    profile = UserProfile(height_cm=181, age_years=41, biological_sex="male", activity_multiplier=1.55)
    assert compute(measurement, profile) == compute(measurement, profile)
