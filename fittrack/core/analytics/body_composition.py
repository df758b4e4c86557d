"""
身体成分与代谢指标计算（Health / Body-Composition Calculator）

输入：一次身体测量记录（MeasurementInput）+ 已归一化的用户档案（UserProfile）
输出：附带派生指标的测量记录（DerivedMeasurement）

计算顺序与字段依赖：
1. bmi                        始终计算
2. lean_body_mass_kg          仅当提供体脂率
3. skeletal_muscle_mass_kg    仅当提供体脂率（公式本身不使用体脂率）
4. waist_to_hip_ratio         仅当同时提供腰围和臀围
5. waist_to_height_ratio      仅当提供腰围
6. absi                       仅当提供腰围
7. resting_metabolic_rate     始终计算（Mifflin-St Jeor）
8. total_daily_energy_expenditure  始终计算
9. maximum_safe_weekly_fat_loss_kg 仅当提供体脂率
10. daily_calorie_deficit_target   仅当提供目标体重

质量/能量保留 2 位小数，比值（含 ABSI）保留 3 位小数。
本模块不做范围校验，输入由上游校验保证。
"""

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Mapping, Optional

from .profile import UserProfile

MASS_PLACES = 2
RATIO_PLACES = 3

# 沿用 1 lb ≈ 3500 kcal 的换算常数（输入为 kg，未做单位换算）
CALORIES_PER_UNIT_WEIGHT = 3500
SAFE_WEEKLY_LOSS_FRACTION = 0.01


@dataclass
class MeasurementInput:
    """用户提交的原始测量数据，围度单位均为 cm"""
    current_weight_kg: float
    body_fat_percent: Optional[float] = None
    goal_weight_kg: Optional[float] = None
    water_percent: Optional[float] = None
    waist_cm: Optional[float] = None
    hip_cm: Optional[float] = None
    chest_cm: Optional[float] = None
    thigh_cm: Optional[float] = None
    arm_cm: Optional[float] = None
    neck_cm: Optional[float] = None
    notes: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "MeasurementInput":
        return cls(**{k: v for k, v in data.items() if k in MEASUREMENT_FIELDS})


@dataclass
class DerivedMeasurement(MeasurementInput):
    bmi: Optional[float] = None
    lean_body_mass_kg: Optional[float] = None
    skeletal_muscle_mass_kg: Optional[float] = None
    waist_to_hip_ratio: Optional[float] = None
    waist_to_height_ratio: Optional[float] = None
    absi: Optional[float] = None
    resting_metabolic_rate: Optional[float] = None
    total_daily_energy_expenditure: Optional[float] = None
    physical_activity_level: Optional[float] = None
    maximum_safe_weekly_fat_loss_kg: Optional[float] = None
    daily_calorie_deficit_target: Optional[float] = None

    def derived_fields(self) -> Dict[str, Optional[float]]:
        """只包含派生字段，用于合并到持久化实体"""
        return {name: getattr(self, name) for name in DERIVED_FIELDS}

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


MEASUREMENT_FIELDS = tuple(f.name for f in fields(MeasurementInput))

DERIVED_FIELDS = tuple(
    f.name for f in fields(DerivedMeasurement)
    if f.name not in MEASUREMENT_FIELDS
)


def calculate_bmi(weight_kg: float, height_cm: float) -> float:
    height_m = height_cm / 100
    return round(weight_kg / (height_m ** 2), MASS_PLACES)


def calculate_lean_body_mass(weight_kg: float, body_fat_percent: float) -> float:
    return round(weight_kg * (1 - body_fat_percent / 100), MASS_PLACES)


def calculate_skeletal_muscle_mass(weight_kg: float, height_cm: float, is_male: bool) -> float:
    if is_male:
        return round(0.407 * weight_kg + 0.267 * height_cm - 19.2, MASS_PLACES)
    return round(0.252 * weight_kg + 0.473 * height_cm - 48.3, MASS_PLACES)


def calculate_waist_to_hip_ratio(waist_cm: float, hip_cm: float) -> float:
    return round(waist_cm / hip_cm, RATIO_PLACES)


def calculate_waist_to_height_ratio(waist_cm: float, height_cm: float) -> float:
    return round(waist_cm / height_cm, RATIO_PLACES)


def calculate_absi(weight_kg: float, height_cm: float, waist_cm: float) -> float:
    """A Body Shape Index：waist_m / (weight_kg^(2/3) * height_m^(1/2))"""
    height_m = height_cm / 100
    waist_m = waist_cm / 100
    return round(waist_m / ((weight_kg ** (2 / 3)) * (height_m ** 0.5)), RATIO_PLACES)


def calculate_rmr(weight_kg: float, height_cm: float, age_years: int, is_male: bool) -> float:
    """Mifflin-St Jeor"""
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age_years
    return round(base + 5 if is_male else base - 161, MASS_PLACES)


def calculate_tdee(rmr: float, activity_multiplier: float) -> float:
    return round(rmr * activity_multiplier, MASS_PLACES)


def calculate_maximum_fat_loss(weight_kg: float) -> float:
    return round(weight_kg * SAFE_WEEKLY_LOSS_FRACTION, MASS_PLACES)


def calculate_calorie_deficit(current_weight_kg: float, goal_weight_kg: float) -> float:
    difference = current_weight_kg - goal_weight_kg
    if difference <= 0:
        return 0
    weekly = difference * CALORIES_PER_UNIT_WEIGHT
    return round(weekly / 7, MASS_PLACES)


def compute(measurement: MeasurementInput, profile: Optional[UserProfile] = None) -> DerivedMeasurement:
    """计算全部派生指标。

    Args:
        measurement: 原始测量数据
        profile: 已归一化的用户档案，None 时使用默认档案

    Returns:
        DerivedMeasurement: 原始字段 + 派生字段，未满足条件的派生字段为 None
    """
    profile = profile or UserProfile()
    m = measurement
    weight = m.current_weight_kg
    height = profile.height_cm

    out = DerivedMeasurement(**{name: getattr(m, name) for name in MEASUREMENT_FIELDS})

    out.bmi = calculate_bmi(weight, height)

    if m.body_fat_percent is not None:
        out.lean_body_mass_kg = calculate_lean_body_mass(weight, m.body_fat_percent)
        out.skeletal_muscle_mass_kg = calculate_skeletal_muscle_mass(weight, height, profile.is_male)

    if m.waist_cm is not None and m.hip_cm is not None:
        out.waist_to_hip_ratio = calculate_waist_to_hip_ratio(m.waist_cm, m.hip_cm)

    if m.waist_cm is not None:
        out.waist_to_height_ratio = calculate_waist_to_height_ratio(m.waist_cm, height)
        out.absi = calculate_absi(weight, height, m.waist_cm)

    out.resting_metabolic_rate = calculate_rmr(weight, height, profile.age_years, profile.is_male)
    out.physical_activity_level = profile.activity_multiplier
    out.total_daily_energy_expenditure = calculate_tdee(out.resting_metabolic_rate, profile.activity_multiplier)

    if m.body_fat_percent is not None:
        out.maximum_safe_weekly_fat_loss_kg = calculate_maximum_fat_loss(weight)

    if m.goal_weight_kg is not None:
        out.daily_calorie_deficit_target = calculate_calorie_deficit(weight, m.goal_weight_kg)

    return out
