"""
身体测量相关的 Pydantic 模型。

1. HealthMetricCreate：创建请求（原始测量值 + 范围校验）
2. HealthMetricUpdate：部分更新
3. HealthMetric：完整响应（原始值 + 派生指标）
4. HealthMetricSummary：最新记录的分类视图
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
import datetime


class HealthMetricBase(BaseModel):
    current_weight_kg: float = Field(..., gt=0, description="当前体重（kg）")
    body_fat_percent: Optional[float] = Field(None, ge=0, le=100, description="体脂率（%）")
    goal_weight_kg: Optional[float] = Field(None, gt=0, description="目标体重（kg）")
    water_percent: Optional[float] = Field(None, ge=0, le=100, description="身体水分（%）")
    waist_cm: Optional[float] = Field(None, gt=0)
    hip_cm: Optional[float] = Field(None, gt=0)
    chest_cm: Optional[float] = Field(None, gt=0)
    thigh_cm: Optional[float] = Field(None, gt=0)
    arm_cm: Optional[float] = Field(None, gt=0)
    neck_cm: Optional[float] = Field(None, gt=0)
    notes: Optional[str] = None


class HealthMetricCreate(HealthMetricBase):
    """创建测量记录时的请求模型"""
    pass


class HealthMetricUpdate(BaseModel):
    """更新测量记录时的请求模型（所有字段都是可选的）"""
    current_weight_kg: Optional[float] = Field(None, gt=0)
    body_fat_percent: Optional[float] = Field(None, ge=0, le=100)
    goal_weight_kg: Optional[float] = Field(None, gt=0)
    water_percent: Optional[float] = Field(None, ge=0, le=100)
    waist_cm: Optional[float] = Field(None, gt=0)
    hip_cm: Optional[float] = Field(None, gt=0)
    chest_cm: Optional[float] = Field(None, gt=0)
    thigh_cm: Optional[float] = Field(None, gt=0)
    arm_cm: Optional[float] = Field(None, gt=0)
    neck_cm: Optional[float] = Field(None, gt=0)
    notes: Optional[str] = None


class HealthMetric(HealthMetricBase):
    """测量记录完整响应模型"""
    id: int
    user_id: int
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
    created_at: Optional[datetime.datetime] = None
    model_config = ConfigDict(from_attributes=True)


class HealthMetricSummary(BaseModel):
    """最新测量记录的指标摘要"""
    bmi: Optional[float] = Field(None, description="BMI")
    tdee: Optional[float] = Field(None, description="每日总能量消耗（kcal）")
    rmr: Optional[float] = Field(None, description="静息代谢率（kcal）")
    bmi_category: str = Field(..., description="BMI 分类")
    body_fat_category: str = Field(..., description="体脂分类")
