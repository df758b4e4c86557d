"""
饮食记录相关的 Pydantic 模型。
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Literal, Optional
import datetime

MealType = Literal['breakfast', 'lunch', 'dinner', 'snack', 'other']


class MealBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=128)
    description: Optional[str] = None
    meal_time: datetime.datetime = Field(..., description="用餐时间，不带时区时按 UTC 处理")
    meal_type: Optional[MealType] = None
    total_calories: float = Field(0, ge=0)
    total_protein_g: float = Field(0, ge=0)
    total_carbs_g: float = Field(0, ge=0)
    total_fat_g: float = Field(0, ge=0)


class MealCreate(MealBase):
    pass


class MealUpdate(BaseModel):
    """更新饮食记录（所有字段都是可选的）"""
    name: Optional[str] = Field(None, min_length=1, max_length=128)
    description: Optional[str] = None
    meal_time: Optional[datetime.datetime] = None
    meal_type: Optional[MealType] = None
    total_calories: Optional[float] = Field(None, ge=0)
    total_protein_g: Optional[float] = Field(None, ge=0)
    total_carbs_g: Optional[float] = Field(None, ge=0)
    total_fat_g: Optional[float] = Field(None, ge=0)


class Meal(MealBase):
    id: int
    user_id: int
    meal_time: Optional[datetime.datetime] = None
    protein_percentage: float
    carbs_percentage: float
    fat_percentage: float
    model_config = ConfigDict(from_attributes=True)
